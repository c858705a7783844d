"""
transaction_service.py — Transactions & limit checks
Stores transactions, flags the current limit once the window's spend goes
over the cap, and reports the transactions that went over it.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable

from pydantic import ValidationError
from sqlalchemy import func
from sqlalchemy.orm import Session

from exceptions import TransactionNotCreatedError, TransactionNotFoundError, field_errors_message
from models.enums import ExpenseCategory
from models.limit import Limit
from models.transaction import Transaction
from schemas import TransactionCreate
from services.limit_service import LimitService

logger = logging.getLogger(__name__)


def select_exceeded(transactions: Iterable[Transaction], limit_sum) -> list[Transaction]:
    """Return the transaction that took the remaining cap below zero and every one after it.

    ``transactions`` must be in chronological order from the window start.
    Spending exactly the cap does not exceed it.
    """
    remaining = Decimal(limit_sum)
    exceeded: list[Transaction] = []
    for t in transactions:
        if exceeded:
            exceeded.append(t)
            continue
        remaining -= Decimal(t.sum)
        if remaining < 0:
            exceeded.append(t)
    return exceeded


class TransactionService:
    @staticmethod
    def find_all(db: Session) -> list[Transaction]:
        return db.query(Transaction).order_by(Transaction.id).all()

    @staticmethod
    def find_one(db: Session, transaction_id: int) -> Transaction:
        transaction = db.get(Transaction, transaction_id)
        if transaction is None:
            raise TransactionNotFoundError()
        return transaction

    @staticmethod
    def window_transactions(db: Session, account: str, category: ExpenseCategory, since: datetime) -> list[Transaction]:
        """Account's transactions in a category from ``since`` onwards, oldest first."""
        return (
            db.query(Transaction)
            .filter(
                Transaction.account_from == account,
                Transaction.expense_category == category,
                Transaction.datetime >= since,
            )
            .order_by(Transaction.datetime.asc(), Transaction.id.asc())
            .all()
        )

    @staticmethod
    def window_total(db: Session, account: str, category: ExpenseCategory, since: datetime) -> Decimal:
        total = db.query(func.sum(Transaction.sum)).filter(
            Transaction.account_from == account,
            Transaction.expense_category == category,
            Transaction.datetime >= since,
        ).scalar()
        return Decimal(total or 0)

    @staticmethod
    def find_exceeded(db: Session, account: str, category: ExpenseCategory) -> list[Transaction]:
        limit = LimitService.find_one_by_account(db, account, category)
        transactions = TransactionService.window_transactions(db, account, category, limit.limit_datetime)
        logger.info(f"Loaded {len(transactions)} transactions for {account}/{category.value} since {limit.limit_datetime}")
        return select_exceeded(transactions, limit.limit_sum)

    @staticmethod
    def save(db: Session, payload: dict) -> Transaction:
        """Validate and store a transaction, then re-check the account's current limit."""
        try:
            data = TransactionCreate.model_validate(payload)
        except ValidationError as e:
            raise TransactionNotCreatedError(field_errors_message(e)) from e

        transaction = Transaction(**data.model_dump(), datetime=datetime.now(timezone.utc))
        try:
            db.add(transaction)
            db.flush()
            TransactionService._check_limit(db, transaction)
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(transaction)
        logger.info(f"Transaction {transaction.id} saved: {transaction.sum} {transaction.currency_shortname} from {transaction.account_from}")
        return transaction

    @staticmethod
    def _check_limit(db: Session, transaction: Transaction) -> Limit | None:
        limit = LimitService.find_current(db, transaction.account_from, transaction.expense_category)
        if limit is None:
            logger.info(f"No limit for {transaction.account_from}/{transaction.expense_category.value}, check skipped")
            return None

        total = TransactionService.window_total(db, transaction.account_from, transaction.expense_category, limit.limit_datetime)
        if total > limit.limit_sum and not limit.limit_exceeded:
            limit.limit_exceeded = True
            logger.info(f"Limit {limit.id} exceeded: spent {total} of {limit.limit_sum}")
        return limit
