"""
limit_service.py — Spending limits
Sets per-account, per-category caps and resolves the limit currently in force.
A new limit never edits an older one: it opens a fresh window starting now.
"""

import logging
from datetime import datetime, timezone

from pydantic import ValidationError
from sqlalchemy.orm import Session

from config import DEFAULT_LIMIT_CURRENCY
from exceptions import LimitNotCreatedError, LimitNotFoundError, field_errors_message
from models.enums import ExpenseCategory
from models.limit import Limit
from schemas import LimitCreate

logger = logging.getLogger(__name__)


class LimitService:
    @staticmethod
    def find_current(db: Session, account: str, category: ExpenseCategory) -> Limit | None:
        """Latest limit for the account and category, or None."""
        return (
            db.query(Limit)
            .filter(Limit.account == account, Limit.expense_category == category)
            .order_by(Limit.limit_datetime.desc(), Limit.id.desc())
            .first()
        )

    @staticmethod
    def find_one_by_account(db: Session, account: str, category: ExpenseCategory) -> Limit:
        limit = LimitService.find_current(db, account, category)
        if limit is None:
            raise LimitNotFoundError()
        return limit

    @staticmethod
    def find_all(db: Session, account: str | None = None) -> list[Limit]:
        query = db.query(Limit)
        if account:
            query = query.filter(Limit.account == account)
        return query.order_by(Limit.limit_datetime.desc(), Limit.id.desc()).all()

    @staticmethod
    def set_limit(db: Session, payload: dict) -> Limit:
        try:
            data = LimitCreate.model_validate(payload)
        except ValidationError as e:
            raise LimitNotCreatedError(field_errors_message(e)) from e

        limit = Limit(
            account=data.account,
            expense_category=data.expense_category,
            limit_sum=data.limit_sum,
            limit_currency_shortname=(data.limit_currency_shortname or DEFAULT_LIMIT_CURRENCY).upper(),
            limit_datetime=datetime.now(timezone.utc),
            limit_exceeded=False,
        )
        try:
            db.add(limit)
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(limit)
        logger.info(
            f"Limit {limit.limit_sum} {limit.limit_currency_shortname} set for "
            f"{limit.account}/{limit.expense_category.value}"
        )
        return limit
