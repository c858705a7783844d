from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Numeric, DateTime, Enum, Index
from database import Base
from models.enums import ExpenseCategory


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    account_from = Column(String(10), nullable=False)
    account_to = Column(String(10), nullable=False)
    currency_shortname = Column(String(3), nullable=False)  # KZT/RUB/USD...
    sum = Column(Numeric(14, 2), nullable=False)
    expense_category = Column(Enum(ExpenseCategory, values_callable=lambda e: [m.value for m in e]), nullable=False)
    datetime = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        Index("ix_transactions_account_category_datetime", "account_from", "expense_category", "datetime"),
    )

    def __repr__(self):
        return f"<Transaction id={self.id} account_from={self.account_from} sum={self.sum} datetime={self.datetime}>"
