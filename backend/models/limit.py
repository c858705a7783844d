from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Numeric, DateTime, Boolean, Enum, Index
from database import Base
from models.enums import ExpenseCategory


class Limit(Base):
    __tablename__ = "limits"

    id = Column(Integer, primary_key=True, autoincrement=True)
    account = Column(String(10), nullable=False)
    expense_category = Column(Enum(ExpenseCategory, values_callable=lambda e: [m.value for m in e]), nullable=False)
    limit_sum = Column(Numeric(14, 2), nullable=False)
    limit_currency_shortname = Column(String(3), nullable=False, default="USD")
    limit_datetime = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))  # window start
    limit_exceeded = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index("ix_limits_account_category_datetime", "account", "expense_category", "limit_datetime"),
    )
