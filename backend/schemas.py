"""
schemas.py — Request and response models
Flat JSON records mirroring the Transaction and Limit rows.
"""

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.enums import ExpenseCategory

ACCOUNT_PATTERN = r"^[0-9]{10}$"
CURRENCY_PATTERN = r"^[A-Za-z]{3}$"


def _as_utc(value: dt.datetime) -> dt.datetime:
    """SQLite hands datetimes back naive; they are stored in UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=dt.timezone.utc)
    return value.astimezone(dt.timezone.utc)


class TransactionCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    account_from: str = Field(pattern=ACCOUNT_PATTERN)
    account_to: str = Field(pattern=ACCOUNT_PATTERN)
    currency_shortname: str = Field(pattern=CURRENCY_PATTERN)
    sum: Decimal = Field(gt=0, max_digits=14, decimal_places=2)
    expense_category: ExpenseCategory

    @field_validator("currency_shortname")
    @classmethod
    def upper_currency(cls, value: str) -> str:
        return value.upper()


class TransactionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    account_from: str
    account_to: str
    currency_shortname: str
    sum: float
    expense_category: ExpenseCategory
    datetime: dt.datetime

    @field_validator("datetime")
    @classmethod
    def utc_datetime(cls, value: dt.datetime) -> dt.datetime:
        return _as_utc(value)


class LimitCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    account: str = Field(pattern=ACCOUNT_PATTERN)
    expense_category: ExpenseCategory
    limit_sum: Decimal = Field(ge=0, max_digits=14, decimal_places=2)
    limit_currency_shortname: str | None = Field(default=None, pattern=CURRENCY_PATTERN)


class LimitRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    account: str
    expense_category: ExpenseCategory
    limit_sum: float
    limit_currency_shortname: str
    limit_datetime: dt.datetime
    limit_exceeded: bool

    @field_validator("limit_datetime")
    @classmethod
    def utc_limit_datetime(cls, value: dt.datetime) -> dt.datetime:
        return _as_utc(value)


class ErrorResponse(BaseModel):
    message: str
    timestamp: int
