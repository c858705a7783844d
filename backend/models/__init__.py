# Import all models so they register with SQLAlchemy Base.metadata
# This ensures Base.metadata.create_all() creates all tables

from models.enums import ExpenseCategory
from models.transaction import Transaction
from models.limit import Limit

__all__ = [
    "ExpenseCategory",
    "Transaction",
    "Limit",
]
