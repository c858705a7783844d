import enum


class ExpenseCategory(str, enum.Enum):
    PRODUCT = "product"
    SERVICE = "service"
