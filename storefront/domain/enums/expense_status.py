"""経費ステータスの列挙型."""
from enum import Enum


class ExpenseStatus(str, Enum):
    """経費の承認ステータス."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    PAID = "paid"
    CANCELLED = "cancelled"
