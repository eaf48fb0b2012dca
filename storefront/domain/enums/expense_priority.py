"""経費優先度の列挙型."""
from enum import Enum


class ExpensePriority(str, Enum):
    """経費の優先度."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"
