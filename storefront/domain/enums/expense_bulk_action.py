"""経費一括操作の列挙型."""
from enum import Enum


class ExpenseBulkAction(str, Enum):
    """POST /api/admin/expenses/actions の action."""

    APPROVE = "approve"
    REJECT = "reject"
    MARK_PAID = "mark_paid"
    CANCEL = "cancel"
