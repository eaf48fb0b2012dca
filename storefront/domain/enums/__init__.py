"""列挙型モジュール."""
from .address_type import AddressType
from .auth_event_type import AuthEventType
from .expense_bulk_action import ExpenseBulkAction
from .expense_payment_method import ExpensePaymentMethod
from .expense_priority import ExpensePriority
from .expense_status import ExpenseStatus
from .order_status import OrderStatus
from .product_filter import ProductFilter
from .user_role import UserRole

__all__ = [
    "AddressType",
    "AuthEventType",
    "ExpenseBulkAction",
    "ExpensePaymentMethod",
    "ExpensePriority",
    "ExpenseStatus",
    "OrderStatus",
    "ProductFilter",
    "UserRole",
]
