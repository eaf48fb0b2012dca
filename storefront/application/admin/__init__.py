"""管理画面モジュール."""
from .expense_category_management import ExpenseCategoryManagement
from .expense_dashboard import ExpenseDashboard
from .expense_management import ExpenseManagement
from .order_management import OrderManagement
from .product_management import ProductManagement

__all__ = [
    "ExpenseCategoryManagement",
    "ExpenseDashboard",
    "ExpenseManagement",
    "OrderManagement",
    "ProductManagement",
]
