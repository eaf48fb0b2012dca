"""エンティティモジュール."""
from .cart import Cart
from .cart_item import CartItem
from .expense import CategoryBreakdown, Expense, ExpenseCategory, ExpenseSummary, MonthlyTrend
from .order import CreateOrderRequest, Order, OrderItem, OrderSummary, Payment, ShippingAddress
from .product import Category, Product, ProductVariant, SimplifiedProduct
from .review import Review
from .user_profile import UserAddress, UserProfile

__all__ = [
    "Cart",
    "CartItem",
    "Category",
    "CategoryBreakdown",
    "CreateOrderRequest",
    "Expense",
    "ExpenseCategory",
    "ExpenseSummary",
    "MonthlyTrend",
    "Order",
    "OrderItem",
    "OrderSummary",
    "Payment",
    "Product",
    "ProductVariant",
    "Review",
    "ShippingAddress",
    "SimplifiedProduct",
    "UserAddress",
    "UserProfile",
]
