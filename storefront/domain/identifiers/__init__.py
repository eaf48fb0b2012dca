"""識別子モジュール."""
from .product_id import ProductId
from .user_id import UserId

__all__ = [
    "ProductId",
    "UserId",
]
