"""ドメインサービスモジュール."""
from .address_validator import (
    AddressValidator,
    ValidationResult,
    format_phone_number,
    format_postal_code,
)
from .cart_merger import CartMerger
from .list_query import paginate, sort_items
from .review_navigator import ReviewNavigator, ViewerPosition
from .wishlist_merger import WishlistMerger

__all__ = [
    "AddressValidator",
    "CartMerger",
    "ReviewNavigator",
    "ValidationResult",
    "ViewerPosition",
    "WishlistMerger",
    "format_phone_number",
    "format_postal_code",
    "paginate",
    "sort_items",
]
