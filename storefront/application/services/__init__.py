"""アプリケーションサービスモジュール."""
from .auth_service import AuthResult, AuthService, SignOutResult
from .cart_persistence import CartPersistence
from .cart_service import CartService
from .catalog_preloader import CatalogPreloader
from .errors import FormValidationError
from .order_service import CheckoutResult, OrderService
from .profile_service import ProfileService
from .rating_service import RatingService
from .request_generation import LatestRequestGuard
from .wishlist_service import WishlistService

__all__ = [
    "AuthResult",
    "AuthService",
    "CartPersistence",
    "CartService",
    "CatalogPreloader",
    "CheckoutResult",
    "FormValidationError",
    "LatestRequestGuard",
    "OrderService",
    "ProfileService",
    "RatingService",
    "SignOutResult",
    "WishlistService",
]
