"""ドメイン層モジュール."""
from .entities import Cart, CartItem
from .enums import AuthEventType, UserRole
from .identifiers import ProductId, UserId
from .ports import (
    ApiError,
    ApiGateway,
    AuthProvider,
    LocalCartStore,
    RemoteCartStore,
)
from .services import CartMerger
from .value_objects import AuthSession, AuthUser, Money

__all__ = [
    # Identifiers
    "ProductId",
    "UserId",
    # Enums
    "AuthEventType",
    "UserRole",
    # Value Objects
    "AuthSession",
    "AuthUser",
    "Money",
    # Entities
    "Cart",
    "CartItem",
    # Ports
    "ApiError",
    "ApiGateway",
    "AuthProvider",
    "LocalCartStore",
    "RemoteCartStore",
    # Services
    "CartMerger",
]
