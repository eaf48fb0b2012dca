"""ポートモジュール."""
from .api_gateway import (
    ApiAuthenticationError,
    ApiError,
    ApiForbiddenError,
    ApiGateway,
    CredentialsSource,
)
from .auth_provider import AuthProvider, AuthProviderError, AuthStateListener
from .cart_store import CartStoreError, LocalCartStore, RemoteCartStore
from .image_uploader import ImageUploader, ImageUploadError
from .notifier import Notifier

__all__ = [
    "ApiAuthenticationError",
    "ApiError",
    "ApiForbiddenError",
    "ApiGateway",
    "AuthProvider",
    "AuthProviderError",
    "AuthStateListener",
    "CartStoreError",
    "CredentialsSource",
    "ImageUploader",
    "ImageUploadError",
    "LocalCartStore",
    "Notifier",
    "RemoteCartStore",
]
