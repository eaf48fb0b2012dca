"""クライアントモジュール."""
from .cloudinary_image_uploader import CloudinaryImageUploader, InMemoryImageUploader
from .mock_api_gateway import MockApiGateway, RecordedCall
from .notifiers import InMemoryNotifier, LoggingNotifier
from .storefront_api_client import StorefrontApiClient

__all__ = [
    "CloudinaryImageUploader",
    "InMemoryImageUploader",
    "InMemoryNotifier",
    "LoggingNotifier",
    "MockApiGateway",
    "RecordedCall",
    "StorefrontApiClient",
]
