"""インフラストラクチャ層モジュール."""
# DynamoDB / Cognito 実装は boto3 クライアントを生成するため、必要な時に
# 各サブモジュールから直接インポートする
from .clients import (
    InMemoryImageUploader,
    InMemoryNotifier,
    LoggingNotifier,
    MockApiGateway,
    StorefrontApiClient,
)
from .providers import InMemoryAuthProvider
from .repositories import FileCartStore, InMemoryCartStore, InMemoryUserCartStore

__all__ = [
    "FileCartStore",
    "InMemoryAuthProvider",
    "InMemoryCartStore",
    "InMemoryImageUploader",
    "InMemoryNotifier",
    "InMemoryUserCartStore",
    "LoggingNotifier",
    "MockApiGateway",
    "StorefrontApiClient",
]
