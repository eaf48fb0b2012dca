"""リポジトリモジュール."""
from .dynamodb_user_cart_store import DynamoDBUserCartStore
from .file_cart_store import FileCartStore
from .in_memory_cart_store import InMemoryCartStore
from .in_memory_user_cart_store import InMemoryUserCartStore

__all__ = [
    "DynamoDBUserCartStore",
    "FileCartStore",
    "InMemoryCartStore",
    "InMemoryUserCartStore",
]
