"""環境変数から読み込む設定."""
from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_API_URL = "http://localhost:3000"
DEFAULT_TIMEOUT_SECONDS = 15
DEFAULT_WISHLIST_FILE = ".storefront/wishlist.json"


@dataclass(frozen=True)
class Settings:
    """アプリケーション設定.

    未設定の外部サービスはインメモリ・モック実装で置き換えられる。
    """

    api_url: str | None = None
    site_url: str = DEFAULT_API_URL
    api_timeout: int = DEFAULT_TIMEOUT_SECONDS
    api_retries: int = 0
    cart_file_path: str | None = None
    cart_table_name: str | None = None
    wishlist_file_path: str = DEFAULT_WISHLIST_FILE
    wishlist_table_name: str | None = None
    cognito_client_id: str | None = None
    cognito_domain: str | None = None
    cloudinary_cloud_name: str | None = None
    cloudinary_upload_preset: str | None = None

    def __post_init__(self) -> None:
        """バリデーション."""
        if self.api_timeout <= 0:
            raise ValueError("api_timeout must be positive")
        if self.api_retries < 0:
            raise ValueError("api_retries cannot be negative")

    @classmethod
    def from_env(cls) -> Settings:
        """環境変数から設定を生成する."""
        return cls(
            api_url=os.environ.get("STOREFRONT_API_URL"),
            site_url=os.environ.get("STOREFRONT_SITE_URL", DEFAULT_API_URL),
            api_timeout=int(os.environ.get("STOREFRONT_API_TIMEOUT", DEFAULT_TIMEOUT_SECONDS)),
            api_retries=int(os.environ.get("STOREFRONT_API_RETRIES", 0)),
            cart_file_path=os.environ.get("CART_FILE_PATH"),
            cart_table_name=os.environ.get("CART_TABLE_NAME"),
            wishlist_file_path=os.environ.get("WISHLIST_FILE_PATH", DEFAULT_WISHLIST_FILE),
            wishlist_table_name=os.environ.get("WISHLIST_TABLE_NAME"),
            cognito_client_id=os.environ.get("COGNITO_CLIENT_ID"),
            cognito_domain=os.environ.get("COGNITO_DOMAIN"),
            cloudinary_cloud_name=os.environ.get("CLOUDINARY_CLOUD_NAME"),
            cloudinary_upload_preset=os.environ.get("CLOUDINARY_UPLOAD_PRESET"),
        )

    @property
    def use_http_api(self) -> bool:
        """実APIに接続するか."""
        return self.api_url is not None

    @property
    def use_dynamodb(self) -> bool:
        """永続カートにDynamoDBを使用するか."""
        return self.cart_table_name is not None

    @property
    def use_dynamodb_wishlist(self) -> bool:
        """永続お気に入りにDynamoDBを使用するか."""
        return self.wishlist_table_name is not None

    @property
    def use_cognito(self) -> bool:
        """認証にCognitoを使用するか."""
        return self.cognito_client_id is not None

    @property
    def use_cloudinary(self) -> bool:
        """画像アップロードにCloudinaryを使用するか."""
        return bool(self.cloudinary_cloud_name and self.cloudinary_upload_preset)
