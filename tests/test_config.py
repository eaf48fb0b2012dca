"""Settingsのテスト."""
import pytest

from storefront.config import Settings

ENV_NAMES = [
    "STOREFRONT_API_URL",
    "STOREFRONT_SITE_URL",
    "STOREFRONT_API_TIMEOUT",
    "STOREFRONT_API_RETRIES",
    "CART_FILE_PATH",
    "CART_TABLE_NAME",
    "WISHLIST_FILE_PATH",
    "WISHLIST_TABLE_NAME",
    "COGNITO_CLIENT_ID",
    "COGNITO_DOMAIN",
    "CLOUDINARY_CLOUD_NAME",
    "CLOUDINARY_UPLOAD_PRESET",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Settingsの単体テスト."""

    def test_未設定ならモック実装を使う(self, clean_env) -> None:
        settings = Settings.from_env()

        assert settings.api_timeout == 15
        assert settings.api_retries == 0
        assert settings.site_url == "http://localhost:3000"
        assert not settings.use_http_api
        assert not settings.use_dynamodb
        assert not settings.use_dynamodb_wishlist
        assert settings.wishlist_file_path == ".storefront/wishlist.json"
        assert not settings.use_cognito
        assert not settings.use_cloudinary

    def test_環境変数から読み込む(self, clean_env) -> None:
        clean_env.setenv("STOREFRONT_API_URL", "https://api.example.com")
        clean_env.setenv("STOREFRONT_API_TIMEOUT", "30")
        clean_env.setenv("STOREFRONT_API_RETRIES", "2")
        clean_env.setenv("CART_TABLE_NAME", "carts")
        clean_env.setenv("WISHLIST_TABLE_NAME", "wishlists")
        clean_env.setenv("WISHLIST_FILE_PATH", "/tmp/wishlist.json")
        clean_env.setenv("COGNITO_CLIENT_ID", "client-1")

        settings = Settings.from_env()

        assert settings.api_url == "https://api.example.com"
        assert settings.api_timeout == 30
        assert settings.api_retries == 2
        assert settings.use_http_api
        assert settings.use_dynamodb
        assert settings.use_dynamodb_wishlist
        assert settings.wishlist_file_path == "/tmp/wishlist.json"
        assert settings.use_cognito

    def test_Cloudinaryは両方の設定が必要(self, clean_env) -> None:
        clean_env.setenv("CLOUDINARY_CLOUD_NAME", "demo")
        assert not Settings.from_env().use_cloudinary
        clean_env.setenv("CLOUDINARY_UPLOAD_PRESET", "reviews")
        assert Settings.from_env().use_cloudinary

    def test_タイムアウトは正の値(self) -> None:
        with pytest.raises(ValueError, match="api_timeout"):
            Settings(api_timeout=0)

    def test_再試行回数は負にできない(self) -> None:
        with pytest.raises(ValueError, match="api_retries"):
            Settings(api_retries=-1)
