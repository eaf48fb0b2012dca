"""画像アップロードインターフェース."""
from abc import ABC, abstractmethod


class ImageUploadError(Exception):
    """画像アップロードエラー."""

    pass


class ImageUploader(ABC):
    """画像ホスティングへのアップロード."""

    @abstractmethod
    def upload(self, filename: str, content: bytes) -> str:
        """画像をアップロードし、公開URLを返す."""
        pass
