"""Cloudinary への画像アップロード."""
from __future__ import annotations

import logging
import os

import requests

from storefront.domain.ports import ImageUploader, ImageUploadError

logger = logging.getLogger(__name__)

UPLOAD_URL = "https://api.cloudinary.com/v1_1/{cloud_name}/image/upload"


class CloudinaryImageUploader(ImageUploader):
    """未署名アップロードプリセットで Cloudinary に画像を送る."""

    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        cloud_name: str | None = None,
        upload_preset: str | None = None,
        timeout: int | None = None,
    ) -> None:
        """初期化."""
        self._cloud_name = cloud_name or os.environ.get("CLOUDINARY_CLOUD_NAME", "")
        self._upload_preset = upload_preset or os.environ.get("CLOUDINARY_UPLOAD_PRESET", "")
        self._timeout = timeout or self.DEFAULT_TIMEOUT
        self._session = requests.Session()

    def upload(self, filename: str, content: bytes) -> str:
        """画像をアップロードし、secure_url を返す."""
        if not self._cloud_name or not self._upload_preset:
            raise ImageUploadError(
                "Missing Cloudinary settings (CLOUDINARY_CLOUD_NAME or CLOUDINARY_UPLOAD_PRESET)"
            )

        try:
            response = self._session.post(
                UPLOAD_URL.format(cloud_name=self._cloud_name),
                files={"file": (filename, content)},
                data={"upload_preset": self._upload_preset},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Failed to upload {filename}: {e}")
            raise ImageUploadError(f"Cloudinary upload failed: {e}") from e

        try:
            data = response.json()
        except ValueError:
            data = {}

        if not response.ok:
            error = data.get("error") if isinstance(data, dict) else None
            message = error.get("message") if isinstance(error, dict) else response.text
            logger.error(f"Failed to upload {filename}: {message}")
            raise ImageUploadError(f"Cloudinary upload failed: {message}")

        url = data.get("secure_url") if isinstance(data, dict) else None
        if not url:
            raise ImageUploadError("Cloudinary response did not include secure_url")
        return url


class InMemoryImageUploader(ImageUploader):
    """画像アップロードのインメモリ実装."""

    def __init__(self) -> None:
        """初期化."""
        self.uploads: dict[str, bytes] = {}

    def upload(self, filename: str, content: bytes) -> str:
        """内容を保持し、擬似URLを返す."""
        url = f"memory://uploads/{len(self.uploads) + 1}/{filename}"
        self.uploads[url] = content
        return url
