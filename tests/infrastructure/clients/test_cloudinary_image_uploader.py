"""CloudinaryImageUploaderのテスト."""
from unittest.mock import MagicMock, patch

import pytest
import requests

from storefront.domain.ports import ImageUploadError
from storefront.infrastructure.clients import CloudinaryImageUploader, InMemoryImageUploader


def _response(status_code: int, body: dict) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.json.return_value = body
    response.text = str(body)
    return response


class TestCloudinaryImageUploader:
    """CloudinaryImageUploaderの単体テスト."""

    def test_未署名プリセットでアップロードしてsecure_urlを返す(self) -> None:
        uploader = CloudinaryImageUploader(cloud_name="demo", upload_preset="reviews")
        with patch.object(uploader._session, "post") as mock_post:
            mock_post.return_value = _response(200, {"secure_url": "https://res.cloudinary.com/demo/a.jpg"})

            url = uploader.upload("a.jpg", b"data")

            assert url == "https://res.cloudinary.com/demo/a.jpg"
            args, kwargs = mock_post.call_args
            assert args[0] == "https://api.cloudinary.com/v1_1/demo/image/upload"
            assert kwargs["files"] == {"file": ("a.jpg", b"data")}
            assert kwargs["data"] == {"upload_preset": "reviews"}

    def test_設定がなければエラー(self, monkeypatch) -> None:
        monkeypatch.delenv("CLOUDINARY_CLOUD_NAME", raising=False)
        monkeypatch.delenv("CLOUDINARY_UPLOAD_PRESET", raising=False)
        uploader = CloudinaryImageUploader()
        with pytest.raises(ImageUploadError, match="Missing Cloudinary settings"):
            uploader.upload("a.jpg", b"data")

    def test_エラーレスポンスのメッセージを含める(self) -> None:
        uploader = CloudinaryImageUploader(cloud_name="demo", upload_preset="reviews")
        with patch.object(uploader._session, "post") as mock_post:
            mock_post.return_value = _response(400, {"error": {"message": "Invalid image file"}})
            with pytest.raises(ImageUploadError, match="Invalid image file"):
                uploader.upload("a.txt", b"text")

    def test_通信エラー(self) -> None:
        uploader = CloudinaryImageUploader(cloud_name="demo", upload_preset="reviews")
        with patch.object(uploader._session, "post") as mock_post:
            mock_post.side_effect = requests.Timeout("timed out")
            with pytest.raises(ImageUploadError, match="timed out"):
                uploader.upload("a.jpg", b"data")

    def test_secure_urlがなければエラー(self) -> None:
        uploader = CloudinaryImageUploader(cloud_name="demo", upload_preset="reviews")
        with patch.object(uploader._session, "post") as mock_post:
            mock_post.return_value = _response(200, {})
            with pytest.raises(ImageUploadError, match="secure_url"):
                uploader.upload("a.jpg", b"data")


class TestInMemoryImageUploader:
    """InMemoryImageUploaderの単体テスト."""

    def test_連番のURLを返す(self) -> None:
        uploader = InMemoryImageUploader()
        assert uploader.upload("a.jpg", b"1") == "memory://uploads/1/a.jpg"
        assert uploader.upload("b.jpg", b"2") == "memory://uploads/2/b.jpg"
