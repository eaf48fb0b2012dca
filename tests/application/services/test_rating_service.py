"""RatingServiceのテスト."""
import pytest

from storefront.application.services import FormValidationError, RatingService
from storefront.domain.ports import ApiError
from storefront.infrastructure.clients import InMemoryImageUploader, MockApiGateway

REVIEWS = [
    {"id": "r1", "product_id": "p1", "user_id": "u1", "rating": 5, "images": ["a1", "a2"]},
    {"id": "r2", "product_id": "p1", "user_id": "u2", "rating": 4, "images": ["b1"]},
]


def _build() -> tuple[RatingService, MockApiGateway, InMemoryImageUploader]:
    api = MockApiGateway()
    api.set_response("GET", "/api/ratings", REVIEWS)
    uploader = InMemoryImageUploader()
    return RatingService(api, uploader), api, uploader


class TestFetchReviews:
    """レビュー取得のテスト."""

    def test_商品ごとにキャッシュする(self) -> None:
        service, api, _ = _build()
        service.fetch_reviews("p1")
        reviews = service.fetch_reviews("p1")
        assert [r.id for r in reviews] == ["r1", "r2"]
        assert len(api.calls_to("GET", "/api/ratings")) == 1
        assert api.calls[0].params == {"product_id": "p1"}

    def test_forceで取り直す(self) -> None:
        service, api, _ = _build()
        service.fetch_reviews("p1")
        service.fetch_reviews("p1", force=True)
        assert len(api.calls_to("GET", "/api/ratings")) == 2

    def test_商品指定なしは全件(self) -> None:
        service, api, _ = _build()
        service.fetch_reviews()
        assert api.calls[0].params is None

    def test_失敗しても直前の一覧を保つ(self) -> None:
        service, api, _ = _build()
        service.fetch_reviews("p1")
        api.set_error("GET", "/api/ratings", ApiError("boom"))
        reviews = service.fetch_reviews("p2")
        assert [r.id for r in reviews] == ["r1", "r2"]


class TestViewer:
    """画像ビューアのテスト."""

    def test_全レビューの画像を順に移動する(self) -> None:
        service, _, _ = _build()
        service.fetch_reviews("p1")
        service.open_viewer(0)
        assert service.show_view_review_modal is True
        assert service.current_image() == "a1"

        service.next_image()
        assert service.current_image() == "a2"
        service.next_image()
        assert service.current_image() == "b1"
        service.next_image()
        assert service.current_image() == "b1"

        service.previous_image()
        assert (service.selected_review_index, service.selected_img_index) == (0, 1)

    def test_範囲外のレビューは開けない(self) -> None:
        service, _, _ = _build()
        service.fetch_reviews("p1")
        with pytest.raises(IndexError):
            service.open_viewer(5)

    def test_閉じると画像位置を先頭に戻す(self) -> None:
        service, _, _ = _build()
        service.fetch_reviews("p1")
        service.open_viewer(0, image_index=1)
        service.close_viewer()
        assert service.show_view_review_modal is False
        assert service.selected_img_index == 0


class TestSubmitRating:
    """評価投稿のテスト."""

    def test_画像をアップロードして投稿し一覧を取り直す(self) -> None:
        service, api, uploader = _build()
        api.set_response(
            "POST",
            "/api/ratings",
            {"rating": {"id": "r3", "product_id": "p1", "user_id": "u9", "rating": 4, "images": []}},
        )
        service.set_product_id("p1")

        review = service.submit_rating(
            "u9", 4, "Soft fabric", images=["https://cdn/x.jpg", ("photo.jpg", b"\xff\xd8")]
        )

        assert review.id == "r3"
        body = api.calls_to("POST", "/api/ratings")[0].json
        assert body["product_id"] == "p1"
        assert body["images"] == ["https://cdn/x.jpg", "memory://uploads/1/photo.jpg"]
        assert uploader.uploads["memory://uploads/1/photo.jpg"] == b"\xff\xd8"
        assert service.product_id == ""
        assert api.calls_to("GET", "/api/ratings")[-1].params == {"product_id": "p1"}

    def test_商品未選択と評価範囲外はエラー(self) -> None:
        service, api, _ = _build()
        with pytest.raises(FormValidationError) as exc_info:
            service.submit_rating("u9", 6)
        assert set(exc_info.value.field_errors) == {"product_id", "rating"}
        assert api.calls == []
