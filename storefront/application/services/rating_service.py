"""商品レビュー（評価）サービス."""
from __future__ import annotations

import logging

from storefront.domain.entities import Review
from storefront.domain.ports import ApiError, ApiGateway, ImageUploader
from storefront.domain.services import ReviewNavigator, ViewerPosition

from .errors import FormValidationError

logger = logging.getLogger(__name__)

_ALL_PRODUCTS = "__all__"


class RatingService:
    """レビュー一覧のキャッシュ、画像ビューアの状態、評価の投稿を扱う."""

    def __init__(self, api: ApiGateway, uploader: ImageUploader) -> None:
        """初期化."""
        self._api = api
        self._uploader = uploader
        self._cache: dict[str, list[Review]] = {}
        self._reviews: list[Review] = []
        self._product_id: str = ""
        self._show_view_review_modal = False
        self._selected_review_index: int | None = None
        self._selected_img_index = 0

    @property
    def reviews(self) -> list[Review]:
        """直近に取得したレビュー."""
        return list(self._reviews)

    @property
    def product_id(self) -> str:
        """評価対象の商品ID（未選択なら空文字）."""
        return self._product_id

    def set_product_id(self, product_id: str) -> None:
        """評価対象の商品を設定する."""
        self._product_id = product_id

    def fetch_reviews(self, product_id: str | None = None, force: bool = False) -> list[Review]:
        """レビューを取得する. 取得済みの商品はキャッシュから返す.

        取得に失敗した場合は直前の一覧を保ったまま返す。
        """
        key = product_id or _ALL_PRODUCTS
        if not force and key in self._cache:
            self._reviews = self._cache[key]
            return self.reviews

        params = {"product_id": product_id} if product_id else None
        try:
            data = self._api.get("/api/ratings", params=params)
        except ApiError as e:
            logger.error(f"Error fetching ratings: {e}")
            return self.reviews

        reviews = [Review.from_dict(r) for r in data or []]
        self._cache[key] = reviews
        self._reviews = reviews
        return self.reviews

    # --- 画像ビューア ---

    @property
    def show_view_review_modal(self) -> bool:
        """ビューアを表示中か."""
        return self._show_view_review_modal

    @property
    def selected_review_index(self) -> int | None:
        """表示中のレビュー位置."""
        return self._selected_review_index

    @property
    def selected_img_index(self) -> int:
        """表示中の画像位置."""
        return self._selected_img_index

    def open_viewer(self, review_index: int, image_index: int = 0) -> None:
        """指定レビューの画像でビューアを開く."""
        if not 0 <= review_index < len(self._reviews):
            raise IndexError(f"Review index out of range: {review_index}")
        self._selected_review_index = review_index
        self._selected_img_index = image_index
        self._show_view_review_modal = True

    def close_viewer(self) -> None:
        """ビューアを閉じる. 画像位置は先頭に戻す."""
        self._show_view_review_modal = False
        self._selected_img_index = 0

    def current_image(self) -> str | None:
        """表示中の画像URL."""
        if self._selected_review_index is None:
            return None
        return ReviewNavigator(self._reviews).current_image(self._position())

    def next_image(self) -> None:
        """次の画像へ（最後のレビューの最後の画像なら止まる）."""
        self._move(forward=True)

    def previous_image(self) -> None:
        """前の画像へ（先頭なら止まる）."""
        self._move(forward=False)

    def _position(self) -> ViewerPosition:
        return ViewerPosition(self._selected_review_index or 0, self._selected_img_index)

    def _move(self, forward: bool) -> None:
        if self._selected_review_index is None or not self._reviews:
            return
        navigator = ReviewNavigator(self._reviews)
        position = self._position()
        moved = navigator.next(position) if forward else navigator.previous(position)
        self._selected_review_index = moved.review_index
        self._selected_img_index = moved.image_index

    # --- 投稿 ---

    def submit_rating(
        self,
        user_id: str,
        rating: int,
        comment: str = "",
        images: list[str | tuple[str, bytes]] | None = None,
    ) -> Review | None:
        """評価を投稿する.

        images には公開済みURL、または (ファイル名, 内容) を渡す。後者はアップロードしてから送る。

        Raises:
            FormValidationError: 評価が1〜5でない、または商品が未選択
            ImageUploadError: 画像のアップロードに失敗
            ApiError: 投稿に失敗
        """
        errors: dict[str, str] = {}
        if not self._product_id:
            errors["product_id"] = "Product is required"
        if not isinstance(rating, int) or not 1 <= rating <= 5:
            errors["rating"] = "Rating must be between 1 and 5"
        if errors:
            raise FormValidationError(errors)

        uploaded_urls = []
        for image in images or []:
            if isinstance(image, str):
                uploaded_urls.append(image)
            else:
                filename, content = image
                uploaded_urls.append(self._uploader.upload(filename, content))

        product_id = self._product_id
        data = self._api.post(
            "/api/ratings",
            json={
                "user_id": user_id,
                "product_id": product_id,
                "rating": rating,
                "comment": comment,
                "images": uploaded_urls,
            },
        )
        self._product_id = ""
        self.fetch_reviews(product_id, force=True)

        created = data.get("rating") if isinstance(data, dict) else None
        return Review.from_dict(created) if created else None
