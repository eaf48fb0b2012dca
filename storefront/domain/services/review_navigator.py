"""レビュー画像ビューアのナビゲーション."""
from __future__ import annotations

from dataclasses import dataclass

from ..entities import Review


@dataclass(frozen=True)
class ViewerPosition:
    """ビューアの表示位置."""

    review_index: int
    image_index: int


class ReviewNavigator:
    """全レビューの画像を1列に並べたものとして前後に移動する."""

    def __init__(self, reviews: list[Review]) -> None:
        """初期化."""
        self._reviews = reviews

    def current_image(self, position: ViewerPosition) -> str | None:
        """表示中の画像URL（画像がなければNone）."""
        if not 0 <= position.review_index < len(self._reviews):
            return None
        images = self._reviews[position.review_index].images
        if 0 <= position.image_index < len(images):
            return images[position.image_index]
        return None

    def has_next(self, position: ViewerPosition) -> bool:
        """次へ進めるか."""
        last_review = len(self._reviews) - 1
        image_count = len(self._reviews[position.review_index].images)
        return not (
            position.review_index == last_review
            and position.image_index >= max(image_count, 1) - 1
        )

    def has_previous(self, position: ViewerPosition) -> bool:
        """前へ戻れるか."""
        return not (position.review_index == 0 and position.image_index == 0)

    def next(self, position: ViewerPosition) -> ViewerPosition:
        """次の画像へ. 末尾なら位置は変わらない."""
        images = self._reviews[position.review_index].images
        if position.image_index < len(images) - 1:
            return ViewerPosition(position.review_index, position.image_index + 1)
        if position.review_index < len(self._reviews) - 1:
            return ViewerPosition(position.review_index + 1, 0)
        return position

    def previous(self, position: ViewerPosition) -> ViewerPosition:
        """前の画像へ. 前のレビューに戻るときはその最後の画像を指す."""
        if position.image_index > 0:
            return ViewerPosition(position.review_index, position.image_index - 1)
        if position.review_index > 0:
            prev_images = self._reviews[position.review_index - 1].images
            return ViewerPosition(position.review_index - 1, max(len(prev_images), 1) - 1)
        return position
