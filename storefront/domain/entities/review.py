"""レビューエンティティ."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Review:
    """商品レビュー（評価と画像）."""

    id: str
    product_id: str
    user_id: str
    rating: int
    comment: str = ""
    images: tuple[str, ...] = ()
    created_at: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Review:
        """APIレスポンスから復元する."""
        return cls(
            id=str(data["id"]),
            product_id=str(data.get("product_id", "")),
            user_id=str(data.get("user_id", "")),
            rating=int(data.get("rating", 0)),
            comment=data.get("comment") or "",
            images=tuple(data.get("images") or ()),
            created_at=data.get("created_at"),
        )
