"""ページネーション情報の値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PaginationInfo:
    """一覧のページ情報."""

    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def empty(cls, items_per_page: int = 12) -> PaginationInfo:
        """空一覧のページ情報を生成する."""
        return cls(
            current_page=1,
            total_pages=0,
            total_items=0,
            items_per_page=items_per_page,
            has_next_page=False,
            has_prev_page=False,
        )

    @classmethod
    def from_dict(cls, data: dict | None, items_per_page: int = 12) -> PaginationInfo:
        """APIレスポンスの pagination から生成する."""
        if not data:
            return cls.empty(items_per_page)
        return cls(
            current_page=int(data.get("currentPage", 1)),
            total_pages=int(data.get("totalPages", 0)),
            total_items=int(data.get("totalItems", 0)),
            items_per_page=int(data.get("itemsPerPage", items_per_page)),
            has_next_page=bool(data.get("hasNextPage", False)),
            has_prev_page=bool(data.get("hasPrevPage", False)),
        )
