"""一覧の並べ替え・ページ分割."""
from __future__ import annotations

import math
from typing import Any, Callable, TypeVar

from ..value_objects import PaginationInfo

T = TypeVar("T")


def sort_items(
    items: list[T],
    key: Callable[[T], Any],
    descending: bool = False,
) -> list[T]:
    """キーで並べ替えた新しいリストを返す（安定ソート）."""
    return sorted(items, key=key, reverse=descending)


def paginate(items: list[T], page: int, per_page: int) -> tuple[list[T], PaginationInfo]:
    """1始まりのページ番号で切り出す.

    範囲外のページ番号は最終ページ（空一覧なら1ページ目）に丸める。
    """
    if per_page <= 0:
        raise ValueError("per_page must be positive")
    total_items = len(items)
    total_pages = math.ceil(total_items / per_page)
    current = min(max(page, 1), max(total_pages, 1))
    start = (current - 1) * per_page
    info = PaginationInfo(
        current_page=current,
        total_pages=total_pages,
        total_items=total_items,
        items_per_page=per_page,
        has_next_page=current < total_pages,
        has_prev_page=current > 1,
    )
    return items[start:start + per_page], info
