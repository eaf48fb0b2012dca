"""管理画面の商品フィルタ."""
from enum import Enum


class ProductFilter(str, Enum):
    """商品一覧の絞り込み."""

    ALL = "all"
    FEATURED = "featured"
    ACTIVE = "active"
