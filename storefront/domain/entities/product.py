"""商品・カテゴリエンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..identifiers import ProductId
from ..value_objects import Money

UNCATEGORIZED = "Uncategorized"


@dataclass(frozen=True)
class ProductVariant:
    """商品のサイズ・色バリエーション."""

    id: str
    price: Money
    stock_quantity: int
    size: str
    sku: str | None = None
    color: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProductVariant:
        """辞書から復元する."""
        return cls(
            id=str(data["id"]),
            price=Money.of(data.get("price", 0)),
            stock_quantity=int(data.get("stock_quantity", 0)),
            size=data.get("size", ""),
            sku=data.get("sku"),
            color=data.get("color"),
        )


def _image_urls(raw: list | None) -> list[str]:
    """画像を URL 文字列のリストに正規化する（旧形式のオブジェクトも受け付ける）."""
    urls = []
    for img in raw or []:
        if isinstance(img, str):
            url = img
        elif isinstance(img, dict):
            url = img.get("url") or (f"/{img['storage_path']}" if img.get("storage_path") else "")
        else:
            url = ""
        if url and url.strip():
            urls.append(url)
    return urls


@dataclass
class Product:
    """商品."""

    id: ProductId
    name: str
    price: Money
    slug: str | None = None
    description: str | None = None
    category_id: str | None = None
    category_name: str = UNCATEGORIZED
    images: list[str] = field(default_factory=list)
    is_featured: bool = False
    stock_quantity: int = 0
    variants: list[ProductVariant] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Product:
        """APIレスポンスから復元する."""
        categories = data.get("categories") or {}
        category_name = (
            categories.get("name")
            or data.get("categoryName")
            or data.get("category")
            or UNCATEGORIZED
        )
        return cls(
            id=ProductId(str(data["id"])),
            name=data.get("name", ""),
            price=Money.of(data.get("price", 0)),
            slug=data.get("slug"),
            description=data.get("description"),
            category_id=data.get("category_id") or data.get("categoryId"),
            category_name=category_name,
            images=_image_urls(data.get("images")),
            is_featured=bool(data.get("is_featured", False)),
            stock_quantity=int(data.get("stock_quantity") or 0),
            variants=[ProductVariant.from_dict(v) for v in data.get("variants") or []],
        )

    def get_sizes(self) -> list[str]:
        """バリエーションのサイズ一覧（重複なし、出現順）."""
        return list(dict.fromkeys(v.size for v in self.variants if v.size))

    def get_colors(self) -> list[str]:
        """バリエーションの色一覧（重複なし、出現順）."""
        return list(dict.fromkeys(v.color for v in self.variants if v.color))

    def matches(self, search_term: str) -> bool:
        """名前または説明に検索語を含むか."""
        term = search_term.lower()
        if term in self.name.lower():
            return True
        return bool(self.description) and term in self.description.lower()


@dataclass(frozen=True)
class Category:
    """商品カテゴリ."""

    id: str
    name: str
    slug: str
    description: str | None = None
    images: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Category:
        """APIレスポンスから復元する."""
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            slug=data.get("slug", ""),
            description=data.get("description"),
            images=tuple(_image_urls(data.get("images"))),
        )


@dataclass(frozen=True)
class SimplifiedProduct:
    """一覧表示用に正規化した商品."""

    id: ProductId
    name: str
    price: Money
    category: str
    images: tuple[str, ...] = ()

    @classmethod
    def from_product(cls, product: Product) -> SimplifiedProduct:
        """商品から生成する（カテゴリ未設定は Uncategorized）."""
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            category=product.category_name or UNCATEGORIZED,
            images=tuple(product.images),
        )
