"""商品管理パネル."""
from __future__ import annotations

import math
from typing import Any

from storefront.domain.entities import Product
from storefront.domain.enums import ProductFilter
from storefront.domain.ports import ApiError, ApiGateway, ImageUploader, Notifier
from storefront.domain.services import paginate, sort_items
from storefront.domain.value_objects import PaginationInfo

from ..services.errors import FormValidationError
from .panel import AdminPanel

PRODUCT_LIMIT = 100

TRUE_STRINGS = {"true", "1", "yes", "on"}

SORT_KEYS = {
    "name": lambda p: p.name.lower(),
    "price": lambda p: p.price.value,
    "stock": lambda p: p.stock_quantity,
}


def parse_flag(value: Any) -> bool:
    """フォームのチェックボックス値を真偽値にする（"false" や "0" は偽）."""
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)


def build_product_payload(form: dict[str, Any], image_urls: list[str]) -> dict[str, Any]:
    """商品フォームを検証してAPIに送る形にする.

    Raises:
        FormValidationError: 入力が不正
    """
    errors: dict[str, str] = {}
    name = (form.get("name") or "").strip()
    if not name:
        errors["name"] = "Name is required"

    try:
        price = float(form.get("price"))
        if not math.isfinite(price):
            errors["price"] = "Price must be a number"
        elif price < 0:
            errors["price"] = "Price cannot be negative"
    except (TypeError, ValueError):
        errors["price"] = "Price must be a number"

    try:
        stock_quantity = int(form.get("stock_quantity") or 0)
        if stock_quantity < 0:
            errors["stock_quantity"] = "Stock cannot be negative"
    except (TypeError, ValueError):
        errors["stock_quantity"] = "Stock must be a whole number"

    if errors:
        raise FormValidationError(errors)

    return {
        "name": name,
        "description": form.get("description") or "",
        "price": price,
        "stock_quantity": stock_quantity,
        "is_featured": parse_flag(form.get("is_featured", False)),
        "category_id": form.get("category_id"),
        "images": image_urls,
    }


class ProductManagement(AdminPanel):
    """商品の一覧・検索・登録・削除を行う."""

    def __init__(
        self,
        api: ApiGateway,
        notifier: Notifier,
        uploader: ImageUploader | None = None,
        per_page: int = 12,
    ) -> None:
        """初期化."""
        super().__init__(api, notifier)
        self._uploader = uploader
        self._products: list[Product] = []
        self.per_page = per_page
        self.search_term = ""
        self.filter = ProductFilter.ALL
        self.sort_key = "name"
        self.descending = False
        self.page = 1

    @property
    def products(self) -> list[Product]:
        """取得済みの商品."""
        return list(self._products)

    def refresh(self) -> bool:
        """商品を取り直す."""
        try:
            applied, data = self._fetch("/api/products", params={"limit": PRODUCT_LIMIT})
        except ApiError as e:
            self._report("Failed to load products", e)
            return False
        if not applied:
            return False
        self._products = [Product.from_dict(p) for p in (data or {}).get("products") or []]
        return True

    def filtered(self) -> list[Product]:
        """検索語とフィルタで絞り込んだ商品.

        active は注目商品以外を指す。
        """
        result = []
        for product in self._products:
            if self.search_term and not product.matches(self.search_term):
                continue
            if self.filter == ProductFilter.FEATURED and not product.is_featured:
                continue
            if self.filter == ProductFilter.ACTIVE and product.is_featured:
                continue
            result.append(product)
        return result

    def current_page(self) -> tuple[list[Product], PaginationInfo]:
        """絞り込み・並べ替え後の現在ページ."""
        if self.sort_key not in SORT_KEYS:
            raise ValueError(f"Unknown sort key: {self.sort_key}")
        ordered = sort_items(self.filtered(), SORT_KEYS[self.sort_key], self.descending)
        return paginate(ordered, self.page, self.per_page)

    def counts(self) -> dict[str, int]:
        """フィルタごとの件数."""
        featured = sum(1 for p in self._products if p.is_featured)
        return {
            ProductFilter.ALL.value: len(self._products),
            ProductFilter.FEATURED.value: featured,
            ProductFilter.ACTIVE.value: len(self._products) - featured,
        }

    def save(self, form: dict[str, Any], product_id: str | None = None) -> bool:
        """商品を登録（product_id 指定時は更新）する.

        画像は公開済みURL、または (ファイル名, 内容) で渡す。

        Raises:
            FormValidationError: 入力が不正
        """
        image_urls = []
        for image in form.get("images") or []:
            if isinstance(image, str):
                image_urls.append(image)
            else:
                if self._uploader is None:
                    raise FormValidationError({"images": "Image upload is not configured"})
                filename, content = image
                image_urls.append(self._uploader.upload(filename, content))

        payload = build_product_payload(form, image_urls)
        action = "update" if product_id else "create"
        try:
            if product_id:
                self._api.put(f"/api/admin/products/{product_id}", json=payload)
            else:
                self._api.post("/api/admin/products", json=payload)
        except ApiError as e:
            self._report(f"Failed to {action} product: {e.message}", e)
            return False
        self._notifier.success(f"Product {action}d successfully")
        self.refresh()
        return True

    def delete(self, product_id: str) -> bool:
        """商品を削除する."""
        try:
            self._api.delete(f"/api/admin/products/{product_id}")
        except ApiError as e:
            self._report("Failed to delete product", e)
            return False
        self._products = [p for p in self._products if p.id.value != product_id]
        return True
