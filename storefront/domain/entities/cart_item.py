"""カートアイテムエンティティ."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from ..identifiers import ProductId
from ..value_objects import Money


@dataclass(frozen=True)
class CartItem:
    """カートの1行.

    同一性キーは商品IDのみ。サイズ・色が違っても同じ商品IDなら同じ行として扱う。
    """

    id: ProductId
    name: str
    price: Money
    quantity: int
    image: str | None = None
    size: str | None = None
    color: str | None = None

    def with_quantity(self, quantity: int) -> CartItem:
        """数量を置き換えた新しいアイテムを返す."""
        return replace(self, quantity=quantity)

    def get_amount(self) -> Money:
        """行の小計を計算する（数量が0以下なら0）."""
        if self.quantity <= 0:
            return Money.zero()
        return self.price.multiply(self.quantity)

    def to_dict(self) -> dict[str, Any]:
        """永続化・API向けの辞書に変換する."""
        data: dict[str, Any] = {
            "id": self.id.value,
            "name": self.name,
            "price": self.price.to_number(),
            "quantity": self.quantity,
        }
        if self.image is not None:
            data["image"] = self.image
        if self.size is not None:
            data["size"] = self.size
        if self.color is not None:
            data["color"] = self.color
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CartItem:
        """辞書から復元する."""
        return cls(
            id=ProductId(str(data["id"])),
            name=data.get("name", ""),
            price=Money.of(data.get("price", 0)),
            quantity=int(data.get("quantity", 1)),
            image=data.get("image"),
            size=data.get("size"),
            color=data.get("color"),
        )
