"""注文エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from ..enums import OrderStatus
from ..value_objects import Money

from .cart_item import CartItem

CURRENCY = "INR"
DELIVERY_CHARGE = Money.of(50)
TAX_RATE = Decimal("0.1")


@dataclass(frozen=True)
class ShippingAddress:
    """配送先住所."""

    full_name: str
    address_line_1: str
    city: str
    state: str
    postal_code: str
    country: str
    address_line_2: str | None = None
    phone: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ShippingAddress:
        """辞書から復元する."""
        return cls(
            full_name=data.get("full_name", ""),
            address_line_1=data.get("address_line_1", ""),
            city=data.get("city", ""),
            state=data.get("state", ""),
            postal_code=data.get("postal_code", ""),
            country=data.get("country", ""),
            address_line_2=data.get("address_line_2"),
            phone=data.get("phone"),
        )


@dataclass(frozen=True)
class OrderItem:
    """注文明細."""

    id: str
    name: str
    price: Money
    quantity: int
    image: str | None = None
    size: str | None = None
    color: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OrderItem:
        """辞書から復元する."""
        details = data.get("product_details") or {}
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            price=Money.of(data.get("price", 0)),
            quantity=int(data.get("quantity", 1)),
            image=data.get("image"),
            size=details.get("size"),
            color=details.get("color"),
        )

    @classmethod
    def from_cart_item(cls, item: CartItem) -> OrderItem:
        """カートの行から作る."""
        return cls(
            id=item.id.value,
            name=item.name,
            price=item.price,
            quantity=item.quantity,
            image=item.image,
            size=item.size,
            color=item.color,
        )

    def to_dict(self) -> dict[str, Any]:
        """APIリクエスト向けの辞書に変換する."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "price": self.price.to_number(),
            "quantity": self.quantity,
        }
        if self.image is not None:
            data["image"] = self.image
        details = {k: v for k, v in (("size", self.size), ("color", self.color)) if v}
        if details:
            data["product_details"] = details
        return data


@dataclass(frozen=True)
class OrderSummary:
    """注文金額の内訳."""

    subtotal: Money
    delivery_charge: Money
    tax_amount: Money
    total_amount: Money
    currency: str = CURRENCY

    @classmethod
    def from_items(cls, items: list[CartItem]) -> OrderSummary:
        """カートのアイテムから計算する.

        送料は1件以上あれば一律、税は小計の10%（小数第2位で四捨五入）。
        """
        subtotal = Money.zero()
        for item in items:
            subtotal = subtotal.add(item.get_amount())
        delivery = DELIVERY_CHARGE if items else Money.zero()
        tax = Money((subtotal.value * TAX_RATE).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))
        return cls(
            subtotal=subtotal,
            delivery_charge=delivery,
            tax_amount=tax,
            total_amount=subtotal.add(delivery).add(tax),
        )


@dataclass(frozen=True)
class CreateOrderRequest:
    """注文作成リクエスト."""

    items: tuple[OrderItem, ...]
    shipping_address_id: str
    billing_address_id: str | None = None
    notes: str = ""

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.items:
            raise ValueError("Order must contain at least one item")
        if not self.shipping_address_id:
            raise ValueError("Shipping address is required")

    def to_dict(self) -> dict[str, Any]:
        """APIリクエストボディに変換する."""
        data: dict[str, Any] = {
            "items": [item.to_dict() for item in self.items],
            "shipping_address_id": self.shipping_address_id,
            "notes": self.notes,
        }
        if self.billing_address_id:
            data["billing_address_id"] = self.billing_address_id
        return data


@dataclass(frozen=True)
class Payment:
    """注文に紐づく支払い."""

    id: str
    order_id: str
    amount: Money
    status: str
    payment_method: str
    payment_reference: str = ""
    currency: str = CURRENCY

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Payment:
        """APIレスポンスから復元する."""
        return cls(
            id=str(data["id"]),
            order_id=str(data.get("order_id", "")),
            amount=Money.of(data.get("amount") or 0),
            status=data.get("status", "pending"),
            payment_method=data.get("payment_method", ""),
            payment_reference=data.get("payment_reference", ""),
            currency=data.get("currency") or CURRENCY,
        )


@dataclass
class Order:
    """注文."""

    id: str
    order_number: str
    status: OrderStatus
    customer_email: str
    shipping_address: ShippingAddress
    total_amount: Money
    items: list[OrderItem] = field(default_factory=list)
    subtotal: Money = field(default_factory=Money.zero)
    delivery_charge: Money = field(default_factory=Money.zero)
    tax_amount: Money = field(default_factory=Money.zero)
    created_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Order:
        """APIレスポンスから復元する."""
        created_at = data.get("created_at")
        return cls(
            id=str(data["id"]),
            order_number=data.get("order_number") or "",
            status=OrderStatus(data.get("status", "payment_pending")),
            customer_email=data.get("customer_email", ""),
            shipping_address=ShippingAddress.from_dict(data.get("shipping_address") or {}),
            total_amount=Money.of(data.get("total_amount") or 0),
            items=[OrderItem.from_dict(i) for i in data.get("items") or []],
            subtotal=Money.of(data.get("subtotal") or 0),
            delivery_charge=Money.of(data.get("delivery_charge") or 0),
            tax_amount=Money.of(data.get("tax_amount") or 0),
            created_at=(
                datetime.fromisoformat(created_at.replace("Z", "+00:00")) if created_at else None
            ),
        )

    def matches(self, search_term: str) -> bool:
        """注文番号・メール・受取人名に検索語を含むか."""
        term = search_term.lower()
        return (
            term in self.order_number.lower()
            or term in self.customer_email.lower()
            or term in self.shipping_address.full_name.lower()
        )
