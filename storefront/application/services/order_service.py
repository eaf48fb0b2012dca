"""注文（チェックアウト・注文履歴）サービス."""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from storefront.domain.entities import CreateOrderRequest, Order, OrderItem, OrderSummary, Payment
from storefront.domain.enums import OrderStatus
from storefront.domain.ports import ApiError, ApiGateway

from .cart_service import CartService
from .errors import FormValidationError

logger = logging.getLogger(__name__)

PAYMENT_METHOD = "upi"
GATEWAY_PROVIDER = "manual"


@dataclass(frozen=True)
class CheckoutResult:
    """チェックアウト結果."""

    order: Order
    payment: Payment | None
    payment_url: str | None = None


class OrderService:
    """見えているカートから注文を作成し、サインイン中のユーザーの注文を参照する.

    注文系のリクエストはすべてサインインが必要。
    """

    def __init__(self, api: ApiGateway, cart: CartService) -> None:
        """初期化."""
        self._api = api
        self._cart = cart

    def summary(self) -> OrderSummary:
        """見えているカートの金額内訳."""
        return OrderSummary.from_items(self._cart.items)

    def build_request(
        self,
        shipping_address_id: str | None,
        notes: str = "",
        billing_address_id: str | None = None,
    ) -> CreateOrderRequest:
        """見えているカートから注文作成リクエストを組み立てる.

        Raises:
            FormValidationError: カートが空、または配送先が未選択
        """
        errors: dict[str, str] = {}
        items = self._cart.items
        if not items:
            errors["items"] = "Your cart is empty"
        if not shipping_address_id:
            errors["shipping_address_id"] = "Please select a shipping address"
        if errors:
            raise FormValidationError(errors)

        return CreateOrderRequest(
            items=tuple(OrderItem.from_cart_item(item) for item in items),
            shipping_address_id=shipping_address_id,
            billing_address_id=billing_address_id,
            notes=notes.strip(),
        )

    def place_order(
        self,
        shipping_address_id: str | None,
        notes: str = "",
        billing_address_id: str | None = None,
    ) -> CheckoutResult:
        """注文を作成し、支払い（確認待ち）を登録する.

        成功したらカートを片付ける。今すぐ購入の注文なら一時カートだけを解除し、
        蓄積済みのカートは残す。それ以外はカートを空にする。
        失敗した場合カートはそのまま。

        Raises:
            FormValidationError: カートが空、または配送先が未選択
            ApiAuthenticationError: 未サインイン
            ApiError: 注文または支払いの登録に失敗
        """
        request = self.build_request(shipping_address_id, notes, billing_address_id)
        summary = self.summary()
        was_temporary = self._cart.is_temporary_cart

        data = self._api.post("/api/orders", json=request.to_dict(), require_auth=True)
        created = data.get("order") if isinstance(data, dict) else None
        if not created:
            raise ApiError("Failed to save order")
        order = Order.from_dict(created)
        logger.info(f"Order {order.order_number or order.id} created")

        payment = self._register_payment(order, summary)

        if was_temporary:
            self._cart.end_temporary_cart()
        else:
            self._cart.clear_cart()
        return CheckoutResult(order=order, payment=payment, payment_url=data.get("payment_url"))

    def _register_payment(self, order: Order, summary: OrderSummary) -> Payment | None:
        now = datetime.now(timezone.utc)
        reference = f"UPI_{int(now.timestamp() * 1000)}_{uuid.uuid4().hex[:9]}"
        try:
            data = self._api.post(
                "/api/payments",
                json={
                    "order_id": order.id,
                    "payment_reference": reference,
                    "payment_method": PAYMENT_METHOD,
                    "gateway_provider": GATEWAY_PROVIDER,
                    "amount": summary.total_amount.to_number(),
                    "currency": summary.currency,
                    "gateway_response": {
                        "status": "pending",
                        "method": PAYMENT_METHOD,
                        "timestamp": now.isoformat(),
                    },
                },
                require_auth=True,
            )
        except ApiError as e:
            logger.error(f"Failed to create payment for order {order.id}: {e}")
            raise ApiError("Failed to create payment", status=e.status) from e

        created = data.get("payment") if isinstance(data, dict) else None
        return Payment.from_dict(created) if created else None

    def list_orders(
        self,
        limit: int | None = None,
        offset: int | None = None,
        status: OrderStatus | str | None = None,
    ) -> list[Order]:
        """サインイン中のユーザーの注文一覧を取得する.

        Raises:
            ValueError: 不明なステータス
            ApiAuthenticationError: 未サインイン
            ApiError: 取得に失敗
        """
        params: dict[str, Any] = {}
        if limit:
            params["limit"] = limit
        if offset:
            params["offset"] = offset
        if status:
            params["status"] = OrderStatus(status).value

        data = self._api.get("/api/orders", params=params or None, require_auth=True)
        return [Order.from_dict(o) for o in (data or {}).get("orders") or []]

    def get_order(self, order_id: str) -> tuple[Order, list[Payment]]:
        """注文と支払いの一覧を取得する.

        Raises:
            ApiError: 取得に失敗（存在しない場合を含む）
        """
        data = self._api.get(f"/api/orders/{order_id}", require_auth=True)
        if not data or not data.get("order"):
            raise ApiError(f"Order not found: {order_id}", status=404)
        payments = [Payment.from_dict(p) for p in data.get("payments") or []]
        return Order.from_dict(data["order"]), payments

    def update_notes(self, order_id: str, notes: str) -> Order:
        """注文のメモを更新する.

        Raises:
            ApiError: 更新に失敗
        """
        data = self._api.patch(f"/api/orders/{order_id}", json={"notes": notes}, require_auth=True)
        if not data or not data.get("order"):
            raise ApiError("Failed to update order")
        return Order.from_dict(data["order"])
