"""注文ステータスの列挙型."""
from __future__ import annotations

from enum import Enum


class OrderStatus(str, Enum):
    """注文の進行ステータス."""

    PAYMENT_PENDING = "payment_pending"
    PAYMENT_CONFIRMED = "payment_confirmed"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"

    def get_display_name(self) -> str:
        """表示名を返す."""
        names = {
            OrderStatus.PAYMENT_PENDING: "Payment Pending",
            OrderStatus.PAYMENT_CONFIRMED: "Payment Confirmed",
            OrderStatus.PROCESSING: "Processing",
            OrderStatus.SHIPPED: "Shipped",
            OrderStatus.DELIVERED: "Delivered",
            OrderStatus.CANCELLED: "Cancelled",
            OrderStatus.REFUNDED: "Refunded",
        }
        return names[self]

    def get_available_transitions(self) -> tuple[OrderStatus, ...]:
        """管理画面から遷移できるステータス."""
        transitions = {
            OrderStatus.PAYMENT_PENDING: (OrderStatus.CANCELLED,),
            OrderStatus.PAYMENT_CONFIRMED: (OrderStatus.PROCESSING,),
            OrderStatus.PROCESSING: (OrderStatus.SHIPPED, OrderStatus.CANCELLED),
            OrderStatus.SHIPPED: (OrderStatus.DELIVERED,),
        }
        return transitions.get(self, ())
