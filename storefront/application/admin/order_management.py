"""注文管理パネル."""
from __future__ import annotations

from datetime import date, timedelta

from storefront.domain.entities import Order
from storefront.domain.enums import OrderStatus
from storefront.domain.ports import ApiError, ApiGateway, Notifier
from storefront.domain.services import paginate
from storefront.domain.value_objects import Money, PaginationInfo

from .panel import AdminPanel

DEFAULT_RANGE_DAYS = 7


class OrderManagement(AdminPanel):
    """注文の一覧・ステータス更新を行う. 取得には管理者権限が必要."""

    def __init__(
        self,
        api: ApiGateway,
        notifier: Notifier,
        today: date | None = None,
        per_page: int = 20,
    ) -> None:
        """初期化. 期間は直近1週間."""
        super().__init__(api, notifier)
        self._orders: list[Order] = []
        self._today = today
        self.status_filter: OrderStatus | None = None
        self.search_term = ""
        self.per_page = per_page
        self.page = 1
        self.reset_filters()

    @property
    def orders(self) -> list[Order]:
        """取得済みの注文."""
        return list(self._orders)

    def _current_date(self) -> date:
        return self._today or date.today()

    def reset_filters(self) -> None:
        """直近1週間・全ステータス・検索なしに戻す."""
        today = self._current_date()
        self.from_date: date | None = today - timedelta(days=DEFAULT_RANGE_DAYS)
        self.to_date: date | None = today
        self.status_filter = None
        self.search_term = ""

    def set_last_month(self) -> None:
        """期間を直近1か月にする."""
        today = self._current_date()
        month = today.month - 1 or 12
        year = today.year if today.month > 1 else today.year - 1
        day = min(today.day, _days_in_month(year, month))
        self.from_date = date(year, month, day)
        self.to_date = today

    def query_params(self) -> dict[str, str]:
        """絞り込み条件をクエリパラメータにする."""
        params = {}
        if self.status_filter is not None:
            params["status"] = self.status_filter.value
        if self.from_date:
            params["from_date"] = self.from_date.isoformat()
        if self.to_date:
            params["to_date"] = self.to_date.isoformat()
        return params

    def refresh(self) -> bool:
        """注文を取り直す."""
        try:
            applied, data = self._fetch(
                "/api/admin/orders", params=self.query_params(), require_admin=True
            )
        except ApiError as e:
            self._report("Failed to load orders", e)
            return False
        if not applied:
            return False
        self._orders = [Order.from_dict(o) for o in (data or {}).get("orders") or []]
        return True

    def update_status(self, order_id: str, status: OrderStatus) -> bool:
        """ステータスを変更する."""
        try:
            self._api.put(
                f"/api/admin/orders/{order_id}",
                json={"status": status.value},
                require_admin=True,
            )
        except ApiError as e:
            self._report("Failed to update order status", e)
            return False
        for order in self._orders:
            if order.id == order_id:
                order.status = status
        return True

    def filtered(self) -> list[Order]:
        """検索語とステータスで絞り込んだ注文."""
        return [
            order
            for order in self._orders
            if (not self.search_term or order.matches(self.search_term))
            and (self.status_filter is None or order.status == self.status_filter)
        ]

    def current_page(self) -> tuple[list[Order], PaginationInfo]:
        """絞り込み後の現在ページ."""
        return paginate(self.filtered(), self.page, self.per_page)

    def revenue(self) -> Money:
        """絞り込み後の注文の売上合計."""
        total = Money.zero()
        for order in self.filtered():
            total = total.add(order.total_amount)
        return total


def _days_in_month(year: int, month: int) -> int:
    next_month = date(year + month // 12, month % 12 + 1, 1)
    return (next_month - timedelta(days=1)).day
