"""経費ダッシュボード."""
from __future__ import annotations

import logging

from storefront.domain.entities import Expense, ExpenseSummary
from storefront.domain.ports import ApiError, ApiGateway

logger = logging.getLogger(__name__)

RECENT_LIMIT = 5


class ExpenseDashboard:
    """経費の集計と直近の経費を表示する."""

    def __init__(self, api: ApiGateway) -> None:
        """初期化."""
        self._api = api
        self._summary: ExpenseSummary | None = None
        self._recent: list[Expense] = []
        self._loading = True

    @property
    def summary(self) -> ExpenseSummary | None:
        """集計."""
        return self._summary

    @property
    def recent_expenses(self) -> list[Expense]:
        """直近の経費."""
        return list(self._recent)

    @property
    def is_loading(self) -> bool:
        """読み込み中か."""
        return self._loading

    def load(self) -> None:
        """集計と直近の経費を読み込む. 失敗した側は前の値のまま."""
        try:
            self._summary = ExpenseSummary.from_dict(self._api.get("/api/admin/expenses/summary") or {})
        except ApiError as e:
            logger.error(f"Error fetching expense summary: {e}")
        try:
            data = self._api.get("/api/admin/expenses", params={"limit": RECENT_LIMIT}) or {}
            self._recent = [Expense.from_dict(e) for e in data.get("expenses") or []]
        except ApiError as e:
            logger.error(f"Error fetching recent expenses: {e}")
        self._loading = False

    def growth_rate(self) -> float:
        """直近2か月の増減率（%）. 前月が0なら100."""
        if self._summary is None or len(self._summary.monthly_trends) < 2:
            return 0.0
        previous = self._summary.monthly_trends[-2].total_amount.value
        current = self._summary.monthly_trends[-1].total_amount.value
        if previous == 0:
            return 100.0
        return float((current - previous) / previous * 100)
