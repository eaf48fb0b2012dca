"""経費管理パネル."""
from __future__ import annotations

import logging
import math
import re
from typing import Any

from storefront.domain.entities import Expense, ExpenseCategory
from storefront.domain.enums import (
    ExpenseBulkAction,
    ExpensePaymentMethod,
    ExpensePriority,
    ExpenseStatus,
)
from storefront.domain.ports import ApiError, ApiGateway, Notifier

from ..services.errors import FormValidationError
from .panel import AdminPanel

logger = logging.getLogger(__name__)

ALL = "all"
OTHER_CATEGORY_NAME = "other"
DEFAULT_CATEGORY_COLOR = "#6B7280"

EXPENSE_FIELDS = (
    "title",
    "description",
    "amount",
    "category_id",
    "priority",
    "expense_date",
    "vendor",
    "payment_method",
    "receipt_url",
    "notes",
    "tags",
)


def validate_expense_form(form: dict[str, Any], other_category_id: str | None = None) -> dict[str, str]:
    """経費フォームを検証し、項目名→エラーメッセージを返す."""
    errors: dict[str, str] = {}

    title = (form.get("title") or "").strip()
    if not title:
        errors["title"] = "Title is required"
    elif len(title) > 200:
        errors["title"] = "Title must be less than 200 characters"

    try:
        amount = float(form.get("amount"))
    except (TypeError, ValueError):
        amount = 0.0
    if not math.isfinite(amount) or amount < 0.01:
        errors["amount"] = "Amount must be greater than 0"

    category_id = form.get("category_id") or ""
    if not category_id:
        errors["category_id"] = "Category is required"
    elif category_id == other_category_id and not (form.get("custom_category") or "").strip():
        errors["custom_category"] = 'Custom category name is required when "Other" is selected'

    if form.get("priority") not in {p.value for p in ExpensePriority}:
        errors["priority"] = "Invalid priority"
    if not form.get("expense_date"):
        errors["expense_date"] = "Expense date is required"
    if form.get("payment_method") not in {m.value for m in ExpensePaymentMethod}:
        errors["payment_method"] = "Invalid payment method"
    return errors


def custom_category_name(display_name: str) -> str:
    """表示名から内部名を作る（例: "Team Lunch" → "team_lunch"）."""
    return re.sub(r"[^a-z0-9]+", "_", display_name.lower())


class ExpenseManagement(AdminPanel):
    """経費の一覧・承認・一括操作・登録を行う."""

    def __init__(self, api: ApiGateway, notifier: Notifier) -> None:
        """初期化."""
        super().__init__(api, notifier)
        self._expenses: list[Expense] = []
        self._categories: list[ExpenseCategory] = []
        self._selected_ids: list[str] = []
        self._filters = {"status": ALL, "category": ALL, "priority": ALL, "search": ""}

    @property
    def expenses(self) -> list[Expense]:
        """経費一覧."""
        return list(self._expenses)

    @property
    def categories(self) -> list[ExpenseCategory]:
        """経費カテゴリ一覧."""
        return list(self._categories)

    @property
    def filters(self) -> dict[str, str]:
        """現在の絞り込み条件."""
        return dict(self._filters)

    @property
    def selected_ids(self) -> list[str]:
        """選択中の経費ID."""
        return list(self._selected_ids)

    def set_filters(self, **filters: str) -> None:
        """絞り込み条件を変更して取り直す."""
        unknown = set(filters) - set(self._filters)
        if unknown:
            raise ValueError(f"Unknown filter: {', '.join(sorted(unknown))}")
        self._filters.update(filters)
        self.refresh()
        self.load_categories()

    def query_params(self) -> dict[str, str]:
        """絞り込み条件をクエリパラメータにする（"all" と空の検索語は送らない）."""
        params = {
            key: value
            for key, value in self._filters.items()
            if key != "search" and value != ALL
        }
        if self._filters["search"]:
            params["search"] = self._filters["search"]
        return params

    def refresh(self) -> bool:
        """経費一覧を取り直す."""
        try:
            applied, data = self._fetch("/api/admin/expenses", params=self.query_params())
        except ApiError as e:
            self._report("Failed to load expenses", e)
            return False
        if not applied:
            return False
        self._expenses = [Expense.from_dict(e) for e in (data or {}).get("expenses") or []]
        return True

    def load_categories(self) -> None:
        """経費カテゴリを取り直す. 失敗はログのみ."""
        try:
            data = self._api.get("/api/admin/expense-categories")
        except ApiError as e:
            logger.error(f"Error fetching categories: {e}")
            return
        self._categories = [ExpenseCategory.from_dict(c) for c in (data or {}).get("categories") or []]

    def update_status(
        self,
        expense_id: str,
        status: ExpenseStatus,
        rejected_reason: str | None = None,
    ) -> bool:
        """ステータスを変更し、一覧の該当行をレスポンスで置き換える."""
        payload: dict[str, Any] = {"status": status.value}
        if rejected_reason:
            payload["rejected_reason"] = rejected_reason
        try:
            data = self._api.put(f"/api/admin/expenses/{expense_id}", json=payload)
        except ApiError as e:
            self._report("Failed to update expense status", e)
            return False
        updated = Expense.from_dict(data)
        self._expenses = [updated if e.id == expense_id else e for e in self._expenses]
        self._notifier.success(f"Expense {status.value} successfully")
        return True

    def bulk_action(self, action: ExpenseBulkAction) -> bool:
        """選択中の経費に一括操作を行う."""
        if not self._selected_ids:
            self._notifier.error("Please select expenses to perform bulk actions")
            return False
        payload: dict[str, Any] = {"action": action.value, "expense_ids": list(self._selected_ids)}
        if action == ExpenseBulkAction.REJECT:
            payload["rejected_reason"] = "Bulk rejection"
        try:
            result = self._api.post("/api/admin/expenses/actions", json=payload)
        except ApiError as e:
            self._report(f"Failed to {action.value} expenses", e)
            return False
        self._notifier.success((result or {}).get("message") or f"Expenses {action.value} completed")
        self._selected_ids = []
        self.refresh()
        return True

    def delete(self, expense_id: str) -> bool:
        """経費を削除する."""
        try:
            self._api.delete(f"/api/admin/expenses/{expense_id}")
        except ApiError as e:
            self._report("Failed to delete expense", e)
            return False
        self._expenses = [e for e in self._expenses if e.id != expense_id]
        self._notifier.success("Expense deleted successfully")
        return True

    def create(self, form: dict[str, Any]) -> bool:
        """経費を登録する.

        Raises:
            FormValidationError: 入力が不正
        """
        return self._submit(form, expense_id=None)

    def update(self, expense_id: str, form: dict[str, Any]) -> bool:
        """経費を更新する.

        Raises:
            FormValidationError: 入力が不正
        """
        return self._submit(form, expense_id=expense_id)

    def _submit(self, form: dict[str, Any], expense_id: str | None) -> bool:
        other = self._other_category()
        other_id = other.id if other else None
        errors = validate_expense_form(form, other_id)
        if errors:
            raise FormValidationError(errors)

        payload = {k: form[k] for k in EXPENSE_FIELDS if k in form}
        payload["amount"] = float(form["amount"])
        payload["tags"] = list(dict.fromkeys(t.strip() for t in form.get("tags") or [] if t.strip()))

        try:
            if form["category_id"] == other_id:
                payload["category_id"] = self._create_custom_category(form["custom_category"].strip())
            if expense_id is None:
                self._api.post("/api/admin/expenses", json=payload)
            else:
                self._api.put(f"/api/admin/expenses/{expense_id}", json=payload)
        except ApiError as e:
            action = "create" if expense_id is None else "update"
            self._report(e.message or f"Failed to {action} expense", e)
            return False

        self._notifier.success(
            "Expense created successfully" if expense_id is None else "Expense updated successfully"
        )
        self.refresh()
        return True

    def _other_category(self) -> ExpenseCategory | None:
        for category in self._categories:
            if category.name == OTHER_CATEGORY_NAME:
                return category
        return None

    def _create_custom_category(self, display_name: str) -> str:
        created = self._api.post(
            "/api/admin/expense-categories",
            json={
                "name": custom_category_name(display_name),
                "display_name": display_name,
                "description": f"Custom category: {display_name}",
                "color": DEFAULT_CATEGORY_COLOR,
                "icon": "folder",
            },
        )
        self._notifier.success(f'Custom category "{display_name}" created successfully')
        self.load_categories()
        return str(created["id"])

    # --- 選択 ---

    def toggle_selection(self, expense_id: str) -> None:
        """経費の選択を切り替える."""
        if expense_id in self._selected_ids:
            self._selected_ids.remove(expense_id)
        else:
            self._selected_ids.append(expense_id)

    def toggle_select_all(self) -> None:
        """全選択と全解除を切り替える."""
        if len(self._selected_ids) == len(self._expenses):
            self._selected_ids = []
        else:
            self._selected_ids = [e.id for e in self._expenses]

    # --- 表示 ---

    def category_label(self, expense: Expense) -> str:
        """カテゴリの表示名. 古いデータはカテゴリ一覧から引く."""
        if expense.category_display_name:
            return expense.category_display_name
        for category in self._categories:
            if category.name == expense.category:
                return category.display_name
        return expense.category

    def category_color(self, expense: Expense) -> str:
        """カテゴリの色."""
        if expense.category_color:
            return expense.category_color
        for category in self._categories:
            if category.name == expense.category:
                return category.color
        return DEFAULT_CATEGORY_COLOR
