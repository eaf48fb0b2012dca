"""経費カテゴリ管理パネル."""
from __future__ import annotations

import re
from typing import Any

from storefront.domain.entities import ExpenseCategory
from storefront.domain.ports import ApiError, ApiGateway, Notifier

from ..services.errors import FormValidationError
from .panel import AdminPanel

_NAME_PATTERN = re.compile(r"[a-z0-9_]+")
_COLOR_PATTERN = re.compile(r"#[0-9A-Fa-f]{6}")

CATEGORY_FIELDS = ("name", "display_name", "description", "color", "icon", "sort_order")


def validate_category_form(form: dict[str, Any]) -> dict[str, str]:
    """経費カテゴリフォームを検証し、項目名→エラーメッセージを返す."""
    errors: dict[str, str] = {}

    name = form.get("name") or ""
    if not name:
        errors["name"] = "Name is required"
    elif len(name) > 100:
        errors["name"] = "Name must be less than 100 characters"
    elif not _NAME_PATTERN.fullmatch(name):
        errors["name"] = "Name must contain only lowercase letters, numbers, and underscores"

    display_name = form.get("display_name") or ""
    if not display_name:
        errors["display_name"] = "Display name is required"
    elif len(display_name) > 200:
        errors["display_name"] = "Display name must be less than 200 characters"

    if not _COLOR_PATTERN.fullmatch(form.get("color") or ""):
        errors["color"] = "Must be a valid hex color"

    sort_order = form.get("sort_order")
    if sort_order is not None and (not isinstance(sort_order, int) or sort_order < 0):
        errors["sort_order"] = "Sort order must be 0 or greater"
    return errors


class ExpenseCategoryManagement(AdminPanel):
    """経費カテゴリの一覧・登録・有効化を行う."""

    def __init__(self, api: ApiGateway, notifier: Notifier) -> None:
        """初期化."""
        super().__init__(api, notifier)
        self._categories: list[ExpenseCategory] = []
        self._show_inactive = False
        self.search_term = ""

    @property
    def categories(self) -> list[ExpenseCategory]:
        """取得済みのカテゴリ."""
        return list(self._categories)

    @property
    def show_inactive(self) -> bool:
        """無効なカテゴリも表示するか."""
        return self._show_inactive

    def set_show_inactive(self, show_inactive: bool) -> None:
        """無効カテゴリの表示を切り替えて取り直す."""
        self._show_inactive = show_inactive
        self.refresh()

    def refresh(self) -> bool:
        """カテゴリを取り直す."""
        params = {"admin": "true"}
        if self._show_inactive:
            params["include_inactive"] = "true"
        try:
            applied, data = self._fetch("/api/admin/expense-categories", params=params)
        except ApiError as e:
            self._report("Failed to load expense categories", e)
            return False
        if not applied:
            return False
        self._categories = [ExpenseCategory.from_dict(c) for c in (data or {}).get("categories") or []]
        return True

    def filtered(self) -> list[ExpenseCategory]:
        """検索語で絞り込んだカテゴリ."""
        if not self.search_term:
            return self.categories
        return [c for c in self._categories if c.matches(self.search_term)]

    def create(self, form: dict[str, Any]) -> bool:
        """カテゴリを登録する.

        Raises:
            FormValidationError: 入力が不正
        """
        payload = self._validated_payload(form)
        try:
            self._api.post("/api/admin/expense-categories", json=payload)
        except ApiError as e:
            self._report(e.message or "Failed to create category", e)
            return False
        self._notifier.success("Expense category created successfully")
        self.refresh()
        return True

    def update(self, category_id: str, form: dict[str, Any]) -> bool:
        """カテゴリを更新する.

        Raises:
            FormValidationError: 入力が不正
        """
        payload = self._validated_payload(form)
        try:
            self._api.put(f"/api/admin/expense-categories/{category_id}", json=payload)
        except ApiError as e:
            self._report(e.message or "Failed to update category", e)
            return False
        self._notifier.success("Expense category updated successfully")
        self.refresh()
        return True

    def delete(self, category_id: str) -> bool:
        """カテゴリを削除する."""
        try:
            self._api.delete(f"/api/admin/expense-categories/{category_id}")
        except ApiError as e:
            self._report(e.message or "Failed to delete category", e)
            return False
        self._notifier.success("Expense category deleted successfully")
        self.refresh()
        return True

    def toggle_status(self, category: ExpenseCategory) -> bool:
        """有効・無効を切り替える."""
        activate = not category.is_active
        try:
            self._api.put(
                f"/api/admin/expense-categories/{category.id}",
                json={"is_active": activate},
            )
        except ApiError as e:
            self._report(e.message or "Failed to update category status", e)
            return False
        self._notifier.success(f"Category {'activated' if activate else 'deactivated'} successfully")
        self.refresh()
        return True

    @staticmethod
    def _validated_payload(form: dict[str, Any]) -> dict[str, Any]:
        errors = validate_category_form(form)
        if errors:
            raise FormValidationError(errors)
        payload = {k: form[k] for k in CATEGORY_FIELDS if k in form}
        payload.setdefault("icon", "folder")
        payload.setdefault("sort_order", 0)
        return payload
