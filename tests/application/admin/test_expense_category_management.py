"""ExpenseCategoryManagementのテスト."""
import pytest

from storefront.application.admin import ExpenseCategoryManagement
from storefront.application.admin.expense_category_management import validate_category_form
from storefront.application.services import FormValidationError
from storefront.domain.entities import ExpenseCategory
from storefront.domain.ports import ApiError
from storefront.infrastructure.clients import InMemoryNotifier, MockApiGateway

CATEGORIES = {
    "categories": [
        {"id": "c1", "name": "office", "display_name": "Office Supplies"},
        {"id": "c2", "name": "travel", "display_name": "Travel", "description": "Flights and cabs"},
    ]
}


def _build() -> tuple[ExpenseCategoryManagement, MockApiGateway, InMemoryNotifier]:
    api = MockApiGateway()
    api.set_response("GET", "/api/admin/expense-categories", CATEGORIES)
    notifier = InMemoryNotifier()
    return ExpenseCategoryManagement(api, notifier), api, notifier


class TestValidateCategoryForm:
    """カテゴリフォームの検証."""

    def test_有効なフォーム(self) -> None:
        assert validate_category_form({"name": "team_lunch", "display_name": "Team Lunch", "color": "#A1b2C3"}) == {}

    def test_不正な項目(self) -> None:
        errors = validate_category_form({"name": "Team Lunch", "display_name": "", "color": "red", "sort_order": -1})
        assert errors == {
            "name": "Name must contain only lowercase letters, numbers, and underscores",
            "display_name": "Display name is required",
            "color": "Must be a valid hex color",
            "sort_order": "Sort order must be 0 or greater",
        }


class TestExpenseCategoryManagement:
    """ExpenseCategoryManagementの単体テスト."""

    def test_無効カテゴリの表示切り替えで取り直す(self) -> None:
        panel, api, _ = _build()
        panel.refresh()
        panel.set_show_inactive(True)
        params = [c.params for c in api.calls_to("GET", "/api/admin/expense-categories")]
        assert params == [{"admin": "true"}, {"admin": "true", "include_inactive": "true"}]

    def test_検索語で絞り込む(self) -> None:
        panel, _, _ = _build()
        panel.refresh()
        panel.search_term = "cabs"
        assert [c.id for c in panel.filtered()] == ["c2"]

    def test_登録で既定値を補う(self) -> None:
        panel, api, notifier = _build()
        assert panel.create({"name": "team_lunch", "display_name": "Team Lunch", "color": "#A1B2C3"}) is True
        body = api.calls_to("POST", "/api/admin/expense-categories")[0].json
        assert body["icon"] == "folder"
        assert body["sort_order"] == 0
        assert notifier.successes == ["Expense category created successfully"]

    def test_不正なフォームは送信しない(self) -> None:
        panel, api, _ = _build()
        with pytest.raises(FormValidationError):
            panel.update("c1", {"name": "", "display_name": "Office", "color": "#000000"})
        assert api.calls_to("PUT", "/api/admin/expense-categories/c1") == []

    def test_有効無効の切り替え(self) -> None:
        panel, api, notifier = _build()
        category = ExpenseCategory("c1", "office", "Office", is_active=True)
        assert panel.toggle_status(category) is True
        assert api.calls_to("PUT", "/api/admin/expense-categories/c1")[0].json == {"is_active": False}
        assert notifier.successes == ["Category deactivated successfully"]

    def test_削除失敗はサーバーのメッセージを通知(self) -> None:
        panel, api, notifier = _build()
        api.set_error("DELETE", "/api/admin/expense-categories/c1", ApiError("Category is in use", status=409))
        assert panel.delete("c1") is False
        assert notifier.errors == ["Category is in use"]
