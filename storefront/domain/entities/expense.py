"""経費エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..enums import ExpensePaymentMethod, ExpensePriority, ExpenseStatus
from ..value_objects import Money


def _parse_datetime(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@dataclass
class Expense:
    """経費."""

    id: str
    title: str
    amount: Money
    category: str
    priority: ExpensePriority
    expense_date: str
    payment_method: ExpensePaymentMethod
    status: ExpenseStatus = ExpenseStatus.PENDING
    description: str | None = None
    vendor: str | None = None
    receipt_url: str | None = None
    notes: str | None = None
    tags: list[str] = field(default_factory=list)
    category_display_name: str | None = None
    category_color: str | None = None
    rejected_reason: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Expense:
        """APIレスポンスから復元する."""
        category_data = data.get("category_data") or {}
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            amount=Money.of(data.get("amount", 0)),
            category=data.get("category", ""),
            priority=ExpensePriority(data.get("priority", "medium")),
            expense_date=data.get("expense_date", ""),
            payment_method=ExpensePaymentMethod(data.get("payment_method", "company_card")),
            status=ExpenseStatus(data.get("status", "pending")),
            description=data.get("description"),
            vendor=data.get("vendor"),
            receipt_url=data.get("receipt_url"),
            notes=data.get("notes"),
            tags=list(data.get("tags") or []),
            category_display_name=category_data.get("display_name"),
            category_color=category_data.get("color"),
            rejected_reason=data.get("rejected_reason"),
            created_at=_parse_datetime(data.get("created_at")),
        )


@dataclass
class ExpenseCategory:
    """経費カテゴリ."""

    id: str
    name: str
    display_name: str
    color: str = "#6B7280"
    icon: str = "folder"
    sort_order: int = 0
    is_active: bool = True
    description: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExpenseCategory:
        """APIレスポンスから復元する."""
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            display_name=data.get("display_name", ""),
            color=data.get("color", "#6B7280"),
            icon=data.get("icon", "folder"),
            sort_order=int(data.get("sort_order") or 0),
            is_active=bool(data.get("is_active", True)),
            description=data.get("description"),
        )

    def matches(self, search_term: str) -> bool:
        """表示名・名前・説明に検索語を含むか."""
        term = search_term.lower()
        if term in self.display_name.lower() or term in self.name.lower():
            return True
        return bool(self.description) and term in self.description.lower()


@dataclass(frozen=True)
class MonthlyTrend:
    """月別の経費推移."""

    month: str
    total_amount: Money
    count: int


@dataclass(frozen=True)
class CategoryBreakdown:
    """カテゴリ別の経費集計."""

    category: str
    total_amount: Money
    count: int


@dataclass(frozen=True)
class ExpenseSummary:
    """経費のステータス別集計."""

    total_expenses: int
    pending_expenses: int
    approved_expenses: int
    rejected_expenses: int
    paid_expenses: int
    total_amount: Money
    pending_amount: Money
    approved_amount: Money
    monthly_trends: tuple[MonthlyTrend, ...] = ()
    category_breakdown: tuple[CategoryBreakdown, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ExpenseSummary:
        """APIレスポンスから復元する."""
        return cls(
            total_expenses=int(data.get("total_expenses") or 0),
            pending_expenses=int(data.get("pending_expenses") or 0),
            approved_expenses=int(data.get("approved_expenses") or 0),
            rejected_expenses=int(data.get("rejected_expenses") or 0),
            paid_expenses=int(data.get("paid_expenses") or 0),
            total_amount=Money.of(data.get("total_amount") or 0),
            pending_amount=Money.of(data.get("pending_amount") or 0),
            approved_amount=Money.of(data.get("approved_amount") or 0),
            monthly_trends=tuple(
                MonthlyTrend(
                    month=t.get("month", ""),
                    total_amount=Money.of(t.get("total_amount") or 0),
                    count=int(t.get("count") or 0),
                )
                for t in data.get("monthly_trends") or []
            ),
            category_breakdown=tuple(
                CategoryBreakdown(
                    category=c.get("category", ""),
                    total_amount=Money.of(c.get("total_amount") or 0),
                    count=int(c.get("count") or 0),
                )
                for c in data.get("category_breakdown") or []
            ),
        )
