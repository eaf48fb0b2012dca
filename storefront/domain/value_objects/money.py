"""金額を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation


@dataclass(frozen=True)
class Money:
    """金額（ルピー）を表現する値オブジェクト."""

    value: Decimal

    def __post_init__(self) -> None:
        """バリデーション."""
        if not isinstance(self.value, Decimal):
            object.__setattr__(self, "value", self._to_decimal(self.value))
        if not self.value.is_finite():
            raise ValueError("Money value must be finite")
        if self.value < 0:
            raise ValueError("Money value cannot be negative")

    @staticmethod
    def _to_decimal(value) -> Decimal:
        if isinstance(value, bool):
            raise ValueError(f"Invalid money value: {value!r}")
        try:
            # floatは文字列経由で変換して二進誤差を持ち込まない
            return Decimal(str(value))
        except (InvalidOperation, TypeError) as e:
            raise ValueError(f"Invalid money value: {value!r}") from e

    @classmethod
    def of(cls, value: int | float | str | Decimal) -> Money:
        """指定金額でMoneyを生成する."""
        return cls(cls._to_decimal(value))

    @classmethod
    def zero(cls) -> Money:
        """ゼロを生成する."""
        return cls(Decimal("0"))

    def add(self, other: Money) -> Money:
        """金額を加算して新しいMoneyを返す."""
        return Money(self.value + other.value)

    def subtract(self, other: Money) -> Money:
        """金額を減算して新しいMoneyを返す."""
        result = self.value - other.value
        if result < 0:
            raise ValueError("Subtraction would result in negative value")
        return Money(result)

    def multiply(self, factor: int) -> Money:
        """金額を乗算して新しいMoneyを返す."""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        return Money(self.value * factor)

    def to_number(self) -> int | float:
        """JSON向けの数値に変換する（整数なら int）."""
        if self.value == self.value.to_integral_value():
            return int(self.value)
        return float(self.value)

    def format(self) -> str:
        """表示用フォーマット（例: "₹1,234.50"）."""
        return f"₹{self.value:,.2f}"

    def __str__(self) -> str:
        """文字列表現."""
        return self.format()
