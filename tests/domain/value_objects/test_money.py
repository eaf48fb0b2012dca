"""Moneyのテスト."""
from decimal import Decimal

import pytest

from storefront.domain.value_objects import Money


class TestMoney:
    """Moneyの単体テスト."""

    def test_ofは文字列と小数を受け付ける(self) -> None:
        assert Money.of("12.50").value == Decimal("12.50")
        assert Money.of(0.1).value == Decimal("0.1")

    def test_負の金額はエラー(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            Money.of(-1)

    def test_数値以外はエラー(self) -> None:
        with pytest.raises(ValueError, match="Invalid money value"):
            Money.of("abc")
        with pytest.raises(ValueError, match="Invalid money value"):
            Money.of(True)

    def test_非有限値はエラー(self) -> None:
        with pytest.raises(ValueError, match="finite"):
            Money.of("NaN")

    def test_加算と乗算(self) -> None:
        assert Money.of("0.1").add(Money.of("0.2")) == Money.of("0.3")
        assert Money.of(250).multiply(3) == Money.of(750)

    def test_減算で負になるとエラー(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            Money.of(1).subtract(Money.of(2))

    def test_to_numberは整数ならint(self) -> None:
        assert Money.of("100.00").to_number() == 100
        assert isinstance(Money.of("100.00").to_number(), int)
        assert Money.of("99.5").to_number() == 99.5

    def test_formatはルピー表記(self) -> None:
        assert Money.of(1234.5).format() == "₹1,234.50"
        assert str(Money.zero()) == "₹0.00"
