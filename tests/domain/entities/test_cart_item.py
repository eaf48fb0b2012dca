"""CartItemのテスト."""
from storefront.domain.entities import CartItem
from storefront.domain.identifiers import ProductId
from storefront.domain.value_objects import Money


class TestCartItem:
    """CartItemの単体テスト."""

    def test_小計は単価と数量の積(self) -> None:
        item = CartItem(ProductId("p1"), "Romper", Money.of("249.50"), 2)
        assert item.get_amount() == Money.of("499.00")

    def test_with_quantityは新しいアイテムを返す(self) -> None:
        item = CartItem(ProductId("p1"), "Romper", Money.of(100), 1)
        updated = item.with_quantity(4)
        assert updated.quantity == 4
        assert item.quantity == 1

    def test_to_dictは未設定の属性を含めない(self) -> None:
        item = CartItem(ProductId("p1"), "Romper", Money.of(100), 1)
        assert item.to_dict() == {"id": "p1", "name": "Romper", "price": 100, "quantity": 1}

    def test_from_dictで復元(self) -> None:
        item = CartItem.from_dict(
            {"id": 42, "name": "Frock", "price": 99.5, "quantity": 3, "size": "(0-3M)", "color": "Pink"}
        )
        assert item.id == ProductId("42")
        assert item.price == Money.of("99.5")
        assert item.size == "(0-3M)"
        assert item.color == "Pink"
        assert item.image is None
