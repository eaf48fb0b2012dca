"""WishlistMergerのテスト."""
from storefront.domain.entities import CartItem
from storefront.domain.identifiers import ProductId
from storefront.domain.services import WishlistMerger
from storefront.domain.value_objects import Money


def _item(product_id: str, name: str = "商品") -> CartItem:
    return CartItem(ProductId(product_id), name, Money.of(100), 1)


class TestWishlistMerger:
    """WishlistMergerの単体テスト."""

    def test_同じ商品は1件にまとめ永続側を残す(self) -> None:
        merged = WishlistMerger().merge(
            local_items=[_item("p1", "ローカル名")],
            remote_items=[_item("p1", "永続名")],
        )
        assert len(merged) == 1
        assert merged[0].quantity == 1
        assert merged[0].name == "永続名"

    def test_永続側が先でローカルのみの商品は末尾(self) -> None:
        merged = WishlistMerger().merge(
            local_items=[_item("p3"), _item("p1")],
            remote_items=[_item("p1"), _item("p2")],
        )
        assert [item.id.value for item in merged] == ["p1", "p2", "p3"]
