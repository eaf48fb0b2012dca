"""FileCartStoreのテスト."""
import json

import pytest

from storefront.domain.entities import CartItem
from storefront.domain.identifiers import ProductId
from storefront.domain.ports import CartStoreError
from storefront.domain.value_objects import Money
from storefront.infrastructure.repositories import FileCartStore


def _item(product_id: str = "p1", quantity: int = 1, **kwargs) -> CartItem:
    return CartItem(id=ProductId(product_id), name="Tee", price=Money.of(499), quantity=quantity, **kwargs)


class TestFileCartStore:
    """FileCartStoreの単体テスト."""

    def test_ファイルがなければ空(self, tmp_path) -> None:
        assert FileCartStore(tmp_path / "cart.json").load() == []

    def test_保存したアイテムを読み込める(self, tmp_path) -> None:
        store = FileCartStore(tmp_path / "nested" / "cart.json")
        items = [_item("p1", 2, size="M", color="Black"), _item("p2", 1, image="https://img/2.jpg")]

        store.save(items)

        assert store.load() == items

    def test_保存形式はJSON配列(self, tmp_path) -> None:
        path = tmp_path / "cart.json"
        FileCartStore(path).save([_item("p1", 3)])

        data = json.loads(path.read_text(encoding="utf-8"))

        assert data == [{"id": "p1", "name": "Tee", "price": 499, "quantity": 3}]

    def test_壊れたファイルはエラー(self, tmp_path) -> None:
        path = tmp_path / "cart.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CartStoreError, match="Corrupted"):
            FileCartStore(path).load()

    def test_必須項目がなければエラー(self, tmp_path) -> None:
        path = tmp_path / "cart.json"
        path.write_text(json.dumps([{"name": "no id"}]), encoding="utf-8")
        with pytest.raises(CartStoreError):
            FileCartStore(path).load()

    def test_削除後は空で二重削除も可能(self, tmp_path) -> None:
        store = FileCartStore(tmp_path / "cart.json")
        store.save([_item()])

        store.clear()
        store.clear()

        assert store.load() == []
        assert not store.path.exists()

    def test_環境変数のパスを使う(self, tmp_path, monkeypatch) -> None:
        monkeypatch.setenv("CART_FILE_PATH", str(tmp_path / "env-cart.json"))
        assert FileCartStore().path == tmp_path / "env-cart.json"
