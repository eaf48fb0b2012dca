"""端末ローカルカートのインメモリ実装."""
from storefront.domain.entities import CartItem
from storefront.domain.ports import LocalCartStore


class InMemoryCartStore(LocalCartStore):
    """端末ローカルカートのインメモリ実装（テスト用、エラー設定可能）."""

    def __init__(self, items: list[CartItem] | None = None) -> None:
        """初期化."""
        self._items: list[CartItem] = list(items or [])
        self._error: Exception | None = None
        self.save_count = 0

    def set_error(self, error: Exception | None) -> None:
        """読み書き時にエラーを発生させる設定."""
        self._error = error

    def load(self) -> list[CartItem]:
        """保存済みアイテムを読み込む."""
        if self._error:
            raise self._error
        return list(self._items)

    def save(self, items: list[CartItem]) -> None:
        """アイテムを保存する."""
        if self._error:
            raise self._error
        self._items = list(items)
        self.save_count += 1

    def clear(self) -> None:
        """保存済みアイテムを削除する."""
        if self._error:
            raise self._error
        self._items = []
