"""お気に入りサービス."""
from __future__ import annotations

import logging

from storefront.domain.entities import CartItem
from storefront.domain.identifiers import ProductId

from .cart_persistence import CartPersistence

logger = logging.getLogger(__name__)


class WishlistService:
    """お気に入りの操作と永続化をつなぐ.

    保存先とサインイン時のマージはカートと同じ仕組みを使う。
    マージは WishlistMerger（数量を持たず、商品IDで重複を除く）を渡した CartPersistence が行う。
    """

    def __init__(self, persistence: CartPersistence) -> None:
        """初期化."""
        self._persistence = persistence
        self._items: list[CartItem] = []

    def initialize(self) -> None:
        """保存済みのお気に入りを読み込む."""
        self._persistence.load_initial(self._on_snapshot)

    def handle_auth_change(self) -> None:
        """サインイン時は永続お気に入りとマージし、サインアウト時はローカルに戻す."""
        self._persistence.handle_auth_change(self._on_snapshot)

    def _on_snapshot(self, items: list[CartItem]) -> None:
        self._items = list(items)

    def add(self, item: CartItem) -> bool:
        """お気に入りに追加する.

        Returns:
            追加した場合True（既にあればFalse）
        """
        if self.contains(item.id):
            return False
        self._items.append(item.with_quantity(1))
        self._persistence.persist(self.items)
        logger.info(f"Added {item.id} to wishlist")
        return True

    def remove(self, product_id: ProductId) -> bool:
        """お気に入りから外す（なければ何もしない）."""
        before = len(self._items)
        self._items = [item for item in self._items if item.id != product_id]
        if len(self._items) == before:
            return False
        self._persistence.persist(self.items)
        return True

    def toggle(self, item: CartItem) -> bool:
        """お気に入りを切り替える.

        Returns:
            切り替え後にお気に入りに入っている場合True
        """
        if self.remove(item.id):
            return False
        return self.add(item)

    def contains(self, product_id: ProductId) -> bool:
        """お気に入りに入っているか."""
        return any(item.id == product_id for item in self._items)

    def clear(self) -> None:
        """お気に入りを空にし、保存先からも削除する."""
        self._items = []
        self._persistence.clear_all()

    @property
    def items(self) -> list[CartItem]:
        """お気に入りのアイテム."""
        return list(self._items)

    @property
    def count(self) -> int:
        """お気に入りの件数."""
        return len(self._items)

    @property
    def is_loading(self) -> bool:
        """読み込み中か."""
        return self._persistence.is_loading
