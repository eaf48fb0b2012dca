"""カート集約ルート."""
from __future__ import annotations

from dataclasses import dataclass, field

from ..identifiers import ProductId
from ..value_objects import Money

from .cart_item import CartItem


@dataclass
class Cart:
    """画面に見えているカートと「今すぐ購入」用の一時カートを保持する集約ルート.

    一時カートモードの間は、見えるカートを一時アイテム1件だけに固定する。
    蓄積済みのカート（_items）は利用者の操作では変わらず、永続化層からの
    スナップショットだけが置き換える。
    """

    _items: list[CartItem] = field(default_factory=list)
    _is_temporary: bool = False
    _temporary_item: CartItem | None = None

    @classmethod
    def create(cls, items: list[CartItem] | None = None) -> Cart:
        """新しいカートを作成する."""
        return cls(_items=list(items or []))

    @property
    def is_temporary(self) -> bool:
        """一時カートモードか."""
        return self._is_temporary

    @property
    def temporary_item(self) -> CartItem | None:
        """一時カートで保持しているアイテム."""
        return self._temporary_item

    def add_item(self, item: CartItem) -> CartItem:
        """アイテムを追加する.

        一時カートモードは解除される。同じ商品IDの行があれば数量を加算し、
        なければ末尾に追加する。数量の上限はここでは見ない。
        """
        self._exit_temporary()
        for i, existing in enumerate(self._items):
            if existing.id == item.id:
                merged = existing.with_quantity(existing.quantity + item.quantity)
                self._items[i] = merged
                return merged
        self._items.append(item)
        return item

    def remove_item(self, product_id: ProductId) -> bool:
        """指定商品の行を削除する（存在しなければ何もしない）."""
        if self._is_temporary:
            if self._temporary_item is not None and self._temporary_item.id == product_id:
                self._temporary_item = None
                return True
            return False
        before = len(self._items)
        self._items = [item for item in self._items if item.id != product_id]
        return len(self._items) != before

    def update_quantity(self, product_id: ProductId, quantity: int) -> bool:
        """指定商品の数量を設定する.

        0以下でも行は残る。削除は呼び出し側が remove_item で行う。
        """
        if self._is_temporary:
            if self._temporary_item is not None and self._temporary_item.id == product_id:
                self._temporary_item = self._temporary_item.with_quantity(quantity)
                return True
            return False
        for i, existing in enumerate(self._items):
            if existing.id == product_id:
                self._items[i] = existing.with_quantity(quantity)
                return True
        return False

    def clear(self) -> None:
        """一時カートモードを解除し、全アイテムを削除する."""
        self._exit_temporary()
        self._items.clear()

    def set_temporary_item(self, item: CartItem) -> None:
        """一時カートモードに入り、見えるカートを [item] にする."""
        self._is_temporary = True
        self._temporary_item = item

    def end_temporary(self) -> bool:
        """一時カートモードだけを解除する（蓄積カートはそのまま）.

        Returns:
            一時カートモードだった場合True
        """
        was_temporary = self._is_temporary
        self._exit_temporary()
        return was_temporary

    def reconcile(self, snapshot: list[CartItem]) -> bool:
        """永続化層から届いたスナップショットを反映する.

        蓄積済みのカートはスナップショットでそのまま置き換える（後勝ち、マージしない）。
        一時カートモード中は見えるカートを [temporary_item] のまま保ち、
        置き換えた蓄積カートはモード解除後に見えるようになる。

        Returns:
            見えるカートに反映した場合True（一時カートモード中はFalse）
        """
        self._items = list(snapshot)
        return not self._is_temporary

    def get_items(self) -> list[CartItem]:
        """見えているカートのアイテムを取得（防御的コピー）."""
        if self._is_temporary:
            return [self._temporary_item] if self._temporary_item is not None else []
        return list(self._items)

    def get_persisted_items(self) -> list[CartItem]:
        """一時カートとは無関係に蓄積されているアイテムを取得する."""
        return list(self._items)

    def get_item(self, product_id: ProductId) -> CartItem | None:
        """指定商品の行を取得する."""
        for item in self.get_items():
            if item.id == product_id:
                return item
        return None

    def get_item_count(self) -> int:
        """見えているカートの数量合計を取得する."""
        return sum(item.quantity for item in self.get_items())

    def get_total_amount(self) -> Money:
        """見えているカートの合計金額を計算する."""
        total = Money.zero()
        for item in self.get_items():
            total = total.add(item.get_amount())
        return total

    def is_empty(self) -> bool:
        """見えているカートが空か判定する."""
        return len(self.get_items()) == 0

    def _exit_temporary(self) -> None:
        self._is_temporary = False
        self._temporary_item = None
