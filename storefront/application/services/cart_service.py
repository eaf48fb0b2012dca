"""カートサービス."""
from __future__ import annotations

import logging

from storefront.domain.entities import Cart, CartItem
from storefront.domain.identifiers import ProductId
from storefront.domain.value_objects import Money

from .cart_persistence import CartPersistence

logger = logging.getLogger(__name__)


class CartService:
    """画面のカート操作と永続化をつなぐ.

    一時カート（今すぐ購入）中は保存しない。永続化層から届いたスナップショットは
    Cart.reconcile に渡す。一時カート中は蓄積カートだけが置き換わり、見えるカートは変わらない。
    """

    def __init__(self, persistence: CartPersistence, cart: Cart | None = None) -> None:
        """初期化.

        Args:
            persistence: カートの永続化
            cart: 初期状態のカート（省略時は空）
        """
        self._persistence = persistence
        self._cart = cart or Cart.create()

    # --- ライフサイクル ---

    def initialize(self) -> None:
        """保存済みのカートを読み込む."""
        self._persistence.load_initial(self._on_snapshot)

    def handle_auth_change(self) -> None:
        """サインイン・サインアウトに合わせてカートを切り替える."""
        self._persistence.handle_auth_change(self._on_snapshot)

    def _on_snapshot(self, items: list[CartItem]) -> None:
        if not self._cart.reconcile(items):
            logger.info("Stored cart snapshot aside while buy-now cart is active")

    # --- 操作 ---

    def add_to_cart(self, item: CartItem) -> CartItem:
        """カートに追加する. 一時カートは解除される."""
        line = self._cart.add_item(item)
        self._persist()
        return line

    def add_to_cart_temporary(self, item: CartItem) -> None:
        """今すぐ購入用に、見えるカートを item だけにする."""
        self._cart.set_temporary_item(item)

    def end_temporary_cart(self) -> None:
        """今すぐ購入を終えて、蓄積済みのカートを見えるカートに戻す（保存内容は変えない）."""
        if self._cart.end_temporary():
            logger.info("Buy-now cart ended")

    def remove_from_cart(self, product_id: ProductId) -> None:
        """行を削除する（存在しなければ何もしない）."""
        if self._cart.remove_item(product_id):
            self._persist()

    def update_quantity(self, product_id: ProductId, quantity: int) -> None:
        """数量をそのまま設定する（0以下も受け付ける）."""
        if self._cart.update_quantity(product_id, quantity):
            self._persist()

    def clear_cart(self) -> None:
        """一時カートを解除してカートを空にし、保存先からも削除する."""
        self._cart.clear()
        self._persistence.clear_all()

    def _persist(self) -> None:
        if self._cart.is_temporary:
            return
        self._persistence.persist(self._cart.get_persisted_items())

    # --- 参照 ---

    @property
    def items(self) -> list[CartItem]:
        """見えているカートのアイテム."""
        return self._cart.get_items()

    @property
    def item_count(self) -> int:
        """数量の合計."""
        return self._cart.get_item_count()

    @property
    def total_amount(self) -> Money:
        """合計金額."""
        return self._cart.get_total_amount()

    @property
    def is_empty(self) -> bool:
        """見えているカートが空か."""
        return self._cart.is_empty()

    @property
    def is_temporary_cart(self) -> bool:
        """一時カート中か."""
        return self._cart.is_temporary

    @property
    def temporary_item(self) -> CartItem | None:
        """一時カートのアイテム."""
        return self._cart.temporary_item

    @property
    def is_loading(self) -> bool:
        """読み込み中か."""
        return self._persistence.is_loading
