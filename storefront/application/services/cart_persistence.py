"""カート・お気に入りの永続化（端末ローカル + ユーザー単位）."""
from __future__ import annotations

import logging
from typing import Callable

from storefront.domain.entities import CartItem
from storefront.domain.identifiers import UserId
from storefront.domain.ports import CartStoreError, LocalCartStore, RemoteCartStore
from storefront.domain.services import CartMerger

from .auth_service import AuthService

logger = logging.getLogger(__name__)

SnapshotCallback = Callable[[list[CartItem]], None]


class CartPersistence:
    """アイテム一覧を端末ローカルとユーザー単位の保存先に保存し、読み込んだ内容をスナップショットとして渡す.

    カートとお気に入りで共用する。保存の失敗はログに残すだけで、呼び出し側には伝えない。
    """

    def __init__(
        self,
        local_store: LocalCartStore,
        remote_store: RemoteCartStore,
        auth: AuthService,
        merger: CartMerger | None = None,
        label: str = "cart",
    ) -> None:
        """初期化.

        Args:
            local_store: 端末ローカルの保存先
            remote_store: ユーザー単位の保存先
            auth: 認証サービス
            merger: ローカルと永続側のマージ（省略時はカートの数量加算）
            label: ログに出す名前
        """
        self._local_store = local_store
        self._remote_store = remote_store
        self._auth = auth
        self._merger = merger or CartMerger()
        self._label = label
        self._initialized = False
        self._previous_user_id: UserId | None = None

    @property
    def is_loading(self) -> bool:
        """認証確認中、または初回読み込み前か."""
        return self._auth.is_loading or not self._initialized

    def _current_user_id(self) -> UserId | None:
        user = self._auth.user
        return user.user_id if user else None

    def load_initial(self, on_snapshot: SnapshotCallback) -> None:
        """ローカルのカートをすぐに渡し、サインイン中なら永続カートとマージしたものを渡す."""
        if self._initialized:
            return

        try:
            local_items = self._local_store.load()
        except CartStoreError as e:
            logger.error(f"Error loading initial {self._label}: {e}")
            on_snapshot([])
            self._initialized = True
            return

        on_snapshot(local_items)
        self._initialized = True

        user_id = self._current_user_id()
        # 初回読み込みでマージ済みのユーザーは、直後の認証変化で再マージしない
        self._previous_user_id = user_id
        if user_id is None:
            return

        try:
            remote_items = self._remote_store.load(user_id)
            merged = self._merger.merge(local_items, remote_items)
            if merged != local_items:
                on_snapshot(merged)
                self._local_store.save(merged)
                if merged:
                    self._remote_store.save(user_id, merged)
        except CartStoreError as e:
            logger.error(f"Error syncing remote {self._label}: {e}")

    def handle_auth_change(self, on_snapshot: SnapshotCallback) -> None:
        """ユーザーが変わったときにカートを切り替える.

        サインイン時はローカルと永続カートをマージし、サインアウト時はローカルだけに戻す。
        """
        if self._auth.is_loading or not self._initialized:
            return

        current = self._current_user_id()
        previous = self._previous_user_id
        if current == previous:
            return

        if current is not None and previous is None:
            try:
                local_items = self._local_store.load()
                remote_items = self._remote_store.load(current)
                merged = self._merger.merge(local_items, remote_items)
                on_snapshot(merged)
                self._save(current, merged)
            except CartStoreError as e:
                logger.error(f"Error merging {self._label} on sign in: {e}")
        elif current is None and previous is not None:
            try:
                on_snapshot(self._local_store.load())
            except CartStoreError as e:
                logger.error(f"Error loading local {self._label} on sign out: {e}")

        self._previous_user_id = current

    def persist(self, items: list[CartItem]) -> None:
        """ローカルに保存し、サインイン中なら永続カートにも保存する."""
        self._save(self._current_user_id(), items)

    def clear_all(self) -> None:
        """ローカルと永続カートの両方を削除する."""
        try:
            self._local_store.clear()
        except CartStoreError as e:
            logger.error(f"Failed to clear local {self._label}: {e}")

        user_id = self._current_user_id()
        if user_id is None:
            return
        try:
            self._remote_store.clear(user_id)
        except CartStoreError as e:
            logger.error(f"Failed to clear remote {self._label}: {e}")

    def _save(self, user_id: UserId | None, items: list[CartItem]) -> None:
        try:
            self._local_store.save(items)
        except CartStoreError as e:
            logger.error(f"Failed to save local {self._label}: {e}")

        if user_id is None:
            return
        try:
            self._remote_store.save(user_id, items)
        except CartStoreError as e:
            logger.error(f"Failed to sync {self._label} for {user_id}: {e}")
