"""ユーザーカートのインメモリ実装."""
from storefront.domain.entities import CartItem
from storefront.domain.identifiers import UserId
from storefront.domain.ports import RemoteCartStore


class InMemoryUserCartStore(RemoteCartStore):
    """ユーザーカートのインメモリ実装（テスト用、エラー設定可能）."""

    def __init__(self) -> None:
        """初期化."""
        self._carts: dict[str, list[CartItem]] = {}
        self._error: Exception | None = None

    def set_error(self, error: Exception | None) -> None:
        """読み書き時にエラーを発生させる設定."""
        self._error = error

    def load(self, user_id: UserId) -> list[CartItem]:
        """ユーザーのアイテムを読み込む."""
        if self._error:
            raise self._error
        return list(self._carts.get(user_id.value, []))

    def save(self, user_id: UserId, items: list[CartItem]) -> None:
        """ユーザーのアイテムを保存する."""
        if self._error:
            raise self._error
        self._carts[user_id.value] = list(items)

    def clear(self, user_id: UserId) -> None:
        """ユーザーのアイテムを削除する."""
        if self._error:
            raise self._error
        self._carts.pop(user_id.value, None)
