"""カート保存先インターフェース."""
from abc import ABC, abstractmethod

from ..entities import CartItem
from ..identifiers import UserId


class CartStoreError(Exception):
    """カート保存先エラー."""

    pass


class LocalCartStore(ABC):
    """端末ローカルのカート保存先."""

    @abstractmethod
    def load(self) -> list[CartItem]:
        """保存済みアイテムを読み込む（未保存なら空）."""
        pass

    @abstractmethod
    def save(self, items: list[CartItem]) -> None:
        """アイテムを保存する."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """保存済みアイテムを削除する."""
        pass


class RemoteCartStore(ABC):
    """ユーザー単位の永続カート保存先."""

    @abstractmethod
    def load(self, user_id: UserId) -> list[CartItem]:
        """ユーザーのアイテムを読み込む（未保存なら空）."""
        pass

    @abstractmethod
    def save(self, user_id: UserId, items: list[CartItem]) -> None:
        """ユーザーのアイテムを保存する."""
        pass

    @abstractmethod
    def clear(self, user_id: UserId) -> None:
        """ユーザーのアイテムを削除する."""
        pass
