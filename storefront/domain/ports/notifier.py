"""ユーザー通知インターフェース."""
from abc import ABC, abstractmethod


class Notifier(ABC):
    """操作結果をユーザーに知らせる（トースト相当）."""

    @abstractmethod
    def success(self, message: str) -> None:
        """成功を通知する."""
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        """失敗を通知する."""
        pass
