"""ユーザー通知の実装."""
import logging

from storefront.domain.ports import Notifier

logger = logging.getLogger(__name__)


class LoggingNotifier(Notifier):
    """通知をログに出す."""

    def success(self, message: str) -> None:
        """成功を通知する."""
        logger.info(message)

    def error(self, message: str) -> None:
        """失敗を通知する."""
        logger.error(message)


class InMemoryNotifier(Notifier):
    """通知を記録する."""

    def __init__(self) -> None:
        """初期化."""
        self.messages: list[tuple[str, str]] = []

    def success(self, message: str) -> None:
        """成功を記録する."""
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        """失敗を記録する."""
        self.messages.append(("error", message))

    @property
    def errors(self) -> list[str]:
        """失敗の通知."""
        return [m for level, m in self.messages if level == "error"]

    @property
    def successes(self) -> list[str]:
        """成功の通知."""
        return [m for level, m in self.messages if level == "success"]
