"""認証状態変化イベントの列挙型."""
from enum import Enum


class AuthEventType(str, Enum):
    """認証プロバイダーが通知するイベント."""

    INITIAL_SESSION = "INITIAL_SESSION"
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
    TOKEN_REFRESHED = "TOKEN_REFRESHED"
    USER_UPDATED = "USER_UPDATED"

    def requires_profile(self) -> bool:
        """プロフィールの存在確認が必要なイベントか."""
        return self in (AuthEventType.SIGNED_IN, AuthEventType.USER_UPDATED)
