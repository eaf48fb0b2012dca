"""認証セッションの値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from ..identifiers import UserId


@dataclass(frozen=True)
class AuthUser:
    """認証済みユーザー."""

    user_id: UserId
    email: str | None = None


@dataclass(frozen=True)
class AuthSession:
    """認証プロバイダーのセッション."""

    user: AuthUser
    access_token: str
    id_token: str | None = None
    refresh_token: str | None = None
    expires_at: datetime | None = None

    def is_expired(self, now: datetime | None = None) -> bool:
        """有効期限切れか判定する."""
        if self.expires_at is None:
            return False
        now = now or datetime.now(timezone.utc)
        return now >= self.expires_at
