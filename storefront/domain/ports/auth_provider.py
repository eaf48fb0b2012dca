"""認証プロバイダーインターフェース."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable

from ..enums import AuthEventType
from ..value_objects import AuthSession, AuthUser

AuthStateListener = Callable[[AuthEventType, "AuthSession | None"], None]


class AuthProviderError(Exception):
    """認証プロバイダーエラー."""

    pass


class AuthProvider(ABC):
    """外部認証プロバイダーのインターフェース."""

    @abstractmethod
    def get_session(self) -> AuthSession | None:
        """現在のセッションを取得する（未サインインならNone）."""
        pass

    @abstractmethod
    def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        """メールアドレスとパスワードでサインインする."""
        pass

    @abstractmethod
    def sign_up(self, email: str, password: str) -> AuthUser | None:
        """ユーザーを登録する（作成されたユーザーが分からなければNone）."""
        pass

    @abstractmethod
    def sign_out(self) -> None:
        """サインアウトする."""
        pass

    @abstractmethod
    def build_oauth_url(self, redirect_to: str) -> str:
        """Google OAuth の認可URLを組み立てる."""
        pass

    @abstractmethod
    def on_auth_state_change(self, listener: AuthStateListener) -> Callable[[], None]:
        """認証状態の変化を購読する. 戻り値は購読解除関数."""
        pass
