"""認証プロバイダーのインメモリ実装."""
from __future__ import annotations

import uuid
from typing import Callable
from urllib.parse import quote

from storefront.domain.enums import AuthEventType
from storefront.domain.identifiers import UserId
from storefront.domain.ports import AuthProvider, AuthProviderError, AuthStateListener
from storefront.domain.value_objects import AuthSession, AuthUser


class InMemoryAuthProvider(AuthProvider):
    """認証プロバイダーのインメモリ実装（テスト・ローカル用、エラー設定可能）."""

    def __init__(self) -> None:
        """初期化."""
        self._users: dict[str, tuple[str, AuthUser]] = {}
        self._session: AuthSession | None = None
        self._listeners: list[AuthStateListener] = []
        self._session_error: Exception | None = None
        self._sign_out_error: Exception | None = None

    def register(self, email: str, password: str, user_id: str | None = None) -> AuthUser:
        """ユーザーを直接登録する."""
        user = AuthUser(user_id=UserId(user_id or str(uuid.uuid4())), email=email)
        self._users[email] = (password, user)
        return user

    def set_session_error(self, error: Exception) -> None:
        """セッション取得時にエラーを発生させる設定."""
        self._session_error = error

    def set_sign_out_error(self, error: Exception) -> None:
        """サインアウト時にエラーを発生させる設定."""
        self._sign_out_error = error

    def get_session(self) -> AuthSession | None:
        """現在のセッションを取得する."""
        if self._session_error:
            raise self._session_error
        return self._session

    def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        """サインインする."""
        entry = self._users.get(email)
        if entry is None or entry[0] != password:
            raise AuthProviderError("Invalid login credentials")
        self._session = AuthSession(user=entry[1], access_token=f"access-{uuid.uuid4()}")
        self.emit(AuthEventType.SIGNED_IN)
        return self._session

    def sign_up(self, email: str, password: str) -> AuthUser | None:
        """ユーザーを登録する."""
        if email in self._users:
            raise AuthProviderError("User already registered")
        return self.register(email, password)

    def sign_out(self) -> None:
        """サインアウトする."""
        if self._sign_out_error:
            raise self._sign_out_error
        self._session = None
        self.emit(AuthEventType.SIGNED_OUT)

    def build_oauth_url(self, redirect_to: str) -> str:
        """擬似的な認可URLを返す."""
        return f"memory://oauth/google?redirect_to={quote(redirect_to, safe='')}"

    def on_auth_state_change(self, listener: AuthStateListener) -> Callable[[], None]:
        """認証状態の変化を購読する."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, event: AuthEventType) -> None:
        """現在のセッションで状態変化を通知する."""
        for listener in list(self._listeners):
            listener(event, self._session)
