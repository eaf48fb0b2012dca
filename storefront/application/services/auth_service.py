"""認証・セッションサービス."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from storefront.domain.enums import AuthEventType, UserRole
from storefront.domain.ports import (
    ApiError,
    ApiGateway,
    AuthProvider,
    AuthProviderError,
    CredentialsSource,
)
from storefront.domain.value_objects import AuthSession, AuthUser, Email

logger = logging.getLogger(__name__)

UserListener = Callable[["AuthUser | None"], None]


@dataclass(frozen=True)
class AuthResult:
    """サインイン・サインアップ結果."""

    success: bool
    error: str | None = None


@dataclass(frozen=True)
class SignOutResult:
    """サインアウト結果."""

    success: bool
    error: str | None = None


class AuthService(CredentialsSource):
    """認証プロバイダーのセッションとプロフィールのロールを保持する.

    APIクライアントの認証情報の提供元も兼ねる。
    """

    def __init__(
        self,
        provider: AuthProvider,
        api: ApiGateway,
        site_url: str = "http://localhost:3000",
    ) -> None:
        """初期化.

        Args:
            provider: 認証プロバイダー
            api: ストアフロントAPI
            site_url: OAuth のリダイレクト先に使う既定のオリジン
        """
        self._provider = provider
        self._api = api
        self._site_url = site_url.rstrip("/")
        self._session: AuthSession | None = None
        self._role: UserRole | None = None
        self._jwt_token: str | None = None
        self._loading = True
        self._listeners: list[UserListener] = []
        self._unsubscribe = provider.on_auth_state_change(self.handle_auth_state_change)

    # --- 状態 ---

    @property
    def session(self) -> AuthSession | None:
        """現在のセッション."""
        return self._session

    @property
    def user(self) -> AuthUser | None:
        """サインイン中のユーザー."""
        return self._session.user if self._session else None

    @property
    def role(self) -> UserRole | None:
        """プロフィールのロール（未サインインならNone）."""
        return self._role

    @property
    def is_loading(self) -> bool:
        """初期セッション確認中か."""
        return self._loading

    @property
    def jwt_token(self) -> str | None:
        """API認証用のトークン."""
        return self._jwt_token

    @property
    def is_authenticated(self) -> bool:
        """サインイン済みか."""
        return self._session is not None

    @property
    def is_admin(self) -> bool:
        """管理者（admin / super_admin）か."""
        return self._role is not None and self._role.is_admin()

    @property
    def is_super_admin(self) -> bool:
        """スーパー管理者か."""
        return self._role == UserRole.SUPER_ADMIN

    # --- 購読 ---

    def subscribe(self, listener: UserListener) -> Callable[[], None]:
        """ユーザーの変化を購読する. 戻り値は購読解除関数."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def close(self) -> None:
        """認証プロバイダーの購読を解除する."""
        self._unsubscribe()

    def _notify(self) -> None:
        user = self.user
        for listener in list(self._listeners):
            listener(user)

    # --- ライフサイクル ---

    def initialize(self) -> None:
        """現在のセッションを取得し、プロフィールを更新する."""
        try:
            session = self._provider.get_session()
        except AuthProviderError as e:
            logger.warning(f"Session check error: {e}")
            session = None
        self._session = session
        self._loading = False
        self._update_profile(session, ensure_profile=True)
        self._notify()

    def handle_auth_state_change(self, event: AuthEventType, session: AuthSession | None) -> None:
        """認証プロバイダーからの状態変化を反映する."""
        self._session = session
        self._loading = False
        self._update_profile(session, ensure_profile=event.requires_profile())
        self._notify()

    def refresh_profile(self) -> None:
        """ロールとトークンを取り直す."""
        if self._session is not None:
            self._update_profile(self._session)

    # --- 操作 ---

    def sign_in(self, email: str, password: str) -> AuthResult:
        """メールアドレスとパスワードでサインインする."""
        try:
            self._provider.sign_in_with_password(email, password)
        except AuthProviderError as e:
            logger.error(f"Sign in failed: {e}")
            return AuthResult(success=False, error=str(e))
        return AuthResult(success=True)

    def sign_up(self, email: str, password: str) -> AuthResult:
        """ユーザーを登録する. プロフィール作成の失敗は登録を妨げない."""
        try:
            email = Email(email).value
        except ValueError as e:
            return AuthResult(success=False, error=str(e))
        try:
            user = self._provider.sign_up(email, password)
        except AuthProviderError as e:
            logger.error(f"Sign up failed: {e}")
            return AuthResult(success=False, error=str(e))
        if user is not None:
            self._ensure_profile(user)
        return AuthResult(success=True)

    def sign_in_with_google(self, origin: str | None = None) -> str:
        """Google OAuth の認可URLを返す."""
        base = (origin or self._site_url).rstrip("/")
        return self._provider.build_oauth_url(f"{base}/auth/callback")

    def sign_out(self) -> SignOutResult:
        """サインアウトし、ロールとトークンを破棄する."""
        try:
            self._provider.sign_out()
        except AuthProviderError as e:
            logger.error(f"Sign out failed: {e}")
            return SignOutResult(success=False, error=str(e))
        self._role = None
        self._jwt_token = None
        logger.info("Sign out successful")
        return SignOutResult(success=True)

    # --- プロフィール ---

    def _ensure_profile(self, user: AuthUser) -> bool:
        """プロフィールが無ければ作成する."""
        try:
            self._api.post("/api/profile/create")
            return True
        except ApiError as e:
            logger.warning(f"Failed to create user profile for {user.user_id}: {e}")
            return False

    def _update_profile(self, session: AuthSession | None, ensure_profile: bool = False) -> None:
        """トークンの発行とロールの取得を行う.

        ロールが取れない場合は customer とみなす。
        """
        if session is None:
            self._role = None
            self._jwt_token = None
            return

        user = session.user
        # 以降のプロフィールAPIはこのトークンで認証する
        self._jwt_token = self._generate_token(user)
        if ensure_profile:
            self._ensure_profile(user)
        try:
            data = self._api.get("/api/profile", require_auth=True) or {}
            self._role = UserRole(data.get("role") or UserRole.CUSTOMER.value)
        except (ApiError, ValueError) as e:
            logger.error(f"Error updating user profile: {e}")
            self._role = UserRole.CUSTOMER

    def _generate_token(self, user: AuthUser) -> str | None:
        try:
            data = self._api.post(
                "/api/auth/generate-token",
                json={"userId": user.user_id.value, "userEmail": user.email},
            )
        except ApiError as e:
            logger.error(f"Error generating JWT token: {e}")
            return None
        if not isinstance(data, dict):
            return None
        return data.get("token")
