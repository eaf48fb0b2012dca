"""Amazon Cognito による認証プロバイダー実装."""
from __future__ import annotations

import base64
import json
import logging
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Callable
from urllib.parse import urlencode

import boto3
from botocore.exceptions import ClientError

from storefront.domain.enums import AuthEventType
from storefront.domain.identifiers import UserId
from storefront.domain.ports import AuthProvider, AuthProviderError, AuthStateListener
from storefront.domain.value_objects import AuthSession, AuthUser

logger = logging.getLogger(__name__)


def decode_jwt_payload(token: str) -> dict[str, Any]:
    """JWT のペイロードをデコードする（署名検証は Cognito 側で実施済み）."""
    parts = token.split(".")
    if len(parts) < 2:
        raise AuthProviderError("Malformed token")
    # base64urlデコード（パディング補完）
    payload_b64 = parts[1]
    padding = 4 - len(payload_b64) % 4
    if padding != 4:
        payload_b64 += "=" * padding
    try:
        return json.loads(base64.urlsafe_b64decode(payload_b64))
    except (json.JSONDecodeError, UnicodeDecodeError, ValueError) as e:
        raise AuthProviderError("Failed to decode token payload") from e


class CognitoAuthProvider(AuthProvider):
    """Cognito ユーザープールのアプリクライアントでサインインする."""

    def __init__(
        self,
        client_id: str | None = None,
        domain: str | None = None,
        client: Any = None,
    ) -> None:
        """初期化.

        Args:
            client_id: アプリクライアントID（省略時は COGNITO_CLIENT_ID）
            domain: ホストUIのドメイン（省略時は COGNITO_DOMAIN）
            client: cognito-idp クライアント
        """
        self._client_id = client_id or os.environ.get("COGNITO_CLIENT_ID", "")
        self._domain = domain or os.environ.get("COGNITO_DOMAIN", "")
        self._client = client or boto3.client("cognito-idp")
        self._session: AuthSession | None = None
        self._listeners: list[AuthStateListener] = []

    def get_session(self) -> AuthSession | None:
        """現在のセッションを取得する. 期限切れならリフレッシュする."""
        session = self._session
        if session is None or not session.is_expired():
            return session
        if session.refresh_token is None:
            self._session = None
            return None

        try:
            response = self._client.initiate_auth(
                AuthFlow="REFRESH_TOKEN_AUTH",
                ClientId=self._client_id,
                AuthParameters={"REFRESH_TOKEN": session.refresh_token},
            )
        except ClientError as e:
            logger.error(f"Failed to refresh session: {e}")
            raise AuthProviderError(self._message(e)) from e

        self._session = self._session_from_result(
            response["AuthenticationResult"], refresh_token=session.refresh_token
        )
        self._emit(AuthEventType.TOKEN_REFRESHED)
        return self._session

    def sign_in_with_password(self, email: str, password: str) -> AuthSession:
        """メールアドレスとパスワードでサインインする."""
        try:
            response = self._client.initiate_auth(
                AuthFlow="USER_PASSWORD_AUTH",
                ClientId=self._client_id,
                AuthParameters={"USERNAME": email, "PASSWORD": password},
            )
        except ClientError as e:
            logger.error(f"Failed to sign in {email}: {e}")
            raise AuthProviderError(self._message(e)) from e

        result = response.get("AuthenticationResult")
        if not result:
            raise AuthProviderError(f"Additional challenge required: {response.get('ChallengeName')}")

        self._session = self._session_from_result(result)
        self._emit(AuthEventType.SIGNED_IN)
        return self._session

    def sign_up(self, email: str, password: str) -> AuthUser | None:
        """ユーザーを登録する."""
        try:
            response = self._client.sign_up(
                ClientId=self._client_id,
                Username=email,
                Password=password,
                UserAttributes=[{"Name": "email", "Value": email}],
            )
        except ClientError as e:
            logger.error(f"Failed to sign up {email}: {e}")
            raise AuthProviderError(self._message(e)) from e

        user_sub = response.get("UserSub")
        if not user_sub:
            return None
        return AuthUser(user_id=UserId(user_sub), email=email)

    def sign_out(self) -> None:
        """全端末からサインアウトする."""
        session = self._session
        if session is not None:
            try:
                self._client.global_sign_out(AccessToken=session.access_token)
            except ClientError as e:
                # 期限切れのトークンはサインアウト済みとみなす
                if e.response["Error"]["Code"] != "NotAuthorizedException":
                    logger.error(f"Failed to sign out: {e}")
                    raise AuthProviderError(self._message(e)) from e
        self._session = None
        self._emit(AuthEventType.SIGNED_OUT)

    def build_oauth_url(self, redirect_to: str) -> str:
        """ホストUIの Google 認可URLを組み立てる."""
        if not self._domain:
            raise AuthProviderError("COGNITO_DOMAIN is not configured")
        query = urlencode(
            {
                "identity_provider": "Google",
                "redirect_uri": redirect_to,
                "response_type": "code",
                "client_id": self._client_id,
                "scope": "openid email profile",
            }
        )
        return f"https://{self._domain}/oauth2/authorize?{query}"

    def on_auth_state_change(self, listener: AuthStateListener) -> Callable[[], None]:
        """認証状態の変化を購読する."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event: AuthEventType) -> None:
        for listener in list(self._listeners):
            listener(event, self._session)

    @staticmethod
    def _session_from_result(result: dict[str, Any], refresh_token: str | None = None) -> AuthSession:
        """InitiateAuth の AuthenticationResult からセッションを作る."""
        id_token = result.get("IdToken")
        if not id_token:
            raise AuthProviderError("IdToken missing from authentication result")
        claims = decode_jwt_payload(id_token)
        expires_in = int(result.get("ExpiresIn", 3600))
        return AuthSession(
            user=AuthUser(user_id=UserId(claims["sub"]), email=claims.get("email")),
            access_token=result["AccessToken"],
            id_token=id_token,
            refresh_token=result.get("RefreshToken") or refresh_token,
            expires_at=datetime.now(timezone.utc) + timedelta(seconds=expires_in),
        )

    @staticmethod
    def _message(error: ClientError) -> str:
        return error.response.get("Error", {}).get("Message") or str(error)
