"""CognitoAuthProviderのテスト."""
import base64
import json
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock
from urllib.parse import parse_qs, urlparse

import pytest
from botocore.exceptions import ClientError

from storefront.domain.enums import AuthEventType
from storefront.domain.identifiers import UserId
from storefront.domain.ports import AuthProviderError
from storefront.domain.value_objects import AuthSession, AuthUser
from storefront.infrastructure.providers import CognitoAuthProvider, decode_jwt_payload


def _jwt(claims: dict) -> str:
    payload = base64.urlsafe_b64encode(json.dumps(claims).encode()).decode().rstrip("=")
    return f"header.{payload}.signature"


def _auth_result(sub: str = "user-1", email: str = "a@example.com", refresh: str | None = "refresh-1") -> dict:
    result = {
        "AccessToken": "access-1",
        "IdToken": _jwt({"sub": sub, "email": email}),
        "ExpiresIn": 3600,
    }
    if refresh:
        result["RefreshToken"] = refresh
    return result


def _client_error(code: str, message: str = "error") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": message}}, "Operation")


def _provider(client: MagicMock | None = None) -> CognitoAuthProvider:
    return CognitoAuthProvider(client_id="client-1", domain="auth.example.com", client=client or MagicMock())


class TestDecodeJwtPayload:
    """decode_jwt_payloadのテスト."""

    def test_パディングなしのペイロードをデコードできる(self) -> None:
        assert decode_jwt_payload(_jwt({"sub": "abc"})) == {"sub": "abc"}

    def test_ドットがなければエラー(self) -> None:
        with pytest.raises(AuthProviderError, match="Malformed"):
            decode_jwt_payload("not-a-token")

    def test_JSONでなければエラー(self) -> None:
        payload = base64.urlsafe_b64encode(b"not json").decode()
        with pytest.raises(AuthProviderError, match="decode"):
            decode_jwt_payload(f"h.{payload}.s")


class TestSignIn:
    """サインインのテスト."""

    def test_IdTokenのクレームからセッションを作る(self) -> None:
        client = MagicMock()
        client.initiate_auth.return_value = {"AuthenticationResult": _auth_result()}
        provider = _provider(client)
        events = []
        provider.on_auth_state_change(lambda event, session: events.append((event, session)))

        session = provider.sign_in_with_password("a@example.com", "secret")

        assert session.user == AuthUser(UserId("user-1"), "a@example.com")
        assert session.access_token == "access-1"
        assert session.refresh_token == "refresh-1"
        assert not session.is_expired()
        assert provider.get_session() == session
        assert events == [(AuthEventType.SIGNED_IN, session)]
        client.initiate_auth.assert_called_once_with(
            AuthFlow="USER_PASSWORD_AUTH",
            ClientId="client-1",
            AuthParameters={"USERNAME": "a@example.com", "PASSWORD": "secret"},
        )

    def test_認証失敗はメッセージ付きのエラー(self) -> None:
        client = MagicMock()
        client.initiate_auth.side_effect = _client_error("NotAuthorizedException", "Incorrect username or password.")
        provider = _provider(client)

        with pytest.raises(AuthProviderError, match="Incorrect username or password."):
            provider.sign_in_with_password("a@example.com", "wrong")
        assert provider.get_session() is None

    def test_追加チャレンジが必要ならエラー(self) -> None:
        client = MagicMock()
        client.initiate_auth.return_value = {"ChallengeName": "NEW_PASSWORD_REQUIRED"}
        with pytest.raises(AuthProviderError, match="NEW_PASSWORD_REQUIRED"):
            _provider(client).sign_in_with_password("a@example.com", "secret")


class TestSessionRefresh:
    """セッションのリフレッシュ."""

    def _expired(self, refresh_token: str | None) -> AuthSession:
        return AuthSession(
            user=AuthUser(UserId("user-1"), "a@example.com"),
            access_token="old",
            refresh_token=refresh_token,
            expires_at=datetime.now(timezone.utc) - timedelta(minutes=1),
        )

    def test_期限切れならリフレッシュトークンで更新する(self) -> None:
        client = MagicMock()
        client.initiate_auth.return_value = {"AuthenticationResult": _auth_result(refresh=None)}
        provider = _provider(client)
        provider._session = self._expired("refresh-1")
        events = []
        provider.on_auth_state_change(lambda event, session: events.append(event))

        session = provider.get_session()

        assert session.access_token == "access-1"
        assert session.refresh_token == "refresh-1"
        assert events == [AuthEventType.TOKEN_REFRESHED]
        assert client.initiate_auth.call_args.kwargs["AuthFlow"] == "REFRESH_TOKEN_AUTH"

    def test_リフレッシュトークンがなければセッションを破棄(self) -> None:
        client = MagicMock()
        provider = _provider(client)
        provider._session = self._expired(None)

        assert provider.get_session() is None
        client.initiate_auth.assert_not_called()

    def test_リフレッシュ失敗はエラー(self) -> None:
        client = MagicMock()
        client.initiate_auth.side_effect = _client_error("NotAuthorizedException", "Refresh Token has expired")
        provider = _provider(client)
        provider._session = self._expired("refresh-1")

        with pytest.raises(AuthProviderError, match="Refresh Token has expired"):
            provider.get_session()


class TestSignUp:
    """サインアップのテスト."""

    def test_UserSubからユーザーを返す(self) -> None:
        client = MagicMock()
        client.sign_up.return_value = {"UserSub": "sub-9", "UserConfirmed": False}

        user = _provider(client).sign_up("new@example.com", "Passw0rd!")

        assert user == AuthUser(UserId("sub-9"), "new@example.com")
        kwargs = client.sign_up.call_args.kwargs
        assert kwargs["UserAttributes"] == [{"Name": "email", "Value": "new@example.com"}]

    def test_UserSubがなければNone(self) -> None:
        client = MagicMock()
        client.sign_up.return_value = {}
        assert _provider(client).sign_up("new@example.com", "Passw0rd!") is None

    def test_登録済みはエラー(self) -> None:
        client = MagicMock()
        client.sign_up.side_effect = _client_error("UsernameExistsException", "User already exists")
        with pytest.raises(AuthProviderError, match="User already exists"):
            _provider(client).sign_up("a@example.com", "Passw0rd!")


class TestSignOut:
    """サインアウトのテスト."""

    def _signed_in(self, client: MagicMock) -> CognitoAuthProvider:
        client.initiate_auth.return_value = {"AuthenticationResult": _auth_result()}
        provider = _provider(client)
        provider.sign_in_with_password("a@example.com", "secret")
        return provider

    def test_グローバルサインアウトしてイベントを通知(self) -> None:
        client = MagicMock()
        provider = self._signed_in(client)
        events = []
        provider.on_auth_state_change(lambda event, session: events.append((event, session)))

        provider.sign_out()

        client.global_sign_out.assert_called_once_with(AccessToken="access-1")
        assert provider.get_session() is None
        assert events == [(AuthEventType.SIGNED_OUT, None)]

    def test_トークン失効済みでもサインアウトできる(self) -> None:
        client = MagicMock()
        provider = self._signed_in(client)
        client.global_sign_out.side_effect = _client_error("NotAuthorizedException", "Access Token has been revoked")

        provider.sign_out()

        assert provider.get_session() is None

    def test_その他のエラーはセッションを残す(self) -> None:
        client = MagicMock()
        provider = self._signed_in(client)
        client.global_sign_out.side_effect = _client_error("InternalErrorException", "boom")

        with pytest.raises(AuthProviderError, match="boom"):
            provider.sign_out()
        assert provider.get_session() is not None


class TestOAuthUrl:
    """Google OAuth URLのテスト."""

    def test_ホストUIの認可URLを組み立てる(self) -> None:
        url = _provider().build_oauth_url("http://localhost:3000/auth/callback")

        parsed = urlparse(url)
        query = parse_qs(parsed.query)
        assert parsed.netloc == "auth.example.com"
        assert parsed.path == "/oauth2/authorize"
        assert query["identity_provider"] == ["Google"]
        assert query["redirect_uri"] == ["http://localhost:3000/auth/callback"]
        assert query["client_id"] == ["client-1"]

    def test_ドメイン未設定はエラー(self, monkeypatch) -> None:
        monkeypatch.delenv("COGNITO_DOMAIN", raising=False)
        provider = CognitoAuthProvider(client_id="client-1", client=MagicMock())
        with pytest.raises(AuthProviderError, match="COGNITO_DOMAIN"):
            provider.build_oauth_url("http://localhost:3000/auth/callback")


class TestSubscription:
    """購読解除のテスト."""

    def test_解除後は通知されない(self) -> None:
        client = MagicMock()
        client.initiate_auth.return_value = {"AuthenticationResult": _auth_result()}
        provider = _provider(client)
        events = []
        unsubscribe = provider.on_auth_state_change(lambda event, session: events.append(event))

        unsubscribe()
        unsubscribe()
        provider.sign_in_with_password("a@example.com", "secret")

        assert events == []
