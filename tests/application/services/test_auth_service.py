"""AuthServiceのテスト."""
from storefront.application.services import AuthService
from storefront.domain.enums import UserRole
from storefront.domain.ports import ApiError, AuthProviderError
from storefront.infrastructure.clients import MockApiGateway
from storefront.infrastructure.providers import InMemoryAuthProvider


def _build(role: str = "customer") -> tuple[AuthService, InMemoryAuthProvider, MockApiGateway]:
    provider = InMemoryAuthProvider()
    provider.register("asha@example.com", "secret", user_id="u1")
    api = MockApiGateway()
    api.set_response("POST", "/api/auth/generate-token", {"token": "jwt-1"})
    api.set_response("GET", "/api/profile", {"id": "u1", "role": role})
    auth = AuthService(provider, api)
    api.bind_credentials(auth)
    return auth, provider, api


class TestInitialize:
    """初期化のテスト."""

    def test_未サインインならロールもトークンもない(self) -> None:
        auth, _, _ = _build()
        assert auth.is_loading is True
        auth.initialize()
        assert auth.is_loading is False
        assert auth.user is None
        assert auth.role is None
        assert auth.jwt_token is None

    def test_セッション取得エラーは未サインイン扱い(self) -> None:
        auth, provider, _ = _build()
        provider.set_session_error(AuthProviderError("network down"))
        auth.initialize()
        assert auth.is_loading is False
        assert auth.is_authenticated is False


class TestSignIn:
    """サインインのテスト."""

    def test_サインインでトークン発行とロール取得を行う(self) -> None:
        auth, _, api = _build(role="admin")
        auth.initialize()

        result = auth.sign_in("asha@example.com", "secret")

        assert result.success is True
        assert auth.user.user_id.value == "u1"
        assert auth.jwt_token == "jwt-1"
        assert auth.role == UserRole.ADMIN
        assert auth.is_admin is True
        assert auth.is_super_admin is False
        token_call = api.calls_to("POST", "/api/auth/generate-token")[0]
        assert token_call.json == {"userId": "u1", "userEmail": "asha@example.com"}
        assert len(api.calls_to("POST", "/api/profile/create")) == 1

    def test_トークン発行はプロフィールAPIより先(self) -> None:
        auth, _, api = _build()
        auth.initialize()
        auth.sign_in("asha@example.com", "secret")
        paths = [call.path for call in api.calls]
        assert paths.index("/api/auth/generate-token") < paths.index("/api/profile")

    def test_パスワード誤りは失敗結果(self) -> None:
        auth, _, _ = _build()
        result = auth.sign_in("asha@example.com", "wrong")
        assert result.success is False
        assert result.error == "Invalid login credentials"
        assert auth.is_authenticated is False

    def test_プロフィール取得失敗はcustomer扱い(self) -> None:
        auth, _, api = _build()
        api.set_error("GET", "/api/profile", ApiError("boom", status=500))
        auth.sign_in("asha@example.com", "secret")
        assert auth.role == UserRole.CUSTOMER
        assert auth.is_admin is False

    def test_不明なロールはcustomer扱い(self) -> None:
        auth, _, _ = _build(role="wizard")
        auth.sign_in("asha@example.com", "secret")
        assert auth.role == UserRole.CUSTOMER

    def test_トークン発行失敗でもロールは取得する(self) -> None:
        auth, _, api = _build(role="super_admin")
        api.set_error("POST", "/api/auth/generate-token", ApiError("boom"))
        auth.sign_in("asha@example.com", "secret")
        assert auth.jwt_token is None
        assert auth.is_super_admin is True


class TestSignUp:
    """サインアップのテスト."""

    def test_登録するとプロフィールを作成する(self) -> None:
        auth, _, api = _build()
        result = auth.sign_up("new@example.com", "secret")
        assert result.success is True
        assert len(api.calls_to("POST", "/api/profile/create")) == 1

    def test_メール形式が不正なら登録しない(self) -> None:
        auth, _, api = _build()
        result = auth.sign_up("not-an-email", "secret")
        assert result.success is False
        assert "Invalid email format" in result.error
        assert api.calls == []

    def test_登録済みのメールは失敗結果(self) -> None:
        auth, _, _ = _build()
        result = auth.sign_up("asha@example.com", "secret")
        assert result.success is False
        assert result.error == "User already registered"

    def test_プロフィール作成失敗でも登録は成功(self) -> None:
        auth, _, api = _build()
        api.set_error("POST", "/api/profile/create", ApiError("conflict", status=409))
        assert auth.sign_up("new@example.com", "secret").success is True


class TestSignOut:
    """サインアウトのテスト."""

    def test_サインアウトでロールとトークンを破棄(self) -> None:
        auth, _, _ = _build(role="admin")
        auth.sign_in("asha@example.com", "secret")

        result = auth.sign_out()

        assert result.success is True
        assert auth.user is None
        assert auth.role is None
        assert auth.jwt_token is None

    def test_サインアウト失敗は結果で返す(self) -> None:
        auth, provider, _ = _build()
        auth.sign_in("asha@example.com", "secret")
        provider.set_sign_out_error(AuthProviderError("network down"))
        result = auth.sign_out()
        assert result.success is False
        assert result.error == "network down"
        assert auth.is_authenticated is True


class TestGoogleSignIn:
    """Google OAuth のテスト."""

    def test_既定のオリジンでコールバックURLを組み立てる(self) -> None:
        auth, _, _ = _build()
        url = auth.sign_in_with_google()
        assert url == "memory://oauth/google?redirect_to=http%3A%2F%2Flocalhost%3A3000%2Fauth%2Fcallback"

    def test_指定オリジンの末尾スラッシュは除く(self) -> None:
        auth, _, _ = _build()
        url = auth.sign_in_with_google("https://shop.example/")
        assert url.endswith("https%3A%2F%2Fshop.example%2Fauth%2Fcallback")


class TestSubscribe:
    """購読のテスト."""

    def test_ユーザーの変化を通知し解除後は通知しない(self) -> None:
        auth, _, _ = _build()
        received = []
        unsubscribe = auth.subscribe(received.append)

        auth.sign_in("asha@example.com", "secret")
        unsubscribe()
        auth.sign_out()

        assert len(received) == 1
        assert received[0].email == "asha@example.com"

    def test_closeでプロバイダーの購読を解除(self) -> None:
        auth, provider, _ = _build()
        auth.close()
        provider.sign_in_with_password("asha@example.com", "secret")
        assert auth.user is None
