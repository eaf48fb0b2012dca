"""ストアフロントAPIゲートウェイインターフェース."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class ApiError(Exception):
    """APIエラー."""

    def __init__(self, message: str, status: int | None = None) -> None:
        """初期化."""
        super().__init__(message)
        self.message = message
        self.status = status


class ApiAuthenticationError(ApiError):
    """認証が必要（401）."""

    def __init__(self, message: str = "Authentication required") -> None:
        """初期化."""
        super().__init__(message, status=401)


class ApiForbiddenError(ApiError):
    """権限不足（403）."""

    def __init__(self, message: str = "Admin privileges required") -> None:
        """初期化."""
        super().__init__(message, status=403)


class CredentialsSource(ABC):
    """APIリクエストに付与する認証情報の提供元."""

    @property
    @abstractmethod
    def jwt_token(self) -> str | None:
        """Bearer トークン."""
        pass

    @property
    @abstractmethod
    def is_authenticated(self) -> bool:
        """サインイン済みか."""
        pass

    @property
    @abstractmethod
    def is_admin(self) -> bool:
        """管理者か."""
        pass


class ApiGateway(ABC):
    """/api/... バックエンドへのゲートウェイ."""

    @staticmethod
    def ensure_access(
        credentials: CredentialsSource | None,
        require_auth: bool,
        require_admin: bool,
    ) -> None:
        """リクエスト前に認証・権限を確認する."""
        if require_auth and (credentials is None or not credentials.is_authenticated):
            raise ApiAuthenticationError()
        if require_admin and (credentials is None or not credentials.is_admin):
            raise ApiForbiddenError()

    @abstractmethod
    def bind_credentials(self, credentials: CredentialsSource) -> None:
        """認証情報の提供元を設定する."""
        pass

    @abstractmethod
    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        require_auth: bool = False,
        require_admin: bool = False,
    ) -> Any:
        """リクエストを送信し、デコード済みのJSONボディを返す.

        Raises:
            ApiAuthenticationError: 未認証、または401
            ApiForbiddenError: 管理者でない、または403
            ApiError: その他の失敗
        """
        pass

    def get(self, path: str, params: dict[str, Any] | None = None, **kwargs: Any) -> Any:
        """GETリクエスト."""
        return self.request("GET", path, params=params, **kwargs)

    def post(self, path: str, json: Any = None, **kwargs: Any) -> Any:
        """POSTリクエスト."""
        return self.request("POST", path, json=json, **kwargs)

    def put(self, path: str, json: Any = None, **kwargs: Any) -> Any:
        """PUTリクエスト."""
        return self.request("PUT", path, json=json, **kwargs)

    def patch(self, path: str, json: Any = None, **kwargs: Any) -> Any:
        """PATCHリクエスト."""
        return self.request("PATCH", path, json=json, **kwargs)

    def delete(self, path: str, params: dict[str, Any] | None = None, **kwargs: Any) -> Any:
        """DELETEリクエスト."""
        return self.request("DELETE", path, params=params, **kwargs)
