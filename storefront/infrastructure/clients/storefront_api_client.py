"""ストアフロントAPIクライアント.

/api/... バックエンドにJSONで問い合わせる。サインイン中は Bearer トークンを付与する。
"""
from __future__ import annotations

import logging
import os
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from storefront.domain.ports import (
    ApiAuthenticationError,
    ApiError,
    ApiForbiddenError,
    ApiGateway,
    CredentialsSource,
)

logger = logging.getLogger(__name__)


class StorefrontApiClient(ApiGateway):
    """requests によるストアフロントAPIゲートウェイ."""

    DEFAULT_TIMEOUT = 15

    def __init__(
        self,
        base_url: str | None = None,
        credentials: CredentialsSource | None = None,
        timeout: int | None = None,
        retries: int = 0,
    ) -> None:
        """初期化.

        Args:
            base_url: APIのオリジン（省略時は STOREFRONT_API_URL）
            credentials: 認証情報の提供元
            timeout: タイムアウト秒
            retries: 5xx の再試行回数（既定は再試行しない）
        """
        self._base_url = (
            base_url or os.environ.get("STOREFRONT_API_URL", "http://localhost:3000")
        ).rstrip("/")
        self._credentials = credentials
        self._timeout = timeout or self.DEFAULT_TIMEOUT
        self._retries = retries
        self._session = self._create_session()

    def _create_session(self) -> requests.Session:
        """HTTP セッションを作成する."""
        session = requests.Session()
        retry_strategy = Retry(
            total=self._retries,
            backoff_factor=0.5,
            status_forcelist=[500, 502, 503, 504],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def bind_credentials(self, credentials: CredentialsSource) -> None:
        """認証情報の提供元を設定する."""
        self._credentials = credentials

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
        """リクエストを送信し、デコード済みのJSONボディを返す（ボディが空ならNone）."""
        self.ensure_access(self._credentials, require_auth, require_admin)

        headers = {}
        token = self._credentials.jwt_token if self._credentials else None
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = self._session.request(
                method,
                f"{self._base_url}{path}",
                params=params,
                json=json,
                headers=headers,
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Request failed: {method} {path}: {e}")
            raise ApiError(f"Request failed: {e}") from e

        if response.status_code == 401:
            raise ApiAuthenticationError("Authentication failed - please log in again")
        if response.status_code == 403:
            raise ApiForbiddenError("Access denied - insufficient permissions")
        if not response.ok:
            message = self._error_message(response)
            logger.error(f"{method} {path} failed with {response.status_code}: {message}")
            raise ApiError(message, status=response.status_code)

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON response from {path}", status=response.status_code) from e

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        """エラーレスポンスの error を取り出す."""
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return f"Request failed with status {response.status_code}"
