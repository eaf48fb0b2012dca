"""APIゲートウェイのモック実装."""
from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any

from storefront.domain.ports import ApiGateway, CredentialsSource


@dataclass(frozen=True)
class RecordedCall:
    """送信されたリクエスト."""

    method: str
    path: str
    params: dict[str, Any] | None
    json: Any
    require_auth: bool
    require_admin: bool


class MockApiGateway(ApiGateway):
    """APIゲートウェイのモック実装（テスト・ローカル用、レスポンスとエラーを設定可能）.

    レスポンスには値、または RecordedCall を受け取る関数を設定できる。
    """

    def __init__(self, credentials: CredentialsSource | None = None) -> None:
        """初期化."""
        self._credentials = credentials
        self._responses: dict[tuple[str, str], Any] = {}
        self._errors: dict[tuple[str, str], Exception] = {}
        self.calls: list[RecordedCall] = []

    def bind_credentials(self, credentials: CredentialsSource) -> None:
        """認証情報の提供元を設定する."""
        self._credentials = credentials

    def set_response(self, method: str, path: str, response: Any) -> None:
        """レスポンスを設定する."""
        self._responses[(method.upper(), path)] = response
        self._errors.pop((method.upper(), path), None)

    def set_error(self, method: str, path: str, error: Exception) -> None:
        """エラーを発生させる設定."""
        self._errors[(method.upper(), path)] = error

    def calls_to(self, method: str, path: str) -> list[RecordedCall]:
        """指定エンドポイントへの呼び出し."""
        return [c for c in self.calls if c.method == method.upper() and c.path == path]

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
        """設定済みのレスポンスを返す（未設定ならNone）."""
        self.ensure_access(self._credentials, require_auth, require_admin)
        call = RecordedCall(method.upper(), path, params, json, require_auth, require_admin)
        self.calls.append(call)

        key = (call.method, path)
        if key in self._errors:
            raise self._errors[key]
        response = self._responses.get(key)
        if callable(response):
            return response(call)
        return copy.deepcopy(response)
