"""管理画面パネルの共通部分."""
from __future__ import annotations

import logging
from typing import Any

from storefront.domain.ports import ApiError, ApiGateway, Notifier

from ..services.request_generation import LatestRequestGuard

logger = logging.getLogger(__name__)


class AdminPanel:
    """一覧の取得・絞り込み・更新を行う管理画面パネル.

    一覧取得は世代管理し、最後に発行した取得の結果だけを反映する。
    APIの失敗はログに残して通知し、その操作は中断する。
    """

    def __init__(self, api: ApiGateway, notifier: Notifier) -> None:
        """初期化."""
        self._api = api
        self._notifier = notifier
        self._guard = LatestRequestGuard()
        self._loading = False

    @property
    def is_loading(self) -> bool:
        """一覧を取得中か."""
        return self._loading

    def _fetch(self, path: str, params: dict[str, Any] | None = None, **kwargs: Any) -> tuple[bool, Any]:
        """一覧を取得する.

        Returns:
            (反映してよいか, レスポンス). 新しい取得に追い越された場合は (False, None)

        Raises:
            ApiError: 取得に失敗した場合（呼び出し側で通知する）
        """
        generation = self._guard.begin()
        self._loading = True
        try:
            data = self._api.get(path, params=params, **kwargs)
        except ApiError:
            if self._guard.is_current(generation):
                self._loading = False
            raise
        if not self._guard.is_current(generation):
            logger.info(f"Discarded stale response for {path}")
            return False, None
        self._loading = False
        return True, data

    def _report(self, message: str, error: Exception) -> None:
        logger.error(f"{message}: {error}")
        self._notifier.error(message)
