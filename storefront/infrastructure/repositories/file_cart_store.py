"""端末ローカルカートのJSONファイル実装."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from storefront.domain.entities import CartItem
from storefront.domain.ports import CartStoreError, LocalCartStore

logger = logging.getLogger(__name__)

DEFAULT_CART_FILE = ".storefront/cart.json"


class FileCartStore(LocalCartStore):
    """カートをJSONファイル1つに保存する."""

    def __init__(self, path: str | Path | None = None) -> None:
        """初期化."""
        self._path = Path(path or os.environ.get("CART_FILE_PATH", DEFAULT_CART_FILE))

    @property
    def path(self) -> Path:
        """保存先のパス."""
        return self._path

    def load(self) -> list[CartItem]:
        """保存済みアイテムを読み込む."""
        if not self._path.exists():
            return []
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
            return [CartItem.from_dict(entry) for entry in data]
        except OSError as e:
            raise CartStoreError(f"Failed to read cart file {self._path}: {e}") from e
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise CartStoreError(f"Corrupted cart file {self._path}: {e}") from e

    def save(self, items: list[CartItem]) -> None:
        """アイテムを保存する."""
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                json.dumps([item.to_dict() for item in items], ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError as e:
            raise CartStoreError(f"Failed to write cart file {self._path}: {e}") from e
        logger.debug(f"Saved {len(items)} cart items to {self._path}")

    def clear(self) -> None:
        """保存済みアイテムを削除する."""
        try:
            self._path.unlink(missing_ok=True)
        except OSError as e:
            raise CartStoreError(f"Failed to delete cart file {self._path}: {e}") from e
