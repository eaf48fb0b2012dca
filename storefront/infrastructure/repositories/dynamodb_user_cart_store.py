"""ユーザーカートのDynamoDB実装."""
import logging
import os
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

import boto3
from botocore.exceptions import ClientError

from storefront.domain.entities import CartItem
from storefront.domain.identifiers import ProductId, UserId
from storefront.domain.ports import CartStoreError, RemoteCartStore
from storefront.domain.value_objects import Money

logger = logging.getLogger(__name__)


class DynamoDBUserCartStore(RemoteCartStore):
    """ユーザーカートのDynamoDB実装（user_id をパーティションキーとする）."""

    def __init__(self, table_name: str | None = None) -> None:
        """初期化."""
        self._table_name = table_name or os.environ.get(
            "CART_TABLE_NAME", "storefront-user-carts"
        )
        self._dynamodb = boto3.resource("dynamodb")
        self._table = self._dynamodb.Table(self._table_name)

    def load(self, user_id: UserId) -> list[CartItem]:
        """ユーザーのアイテムを読み込む."""
        try:
            response = self._table.get_item(Key={"user_id": user_id.value})
        except ClientError as e:
            logger.error(f"Failed to load cart for {user_id.value}: {e}")
            raise CartStoreError(f"Failed to load cart: {e.response['Error']['Code']}") from e
        item = response.get("Item")
        if item is None:
            return []
        return self._from_dynamodb_item(item)

    def save(self, user_id: UserId, items: list[CartItem]) -> None:
        """ユーザーのアイテムを保存する."""
        try:
            self._table.put_item(Item=self._to_dynamodb_item(user_id, items))
        except ClientError as e:
            logger.error(f"Failed to save cart for {user_id.value}: {e}")
            raise CartStoreError(f"Failed to save cart: {e.response['Error']['Code']}") from e

    def clear(self, user_id: UserId) -> None:
        """ユーザーのアイテムを削除する."""
        try:
            self._table.delete_item(Key={"user_id": user_id.value})
        except ClientError as e:
            logger.error(f"Failed to clear cart for {user_id.value}: {e}")
            raise CartStoreError(f"Failed to clear cart: {e.response['Error']['Code']}") from e

    def _to_dynamodb_item(self, user_id: UserId, items: list[CartItem]) -> dict[str, Any]:
        """カートアイテムをDynamoDBアイテムに変換."""
        entries = []
        for item in items:
            entry: dict[str, Any] = {
                "product_id": item.id.value,
                "name": item.name,
                # floatはDynamoDBに渡せないのでDecimalで保存
                "price": item.price.value,
                "quantity": item.quantity,
            }
            if item.image is not None:
                entry["image"] = item.image
            if item.size is not None:
                entry["size"] = item.size
            if item.color is not None:
                entry["color"] = item.color
            entries.append(entry)

        return {
            "user_id": user_id.value,
            "items": entries,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }

    def _from_dynamodb_item(self, item: dict[str, Any]) -> list[CartItem]:
        """DynamoDBアイテムをカートアイテムに変換."""
        return [
            CartItem(
                id=ProductId(entry["product_id"]),
                name=entry.get("name", ""),
                price=Money.of(entry.get("price", Decimal("0"))),
                quantity=self._to_int(entry.get("quantity", 1)),
                image=entry.get("image"),
                size=entry.get("size"),
                color=entry.get("color"),
            )
            for entry in item.get("items", [])
        ]

    @staticmethod
    def _to_int(value: Any) -> int:
        """Decimalをintに変換."""
        return int(value)
