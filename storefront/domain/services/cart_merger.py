"""カートマージサービス."""
from ..entities import CartItem


class CartMerger:
    """端末ローカルのカートとユーザーの永続カートを統合する."""

    def merge(self, local_items: list[CartItem], remote_items: list[CartItem]) -> list[CartItem]:
        """永続カートを先に並べ、ローカルの数量を加算する.

        同じ商品IDの行は1行にまとめ、永続側の属性を残す。
        ローカルにしかない行は末尾に追加する。
        """
        merged: dict = {}
        for item in remote_items:
            merged[item.id] = item
        for item in local_items:
            existing = merged.get(item.id)
            if existing is None:
                merged[item.id] = item
            else:
                merged[item.id] = existing.with_quantity(existing.quantity + item.quantity)
        return list(merged.values())
