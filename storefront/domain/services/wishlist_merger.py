"""お気に入りマージサービス."""
from ..entities import CartItem

from .cart_merger import CartMerger


class WishlistMerger(CartMerger):
    """端末ローカルのお気に入りとユーザーの永続お気に入りを統合する."""

    def merge(self, local_items: list[CartItem], remote_items: list[CartItem]) -> list[CartItem]:
        """永続側を先に並べ、ローカルにしかない商品を末尾に追加する.

        お気に入りに数量はないため、同じ商品IDは永続側の1件だけを残す。
        """
        merged: dict = {}
        for item in remote_items:
            merged.setdefault(item.id, item)
        for item in local_items:
            merged.setdefault(item.id, item)
        return list(merged.values())
