"""カタログのプリロード."""
import logging

from storefront.domain.entities import Category, Product, SimplifiedProduct
from storefront.domain.ports import ApiError, ApiGateway

logger = logging.getLogger(__name__)

PRELOAD_PRODUCT_LIMIT = 100


class CatalogPreloader:
    """起動時にカテゴリと商品をまとめて読み込み、保持する."""

    def __init__(self, api: ApiGateway) -> None:
        """初期化."""
        self._api = api
        self._categories: list[Category] = []
        self._products: list[Product] = []
        self._loading = True
        self._loaded = False
        self._error: str | None = None

    @property
    def categories(self) -> list[Category]:
        """カテゴリ一覧."""
        return list(self._categories)

    @property
    def products(self) -> list[Product]:
        """商品一覧."""
        return list(self._products)

    @property
    def simplified_products(self) -> list[SimplifiedProduct]:
        """一覧表示用の商品."""
        return [SimplifiedProduct.from_product(p) for p in self._products]

    @property
    def is_loading(self) -> bool:
        """読み込み中か."""
        return self._loading

    @property
    def error(self) -> str | None:
        """直近の読み込みエラー."""
        return self._error

    def preload(self) -> None:
        """カテゴリと商品を読み込む. 2回目以降は何もしない.

        失敗しても例外は投げず、空の一覧とエラーメッセージを保持する。
        """
        if self._loaded:
            return
        try:
            categories_data = self._api.get("/api/categories")
            products_data = self._api.get(
                "/api/products", params={"limit": PRELOAD_PRODUCT_LIMIT}
            )
            self._categories = [Category.from_dict(c) for c in self._unwrap(categories_data, "categories")]
            self._products = [Product.from_dict(p) for p in self._unwrap(products_data, "products")]
            self._error = None
            logger.info(
                f"Loaded {len(self._categories)} categories and {len(self._products)} products"
            )
        except (ApiError, KeyError, ValueError, TypeError) as e:
            logger.error(f"Error preloading data: {e}")
            self._error = getattr(e, "message", None) or str(e) or "Failed to load data"
            self._categories = []
            self._products = []
        finally:
            self._loading = False
            self._loaded = True

    def get_category(self, category_id: str) -> Category | None:
        """IDでカテゴリを取得する."""
        for category in self._categories:
            if category.id == category_id:
                return category
        return None

    def get_product(self, product_id: str) -> Product | None:
        """IDで商品を取得する."""
        for product in self._products:
            if product.id.value == product_id:
                return product
        return None

    @staticmethod
    def _unwrap(data, key: str) -> list:
        """{"key": [...]} と [...] の両方の形を受け付ける."""
        if isinstance(data, dict):
            return data.get(key) or []
        return data or []
