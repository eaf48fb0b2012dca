"""依存性注入コンテナ."""
from __future__ import annotations

import logging

from storefront.application.admin import (
    ExpenseCategoryManagement,
    ExpenseDashboard,
    ExpenseManagement,
    OrderManagement,
    ProductManagement,
)
from storefront.application.services import (
    AuthService,
    CartPersistence,
    CartService,
    CatalogPreloader,
    OrderService,
    ProfileService,
    RatingService,
    WishlistService,
)
from storefront.config import Settings
from storefront.domain.services import WishlistMerger
from storefront.domain.ports import (
    ApiGateway,
    AuthProvider,
    ImageUploader,
    LocalCartStore,
    Notifier,
    RemoteCartStore,
)
from storefront.infrastructure import (
    FileCartStore,
    InMemoryAuthProvider,
    InMemoryImageUploader,
    InMemoryUserCartStore,
    LoggingNotifier,
    MockApiGateway,
    StorefrontApiClient,
)

logger = logging.getLogger(__name__)


class Container:
    """サービスを一度だけ組み立てて保持するコンテナ.

    環境変数が設定されている外部サービスは実装を使い、
    そうでない場合はインメモリ・モック実装を使う（ローカル開発・テスト用）。
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        api: ApiGateway | None = None,
        auth_provider: AuthProvider | None = None,
        local_cart_store: LocalCartStore | None = None,
        remote_cart_store: RemoteCartStore | None = None,
        local_wishlist_store: LocalCartStore | None = None,
        remote_wishlist_store: RemoteCartStore | None = None,
        uploader: ImageUploader | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        """初期化. 引数で渡した実装は設定より優先する（テスト用）."""
        self.settings = settings or Settings.from_env()

        self.api = api or self._build_api()
        self.auth_provider = auth_provider or self._build_auth_provider()
        self.local_cart_store = local_cart_store or FileCartStore(self.settings.cart_file_path)
        self.remote_cart_store = remote_cart_store or self._build_remote_cart_store()
        self.local_wishlist_store = local_wishlist_store or FileCartStore(
            self.settings.wishlist_file_path
        )
        self.remote_wishlist_store = remote_wishlist_store or self._build_remote_wishlist_store()
        self.uploader = uploader or self._build_uploader()
        self.notifier = notifier or LoggingNotifier()

        self.auth = AuthService(self.auth_provider, self.api, site_url=self.settings.site_url)
        self.api.bind_credentials(self.auth)

        self.catalog = CatalogPreloader(self.api)
        self.cart_persistence = CartPersistence(
            self.local_cart_store, self.remote_cart_store, self.auth
        )
        self.cart = CartService(self.cart_persistence)
        self.wishlist_persistence = CartPersistence(
            self.local_wishlist_store,
            self.remote_wishlist_store,
            self.auth,
            merger=WishlistMerger(),
            label="wishlist",
        )
        self.wishlist = WishlistService(self.wishlist_persistence)
        self.checkout = OrderService(self.api, self.cart)
        self.ratings = RatingService(self.api, self.uploader)
        self.profile = ProfileService(self.api)

        self.expenses = ExpenseManagement(self.api, self.notifier)
        self.expense_categories = ExpenseCategoryManagement(self.api, self.notifier)
        self.expense_dashboard = ExpenseDashboard(self.api)
        self.products = ProductManagement(self.api, self.notifier, uploader=self.uploader)
        self.orders = OrderManagement(self.api, self.notifier)

        self._unsubscribe_cart = self.auth.subscribe(lambda user: self.cart.handle_auth_change())
        self._unsubscribe_wishlist = self.auth.subscribe(
            lambda user: self.wishlist.handle_auth_change()
        )

    def start(self) -> None:
        """セッション確認、カタログの先読み、カートとお気に入りの読み込みを行う."""
        self.auth.initialize()
        self.catalog.preload()
        self.cart.initialize()
        self.wishlist.initialize()
        logger.info("Storefront services started")

    def close(self) -> None:
        """購読を解除する."""
        self._unsubscribe_cart()
        self._unsubscribe_wishlist()
        self.auth.close()

    def _build_api(self) -> ApiGateway:
        if self.settings.use_http_api:
            return StorefrontApiClient(
                base_url=self.settings.api_url,
                timeout=self.settings.api_timeout,
                retries=self.settings.api_retries,
            )
        return MockApiGateway()

    def _build_auth_provider(self) -> AuthProvider:
        if self.settings.use_cognito:
            from storefront.infrastructure.providers import CognitoAuthProvider

            return CognitoAuthProvider(
                client_id=self.settings.cognito_client_id,
                domain=self.settings.cognito_domain,
            )
        return InMemoryAuthProvider()

    def _build_remote_cart_store(self) -> RemoteCartStore:
        if self.settings.use_dynamodb:
            from storefront.infrastructure.repositories import DynamoDBUserCartStore

            return DynamoDBUserCartStore(self.settings.cart_table_name)
        return InMemoryUserCartStore()

    def _build_remote_wishlist_store(self) -> RemoteCartStore:
        if self.settings.use_dynamodb_wishlist:
            from storefront.infrastructure.repositories import DynamoDBUserCartStore

            return DynamoDBUserCartStore(self.settings.wishlist_table_name)
        return InMemoryUserCartStore()

    def _build_uploader(self) -> ImageUploader:
        if self.settings.use_cloudinary:
            from storefront.infrastructure.clients import CloudinaryImageUploader

            return CloudinaryImageUploader(
                cloud_name=self.settings.cloudinary_cloud_name,
                upload_preset=self.settings.cloudinary_upload_preset,
                timeout=self.settings.api_timeout,
            )
        return InMemoryImageUploader()
