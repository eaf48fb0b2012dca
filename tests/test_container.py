"""Containerのテスト."""
from storefront.config import Settings
from storefront.container import Container
from storefront.domain.entities import CartItem
from storefront.domain.identifiers import ProductId, UserId
from storefront.domain.value_objects import Money
from storefront.infrastructure import (
    InMemoryAuthProvider,
    InMemoryCartStore,
    InMemoryImageUploader,
    InMemoryNotifier,
    InMemoryUserCartStore,
    MockApiGateway,
    StorefrontApiClient,
)


def _item(product_id: str, quantity: int = 1) -> CartItem:
    return CartItem(id=ProductId(product_id), name=f"Item {product_id}", price=Money.of(100), quantity=quantity)


def _container() -> tuple[Container, InMemoryAuthProvider, MockApiGateway, InMemoryCartStore, InMemoryUserCartStore]:
    provider = InMemoryAuthProvider()
    api = MockApiGateway()
    api.set_response("GET", "/api/categories", {"categories": []})
    api.set_response("GET", "/api/products", {"products": []})
    api.set_response("POST", "/api/auth/generate-token", {"token": "jwt-1"})
    api.set_response("GET", "/api/profile", {"role": "customer"})
    local = InMemoryCartStore()
    wishlist_local = InMemoryCartStore()
    remote = InMemoryUserCartStore()
    container = Container(
        Settings(),
        api=api,
        auth_provider=provider,
        local_cart_store=local,
        remote_cart_store=remote,
        local_wishlist_store=wishlist_local,
        remote_wishlist_store=InMemoryUserCartStore(),
        uploader=InMemoryImageUploader(),
        notifier=InMemoryNotifier(),
    )
    return container, provider, api, local, remote


class TestContainer:
    """Containerの単体テスト."""

    def test_既定ではモック実装で組み立てる(self, tmp_path) -> None:
        container = Container(
            Settings(
                cart_file_path=str(tmp_path / "cart.json"),
                wishlist_file_path=str(tmp_path / "wishlist.json"),
            )
        )

        assert isinstance(container.api, MockApiGateway)
        assert isinstance(container.auth_provider, InMemoryAuthProvider)
        assert isinstance(container.remote_cart_store, InMemoryUserCartStore)
        assert isinstance(container.uploader, InMemoryImageUploader)
        assert container.local_cart_store.path == tmp_path / "cart.json"
        assert container.local_wishlist_store.path == tmp_path / "wishlist.json"
        assert isinstance(container.remote_wishlist_store, InMemoryUserCartStore)
        container.close()

    def test_API_URLがあればHTTPクライアントを使う(self, tmp_path) -> None:
        container = Container(
            Settings(api_url="https://api.example.com", cart_file_path=str(tmp_path / "cart.json"))
        )
        assert isinstance(container.api, StorefrontApiClient)
        assert container.api._credentials is container.auth
        container.close()

    def test_起動時にカタログとローカルカートを読み込む(self) -> None:
        container, _, api, local, _ = _container()
        local.save([_item("p1", 2)])

        container.start()

        assert not container.catalog.is_loading
        assert len(api.calls_to("GET", "/api/products")) == 1
        assert container.cart.items == [_item("p1", 2)]
        assert not container.cart.is_loading

    def test_サインインで永続カートとマージする(self) -> None:
        container, provider, _, local, remote = _container()
        provider.register("a@example.com", "secret", user_id="user-1")
        remote.save(UserId("user-1"), [_item("p2")])
        local.save([_item("p1")])
        container.start()

        result = container.auth.sign_in("a@example.com", "secret")

        assert result.success
        assert container.auth.jwt_token == "jwt-1"
        assert {item.id.value for item in container.cart.items} == {"p1", "p2"}
        assert {item.id.value for item in remote.load(UserId("user-1"))} == {"p1", "p2"}

    def test_サインアウトでローカルカートに戻る(self) -> None:
        container, provider, _, local, remote = _container()
        provider.register("a@example.com", "secret", user_id="user-1")
        container.start()
        container.auth.sign_in("a@example.com", "secret")
        container.cart.add_to_cart(_item("p3"))

        container.auth.sign_out()

        assert container.auth.jwt_token is None
        assert container.cart.items == local.load()

    def test_close後は認証変化に反応しない(self) -> None:
        container, provider, _, _, remote = _container()
        provider.register("a@example.com", "secret", user_id="user-1")
        remote.save(UserId("user-1"), [_item("p9")])
        container.start()

        container.close()
        provider.sign_in_with_password("a@example.com", "secret")

        assert container.cart.items == []

    def test_サインインでお気に入りも永続側とマージする(self) -> None:
        container, provider, _, _, _ = _container()
        provider.register("a@example.com", "secret", user_id="user-1")
        container.remote_wishlist_store.save(UserId("user-1"), [_item("w2")])
        container.local_wishlist_store.save([_item("w1"), _item("w2")])
        container.start()

        container.auth.sign_in("a@example.com", "secret")

        assert [item.id.value for item in container.wishlist.items] == ["w2", "w1"]

    def test_チェックアウトは見えているカートから注文する(self) -> None:
        container, provider, api, _, _ = _container()
        provider.register("a@example.com", "secret", user_id="user-1")
        api.set_response("POST", "/api/orders", {"order": {"id": "o-1", "order_number": "ORD-1"}})
        api.set_response("POST", "/api/payments", {"payment": {"id": "pay-1", "order_id": "o-1"}})
        container.start()
        container.auth.sign_in("a@example.com", "secret")
        container.cart.add_to_cart(_item("p1", 2))

        result = container.checkout.place_order("addr-1")

        assert result.order.id == "o-1"
        assert container.cart.items == []
