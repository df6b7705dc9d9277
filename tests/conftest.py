import pytest
from fastapi.testclient import TestClient

from storefront.infrastructure.api.app_factory import create_app
from storefront.infrastructure.bootstrap import Container, build_container
from storefront.infrastructure.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, storage_backend="memory")


@pytest.fixture
def container(settings: Settings) -> Container:
    return build_container(settings)


@pytest.fixture
def client(container: Container) -> TestClient:
    return TestClient(create_app(container))


@pytest.fixture
def make_product(client: TestClient):
    """POST a product and return its payload."""

    def _make(name: str = "Widget", price: float = 9.99, stock: int = 5, **extra):
        response = client.post(
            "/product", json={"name": name, "price": price, "stock": stock, **extra}
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make
