import pytest
from fastapi.testclient import TestClient

from app.core.storage import MemoryStorage
from app.services.catalog_service import CatalogService
from app.services.order_service import OrderService
from app.services.seed_service import seed_if_empty


@pytest.fixture
def anyio_backend():
    """Run @pytest.mark.anyio tests on asyncio only."""
    return "asyncio"


@pytest.fixture
def storage():
    """In-memory storage holding the bundled seed dataset."""
    storage = MemoryStorage()
    seed_if_empty(storage)
    return storage


@pytest.fixture
def catalog(storage):
    return CatalogService(storage)


@pytest.fixture
def order_service(storage):
    return OrderService(storage)


@pytest.fixture
def client(storage, catalog, order_service):
    """TestClient wired to the in-memory services (no startup seeding)."""
    from app.database import get_storage
    from app.dependencies import get_catalog_service, get_order_service
    from app.main import app

    app.dependency_overrides[get_storage] = lambda: storage
    app.dependency_overrides[get_catalog_service] = lambda: catalog
    app.dependency_overrides[get_order_service] = lambda: order_service

    yield TestClient(app)

    app.dependency_overrides.clear()
