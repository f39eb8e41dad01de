"""API test fixtures — fresh restaurant per test + FastAPI test client.

Invariants:
    - Every test gets its own stores (no order leaks between tests)
    - get_restaurant dependency overridden; the lifespan is not run
"""

import pytest
from httpx import ASGITransport, AsyncClient

from restaurant_api.api.dependencies import get_restaurant
from restaurant_api.infrastructure.menu_store import PREDEFINED_MENU, InMemoryMenuStore
from restaurant_api.infrastructure.order_store import InMemoryOrderStore
from restaurant_api.infrastructure.table_store import InMemoryTableStore
from restaurant_api.main import app
from restaurant_api.services.restaurant import RestaurantFacade


@pytest.fixture
def restaurant():
    return RestaurantFacade(
        menu_store=InMemoryMenuStore(PREDEFINED_MENU, lock_timeout=0.1),
        order_store=InMemoryOrderStore(lock_timeout=0.1),
        table_store=InMemoryTableStore(lock_timeout=0.1),
    )


@pytest.fixture
async def client(restaurant):
    """FastAPI test client with the restaurant dependency overridden."""
    app.dependency_overrides[get_restaurant] = lambda: restaurant

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def poison():
    """Return a helper that simulates a crash while a store's lock was held."""
    def _poison(store) -> None:
        try:
            with store._lock.hold():
                raise RuntimeError("crash while holding lock")
        except RuntimeError:
            pass
        assert store._lock.is_poisoned
    return _poison
