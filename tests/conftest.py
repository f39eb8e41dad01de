"""Root conftest — shared test configuration and seed data."""

import os

import pytest

# Keep tests independent of any developer .env / shell settings
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("TABLE_COUNT", "100")

from restaurant_api.core.domain_types import MenuItem, MenuItemId  # noqa: E402


@pytest.fixture
def burger():
    return MenuItem(id=MenuItemId(1), name="Burger", cooking_time=10)


@pytest.fixture
def fries():
    return MenuItem(id=MenuItemId(9), name="Fries", cooking_time=3)
