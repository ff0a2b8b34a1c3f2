"""Shared fixtures: a fresh SQLite database per test."""

import pytest
from fastapi.testclient import TestClient

from restaurant_api.app.core.db import init_db
from restaurant_api.app.main import create_app
from restaurant_api.app.repositories.restaurant_repository import SQLiteRestaurantStore
from restaurant_api.app.schemas.restaurant import Restaurant
from restaurant_api.app.services.restaurant_service import RestaurantService


@pytest.fixture
def db_path(tmp_path):
    """Create a migrated database file in a temporary directory."""
    path = str(tmp_path / "restaurants.db")
    init_db(path)
    return path


@pytest.fixture
def store(db_path):
    return SQLiteRestaurantStore(db_path)


@pytest.fixture
def service(store):
    return RestaurantService(store)


@pytest.fixture
def seed(store):
    """Insert restaurants and return them with their assigned ids."""

    def _seed(*items):
        saved = []
        for item in items:
            if isinstance(item, str):
                item = {"name": item, "address": f"{item} street"}
            saved.append(store.save(Restaurant(**item)))
        return saved

    return _seed


@pytest.fixture
def client(store):
    """Test client for an app wired to the temporary store."""
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client
