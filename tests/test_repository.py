"""Tests for the SQLite restaurant store."""

import math

import pytest

from restaurant_api.app.core.db import get_connection, init_db
from restaurant_api.app.core.exceptions import InvalidArgumentError, NotFoundError
from restaurant_api.app.core.pagination import PageRequest
from restaurant_api.app.core.sorting import parse_sort
from restaurant_api.app.schemas.restaurant import Restaurant


class TestSQLiteRestaurantStore:
    """Tests for SQLiteRestaurantStore."""

    def test_save_assigns_id(self, store):
        """Test that inserting a restaurant assigns an id."""
        saved = store.save(Restaurant(name="Test Restaurant", address="Test Address"))

        assert saved.id is not None
        found = store.find_by_id(saved.id)
        assert found == saved

    def test_save_with_id_overwrites(self, store):
        """Test that saving with an id updates the existing row."""
        saved = store.save(Restaurant(name="Old", address="Old Address", phone_number="02-1"))

        saved.name = "New"
        saved.address = "New Address"
        updated = store.save(saved)

        assert updated.id == saved.id
        assert store.find_by_id(saved.id).name == "New"
        assert store.find_by_id(saved.id).phone_number == "02-1"

    def test_save_with_unknown_id_raises(self, store):
        """Test that overwriting a missing row raises NotFoundError."""
        with pytest.raises(NotFoundError):
            store.save(Restaurant(id=999, name="Ghost", address="Nowhere"))

    def test_find_by_id_missing(self, store):
        """Test that a missing id returns None."""
        assert store.find_by_id(12345) is None

    def test_delete_by_id(self, store, seed):
        """Test that a deleted restaurant can no longer be found."""
        (restaurant,) = seed("To Delete")

        store.delete_by_id(restaurant.id)

        assert store.find_by_id(restaurant.id) is None

    def test_delete_missing_id_is_silent(self, store):
        """Test that deleting an unknown id does not raise at store level."""
        store.delete_by_id(12345)

    @pytest.mark.parametrize("count, size", [(0, 3), (7, 3), (9, 3), (5, 10), (1, 1)])
    def test_pages_cover_all_rows(self, store, seed, count, size):
        """Test that walking all pages returns every row exactly once."""
        seed(*[f"Restaurant {i}" for i in range(count)])

        first = store.find_all(PageRequest(0, size))
        assert first.total_elements == count
        assert first.total_pages == math.ceil(count / size)

        ids = []
        for page in range(first.total_pages):
            result = store.find_all(PageRequest(page, size))
            assert len(result.content) <= size
            assert result.number == page
            assert result.size == size
            ids.extend(r.id for r in result.content)
        assert len(ids) == count
        assert len(set(ids)) == count

    def test_page_past_end_is_empty(self, store, seed):
        """Test that a page beyond the last one is empty but keeps totals."""
        seed("A", "B")

        result = store.find_all(PageRequest(5, 10))

        assert result.content == []
        assert result.total_elements == 2
        assert result.total_pages == 1

    def test_sort_by_name_descending(self, store, seed):
        """Test ordering by name descending."""
        seed("Bravo", "Alpha", "Charlie")

        result = store.find_all(PageRequest(0, 10, parse_sort("name,desc")))

        assert [r.name for r in result.content] == ["Charlie", "Bravo", "Alpha"]

    def test_sort_by_phone_number_property(self, store, seed):
        """Test that the camelCase property name maps to its column."""
        seed(
            {"name": "A", "address": "x", "phone_number": "03"},
            {"name": "B", "address": "x", "phone_number": "01"},
        )

        result = store.find_all(PageRequest(0, 10, parse_sort("phoneNumber,asc")))

        assert [r.name for r in result.content] == ["B", "A"]

    def test_sort_by_unknown_property_raises(self, store):
        """Test that unknown sort properties never reach SQL."""
        with pytest.raises(InvalidArgumentError, match="No property"):
            store.find_all(PageRequest(0, 10, parse_sort("name; DROP TABLE restaurants,asc")))

    def test_find_by_name_containing(self, store, seed):
        """Test substring search on the name."""
        seed("Blue cafe", "cafeteria", "Pizza Place", "Cafe Noir")

        result = store.find_by_name_containing("cafe", PageRequest(0, 10))

        assert sorted(r.name for r in result.content) == ["Blue cafe", "cafeteria"]
        assert result.total_elements == 2

    def test_find_by_name_treats_wildcards_literally(self, store, seed):
        """Test that LIKE wildcards in the needle are not expanded."""
        seed("100% Burger", "Burger")

        result = store.find_by_name_containing("%", PageRequest(0, 10))

        assert [r.name for r in result.content] == ["100% Burger"]


def test_init_db_is_idempotent(db_path):
    """Test that running migrations twice keeps the recorded version."""
    init_db(db_path)

    conn = get_connection(db_path)
    try:
        versions = [row["version"] for row in conn.execute("SELECT version FROM migrations")]
    finally:
        conn.close()
    assert versions == sorted(set(versions))
    assert max(versions) == 2
