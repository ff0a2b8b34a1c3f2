"""Tests for the REST surface."""

import pytest
from fastapi.testclient import TestClient

from restaurant_api.app.main import create_app

BASE = "/api/restaurants"


def assert_error_body(response, status, path):
    body = response.json()
    assert response.status_code == status
    assert body["status"] == status
    assert body["path"] == path
    assert body["timestamp"]
    assert body["error"]
    assert body["message"]
    return body


class TestListAndSearch:
    """Tests for GET /restaurants and GET /restaurants/search."""

    def test_list_defaults(self, client, seed):
        """Test default paging: page 0, size 10, id ascending."""
        seed(*[f"R{i}" for i in range(12)])

        response = client.get(BASE)

        assert response.status_code == 200
        body = response.json()
        assert set(body) == {"content", "totalPages", "totalElements", "size", "number"}
        assert body["totalElements"] == 12
        assert body["totalPages"] == 2
        assert body["size"] == 10
        assert body["number"] == 0
        ids = [r["id"] for r in body["content"]]
        assert ids == sorted(ids)
        assert len(ids) == 10

    def test_list_second_page_sorted(self, client, seed):
        """Test explicit page, size and sort parameters."""
        seed("Bravo", "Alpha", "Delta", "Charlie")

        response = client.get(BASE, params={"page": 1, "size": 2, "sort": "name,desc"})

        assert response.status_code == 200
        assert [r["name"] for r in response.json()["content"]] == ["Bravo", "Alpha"]

    def test_list_uses_camel_case_keys(self, client, seed):
        """Test that restaurants are serialized with phoneNumber."""
        seed({"name": "A", "address": "B", "phone_number": "02-1234-5678"})

        restaurant = client.get(BASE).json()["content"][0]

        assert restaurant["phoneNumber"] == "02-1234-5678"

    def test_list_garbage_sort_falls_back(self, client, seed):
        """Test that a malformed sort string falls back to id ascending."""
        seed("B", "A")

        response = client.get(BASE, params={"sort": "garbage"})

        assert response.status_code == 200
        assert [r["name"] for r in response.json()["content"]] == ["B", "A"]

    def test_list_invalid_direction_is_400(self, client):
        """Test that an invalid sort direction is a client error."""
        response = client.get(BASE, params={"sort": "name,sideways"})

        body = assert_error_body(response, 400, BASE)
        assert "sideways" in body["message"]
        assert body["error"] == "Bad Request"

    def test_list_unknown_sort_property_is_400(self, client):
        """Test that sorting by an unknown property is a client error."""
        response = client.get(BASE, params={"sort": "rating,asc"})

        assert_error_body(response, 400, BASE)

    @pytest.mark.parametrize("params", [{"page": -1}, {"size": 0}, {"page": "abc"}])
    def test_list_invalid_paging_is_400(self, client, params):
        """Test that invalid paging parameters are client errors."""
        response = client.get(BASE, params=params)

        assert_error_body(response, 400, BASE)

    def test_search(self, client, seed):
        """Test that search returns only matching names."""
        seed("Blue cafe", "cafe 24", "Noodle Bar")

        response = client.get(f"{BASE}/search", params={"name": "cafe"})

        assert response.status_code == 200
        body = response.json()
        assert body["totalElements"] == 2
        assert all("cafe" in r["name"] for r in body["content"])

    def test_search_requires_name(self, client):
        """Test that search without a name is a client error."""
        response = client.get(f"{BASE}/search")

        body = assert_error_body(response, 400, f"{BASE}/search")
        assert "name" in body["message"]


class TestSingleRestaurant:
    """Tests for create, read, update and delete."""

    def test_create_and_get(self, client):
        """Test that a created restaurant can be fetched by id."""
        payload = {"name": "Gimbap Heaven", "address": "Seoul", "phoneNumber": "02-1234-5678"}

        created = client.post(BASE, json=payload)

        assert created.status_code == 201
        body = created.json()
        assert body["id"] is not None
        assert body["phoneNumber"] == "02-1234-5678"

        fetched = client.get(f"{BASE}/{body['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == body

    def test_create_ignores_client_id(self, client, seed):
        """Test that create never overwrites an existing record."""
        (existing,) = seed("Existing")

        created = client.post(BASE, json={"id": existing.id, "name": "New", "address": "Addr"})

        assert created.status_code == 201
        assert created.json()["id"] != existing.id
        assert client.get(f"{BASE}/{existing.id}").json()["name"] == "Existing"

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "", "address": "Seoul"},
            {"name": "Name", "address": "   "},
            {"address": "Seoul"},
            {"name": "Name"},
        ],
    )
    def test_create_rejects_blank_fields(self, client, payload):
        """Test that name and address are required and non-blank."""
        response = client.post(BASE, json=payload)

        assert_error_body(response, 400, BASE)

    def test_get_missing_is_404(self, client):
        """Test that an unknown id yields 404 with the error body."""
        response = client.get(f"{BASE}/999")

        body = assert_error_body(response, 404, f"{BASE}/999")
        assert body["message"] == "record not found"
        assert body["error"] == "Not Found"

    def test_update_keeps_phone_number(self, client, seed):
        """Test that PUT replaces name and address only."""
        (restaurant,) = seed({"name": "Old", "address": "Old St", "phone_number": "02-1"})

        response = client.put(
            f"{BASE}/{restaurant.id}",
            json={"name": "X", "address": "Y", "phoneNumber": "999"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "id": restaurant.id,
            "name": "X",
            "address": "Y",
            "phoneNumber": "02-1",
        }

    def test_update_missing_is_404(self, client):
        """Test that updating an unknown id yields 404."""
        response = client.put(f"{BASE}/999", json={"name": "X", "address": "Y"})

        assert_error_body(response, 404, f"{BASE}/999")

    def test_delete(self, client, seed):
        """Test that DELETE returns 204 and removes the record."""
        (restaurant,) = seed("Doomed")

        response = client.delete(f"{BASE}/{restaurant.id}")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"{BASE}/{restaurant.id}").status_code == 404

    def test_delete_missing_is_404(self, client):
        """Test that deleting an unknown id yields 404."""
        response = client.delete(f"{BASE}/999")

        assert_error_body(response, 404, f"{BASE}/999")


class TestUnhandledErrors:
    """Tests for the catch-all REST error handler."""

    def test_unhandled_error_leaks_message(self, store, monkeypatch):
        """Test that unexpected failures become 500 with the raw message."""

        def boom(restaurant_id):
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(store, "find_by_id", boom)
        app = create_app(store=store)

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.get(f"{BASE}/1")

        body = assert_error_body(response, 500, f"{BASE}/1")
        assert body["message"] == "disk on fire"
        assert body["error"] == "Internal Server Error"

    def test_unknown_route_uses_error_body(self, client):
        """Test that framework errors use the same error body."""
        response = client.get("/api/nothing-here")

        assert_error_body(response, 404, "/api/nothing-here")
