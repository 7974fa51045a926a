"""HTTP tests for the v1 routes, the error mapping and the health probe."""

import logging
import time
from datetime import datetime
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient
from pydantic import TypeAdapter

from asgard_api.app.main import create_app
from asgard_api.app.repositories import memory_repositories

USERS = "/api/v1/users/"
PRODUCTS = "/api/v1/products/"
ORDERS = "/api/v1/orders/"

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)

_timestamp = TypeAdapter(datetime)


def _ts(value: str) -> datetime:
    return _timestamp.validate_python(value)


def _create_user(client, email="a@b.com", name="Alice"):
    res = client.post(USERS, json={"email": email, "name": name})
    assert res.status_code == 201, res.text
    return res.json()


class TestUsers:
    def test_create_get_list(self, client):
        user = _create_user(client)

        assert user["email"] == "a@b.com"
        assert user["created_at"] == user["updated_at"]

        res = client.get(f"{USERS}{user['id']}")
        assert res.status_code == 200
        assert res.json() == user

        res = client.get(USERS)
        assert res.status_code == 200
        assert [u["id"] for u in res.json()] == [user["id"]]

    def test_duplicate_email_returns_conflict(self, client):
        _create_user(client)

        res = client.post(USERS, json={"email": "a@b.com", "name": "Again"})

        assert res.status_code == 409
        assert res.json() == {"error": "conflict"}
        assert len(client.get(USERS).json()) == 1

    def test_partial_update(self, client):
        user = _create_user(client)

        res = client.put(f"{USERS}{user['id']}", json={"name": "Alicia"})

        assert res.status_code == 200
        body = res.json()
        assert body["name"] == "Alicia"
        assert body["email"] == "a@b.com"
        assert body["created_at"] == user["created_at"]
        assert _ts(body["updated_at"]) > _ts(user["updated_at"])

    def test_null_field_leaves_value_unchanged(self, client):
        user = _create_user(client)

        res = client.put(f"{USERS}{user['id']}", json={"email": None, "name": None})

        assert res.status_code == 200
        assert res.json()["email"] == "a@b.com"
        assert res.json()["name"] == "Alice"

    def test_empty_update_bumps_updated_at(self, client):
        user = _create_user(client)

        body = client.put(f"{USERS}{user['id']}", json={}).json()

        assert (body["email"], body["name"]) == (user["email"], user["name"])
        assert _ts(body["updated_at"]) > _ts(user["updated_at"])

    def test_unknown_id_returns_not_found(self, client):
        missing = uuid4()

        for res in (
            client.get(f"{USERS}{missing}"),
            client.put(f"{USERS}{missing}", json={"name": "x"}),
            client.delete(f"{USERS}{missing}"),
        ):
            assert res.status_code == 404
            assert res.json() == {"error": "not found"}

    def test_malformed_id_is_rejected(self, client):
        assert client.get(f"{USERS}not-a-uuid").status_code == 422

    def test_delete(self, client):
        user = _create_user(client)

        res = client.delete(f"{USERS}{user['id']}")

        assert res.status_code == 204
        assert res.content == b""
        assert client.get(f"{USERS}{user['id']}").status_code == 404


class TestProducts:
    def test_crud(self, client):
        res = client.post(PRODUCTS, json={"sku": "SKU-1", "name": "Widget", "price_cents": 500})
        assert res.status_code == 201
        product = res.json()

        res = client.put(f"{PRODUCTS}{product['id']}", json={"price_cents": 650})
        assert res.status_code == 200
        assert res.json()["price_cents"] == 650
        assert res.json()["sku"] == "SKU-1"

        assert client.delete(f"{PRODUCTS}{product['id']}").status_code == 204
        assert client.get(PRODUCTS).json() == []

    def test_duplicate_sku_returns_conflict(self, client):
        client.post(PRODUCTS, json={"sku": "SKU-1", "name": "Widget", "price_cents": 500})

        res = client.post(PRODUCTS, json={"sku": "SKU-1", "name": "Gadget", "price_cents": 1})

        assert res.status_code == 409

    def test_negative_price_is_rejected(self, client):
        res = client.post(PRODUCTS, json={"sku": "SKU-1", "name": "Widget", "price_cents": -5})

        assert res.status_code == 422
        assert client.get(PRODUCTS).json() == []

    def test_price_beyond_int64_is_rejected(self, client):
        res = client.post(PRODUCTS, json={"sku": "SKU-1", "name": "Widget", "price_cents": INT64_MAX + 1})
        assert res.status_code == 422

        product = client.post(PRODUCTS, json={"sku": "SKU-1", "name": "Widget", "price_cents": INT64_MAX}).json()
        assert product["price_cents"] == INT64_MAX

        res = client.put(f"{PRODUCTS}{product['id']}", json={"price_cents": INT64_MAX + 1})
        assert res.status_code == 422
        assert client.get(f"{PRODUCTS}{product['id']}").json()["price_cents"] == INT64_MAX

    def test_list_is_newest_first(self, client):
        skus = [f"SKU-{i}" for i in range(4)]
        for sku in skus:
            client.post(PRODUCTS, json={"sku": sku, "name": sku, "price_cents": 1})

        assert [p["sku"] for p in client.get(PRODUCTS).json()] == list(reversed(skus))


class TestOrders:
    def test_end_to_end_scenario(self, client):
        user = _create_user(client)

        res = client.post(ORDERS, json={"user_id": user["id"], "status": "created", "total_cents": 1000})
        assert res.status_code == 201
        order = res.json()

        res = client.put(f"{ORDERS}{order['id']}", json={"status": "paid"})
        assert res.status_code == 200

        fetched = client.get(f"{ORDERS}{order['id']}").json()
        assert fetched["status"] == "paid"
        assert fetched["total_cents"] == 1000
        assert fetched["user_id"] == user["id"]

        assert client.delete(f"{ORDERS}{order['id']}").status_code == 204
        res = client.get(f"{ORDERS}{order['id']}")
        assert res.status_code == 404
        assert res.json() == {"error": "not found"}

    @pytest.mark.parametrize("total", [INT64_MAX + 1, INT64_MIN - 1])
    def test_total_beyond_int64_is_rejected(self, client, total):
        user = _create_user(client)

        res = client.post(ORDERS, json={"user_id": user["id"], "status": "created", "total_cents": total})

        assert res.status_code == 422
        assert client.get(ORDERS).json() == []

    def test_total_at_int64_bounds_is_stored(self, client):
        user = _create_user(client)

        for total in (INT64_MIN, INT64_MAX):
            res = client.post(ORDERS, json={"user_id": user["id"], "status": "created", "total_cents": total})
            assert res.status_code == 201
            assert client.get(f"{ORDERS}{res.json()['id']}").json()["total_cents"] == total

        order_id = client.get(ORDERS).json()[0]["id"]
        res = client.put(f"{ORDERS}{order_id}", json={"total_cents": INT64_MIN - 1})
        assert res.status_code == 422

    def test_unknown_user_is_server_error(self, sqlite_client):
        res = sqlite_client.post(ORDERS, json={"user_id": str(uuid4()), "status": "created", "total_cents": 1})

        assert res.status_code == 500
        assert "FOREIGN KEY" in res.json()["error"]


class TestHealth:
    def test_ok(self, client):
        res = client.get("/health")

        assert res.status_code == 200
        assert res.json() == {"status": "ok", "db": "ok"}

    def test_failing_store_is_reported_not_raised(self, test_settings):
        repos = memory_repositories()

        def broken() -> bool:
            raise RuntimeError("connection refused")

        repos.ping = broken
        with TestClient(create_app(repos, settings=test_settings)) as client:
            res = client.get("/health")

        assert res.status_code == 200
        assert res.json() == {"status": "ok", "db": "error"}

    def test_slow_store_times_out(self, test_settings):
        repos = memory_repositories()

        def slow() -> bool:
            time.sleep(0.5)
            return True

        repos.ping = slow
        test_settings.health_timeout_seconds = 0.05
        with TestClient(create_app(repos, settings=test_settings)) as client:
            res = client.get("/health")

        assert res.status_code == 200
        assert res.json()["db"] == "error"


class TestMiddleware:
    def test_cors_headers_on_simple_request(self, client):
        res = client.get(USERS, headers={"Origin": "http://example.com"})

        assert res.status_code == 200
        assert res.headers["access-control-allow-origin"] == "*"

    def test_cors_preflight(self, client):
        res = client.options(
            USERS,
            headers={
                "Origin": "http://example.com",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "content-type",
            },
        )

        assert res.status_code == 200
        assert res.headers["access-control-allow-origin"] == "*"
        assert "POST" in res.headers["access-control-allow-methods"]

    def test_request_is_logged(self, client, caplog):
        caplog.set_level(logging.INFO, logger="asgard_api.app.api.middleware")

        client.get(f"{USERS}{uuid4()}")

        lines = [r.getMessage() for r in caplog.records if r.name == "asgard_api.app.api.middleware"]
        assert len(lines) == 1
        method, path, status, duration = lines[0].split(" ")
        assert (method, status) == ("GET", "404")
        assert path.startswith(USERS)
        assert duration.endswith("ms")
