"""HTTP tests for /api/inventory."""

import pytest

from conftest import authenticate, item_draft

SEEDS = {"name": "Tomato seeds", "category": "Seeds", "quantity": 200, "unit": "packets"}


def test_anonymous_create_is_unauthorized(client) -> None:
    response = client.post("/api/inventory", json=SEEDS)
    assert response.status_code == 401


def test_create_then_list(client, alice) -> None:
    authenticate(client, alice.id)

    created = client.post("/api/inventory", json=SEEDS)
    assert created.status_code == 201
    item = created.get_json()
    assert item["userId"] == alice.id

    assert client.get("/api/inventory").get_json() == [item]


def test_free_form_category(client, alice) -> None:
    authenticate(client, alice.id)
    response = client.post("/api/inventory", json={**SEEDS, "category": "Irrigation"})
    assert response.status_code == 201
    assert response.get_json()["category"] == "Irrigation"


def test_blank_unit_is_rejected(client, alice) -> None:
    authenticate(client, alice.id)
    response = client.post("/api/inventory", json={**SEEDS, "unit": "  "})
    assert response.status_code == 400


def test_isolation(client, store, alice, bob) -> None:
    store.create_inventory_item(alice.id, item_draft())
    authenticate(client, bob.id)
    assert client.get("/api/inventory").get_json() == []


@pytest.mark.parametrize("quantity", [True, "50", 2**31, 10**20])
def test_quantity_must_be_a_bounded_json_integer(client, store, alice, quantity) -> None:
    authenticate(client, alice.id)

    response = client.post("/api/inventory", json={**SEEDS, "quantity": quantity})

    assert response.status_code == 400
    assert "quantity" in [e["field"] for e in response.get_json()["errors"]]
    assert store.list_inventory(alice.id) == []
