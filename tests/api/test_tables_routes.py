"""Tables Routes — HTTP mapping of facade outcomes to the JSON envelope.

Tests cover:
    - Success envelopes for add/remove/list/get
    - 404 for every not-found domain error, with its message
    - 400 for malformed identifiers (non-numeric, negative, above u32)
    - 500 for lock failures, without leaking detail; the detail is logged instead
"""

import logging

import pytest


async def test_list_tables_returns_all_hundred(client):
    res = await client.get("/api/v1/tables")
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "ok"
    assert body["data"] == list(range(1, 101))


async def test_add_item_success_message(client):
    res = await client.post("/api/v1/tables/1/items/6")
    assert res.status_code == 200
    assert res.json() == {
        "status": "ok",
        "message": "Menu item with item id: 6 added successfully for table with table id 1",
    }


async def test_add_then_get_items(client):
    await client.post("/api/v1/tables/1/items/6")
    await client.post("/api/v1/tables/1/items/9")
    res = await client.get("/api/v1/tables/1/items")
    assert res.status_code == 200
    assert res.json()["data"] == [
        {"id": 6, "name": "Burger", "cooking_time": 10},
        {"id": 9, "name": "Fries", "cooking_time": 3},
    ]


async def test_get_single_item(client):
    await client.post("/api/v1/tables/2/items/13")
    res = await client.get("/api/v1/tables/2/items/13")
    assert res.status_code == 200
    assert res.json() == {
        "status": "ok",
        "data": {"id": 13, "name": "Sushi", "cooking_time": 12},
    }


async def test_remove_item_success_message(client):
    await client.post("/api/v1/tables/1/items/6")
    res = await client.delete("/api/v1/tables/1/items/6")
    assert res.status_code == 200
    assert res.json()["message"] == (
        "Menu item with item id:6 removed from table with table id:1 successfully"
    )


async def test_remove_last_item_then_list_is_404(client):
    await client.post("/api/v1/tables/1/items/6")
    await client.delete("/api/v1/tables/1/items/6")
    res = await client.get("/api/v1/tables/1/items")
    assert res.status_code == 404
    assert res.json() == {
        "status": "error",
        "message": "No Menu items added for table with table id:1",
    }


@pytest.mark.parametrize("method, path", [
    ("POST", "/api/v1/tables/101/items/1"),
    ("DELETE", "/api/v1/tables/101/items/1"),
    ("GET", "/api/v1/tables/101/items"),
    ("GET", "/api/v1/tables/101/items/1"),
])
async def test_unknown_table_is_404(client, method, path):
    res = await client.request(method, path)
    assert res.status_code == 404
    assert res.json() == {
        "status": "error", "message": "Table not found for table id:101",
    }


async def test_add_unknown_menu_item_is_404(client):
    res = await client.post("/api/v1/tables/1/items/999")
    assert res.status_code == 404
    assert res.json()["message"] == "Menu item not found for menu id: 999"


async def test_remove_not_ordered_item_is_404(client):
    await client.post("/api/v1/tables/1/items/6")
    res = await client.delete("/api/v1/tables/1/items/7")
    assert res.status_code == 404
    assert res.json()["message"] == (
        "No Menu item with menu item id:7, is found for Table with table id:1"
    )


async def test_get_not_ordered_item_is_404(client):
    res = await client.get("/api/v1/tables/1/items/7")
    assert res.status_code == 404
    assert res.json()["message"] == (
        "No Menu item with menu item id:7, is found for Table with table id:1"
    )


@pytest.mark.parametrize("path, label", [
    ("/api/v1/tables/abc/items/1", "table ID"),
    ("/api/v1/tables/-1/items/1", "table ID"),
    ("/api/v1/tables/1/items/xyz", "item ID"),
    ("/api/v1/tables/1/items/4294967296", "item ID"),
])
async def test_malformed_ids_are_400(client, path, label):
    res = await client.post(path)
    assert res.status_code == 400
    assert res.json() == {
        "status": "error",
        "message": f"Invalid {label}. Must be a valid positive integer.",
    }


async def test_malformed_id_on_listing_is_400(client):
    res = await client.get("/api/v1/tables/1.5/items")
    assert res.status_code == 400


async def test_lock_failure_is_500_without_detail(client, restaurant, poison):
    poison(restaurant.order_store)
    res = await client.post("/api/v1/tables/1/items/6")
    assert res.status_code == 500
    assert res.json() == {"status": "error", "message": "Internal server error"}


async def test_tables_retrieve_error_is_500(client, restaurant, poison):
    poison(restaurant.table_store)
    res = await client.get("/api/v1/tables")
    assert res.status_code == 500
    assert res.json() == {"status": "error", "message": "Error retrieving tables"}


async def test_lock_failure_detail_is_logged(client, restaurant, poison, caplog):
    poison(restaurant.order_store)
    with caplog.at_level(logging.ERROR, logger="restaurant_api.api.error_handlers"):
        res = await client.post("/api/v1/tables/1/items/6")
    assert res.status_code == 500
    [record] = [r for r in caplog.records if getattr(r, "error_code", None) == "LOCK_FAILURE"]
    assert record.detail == "order lock is poisoned"
    assert record.method == "POST"
    assert record.path == "/api/v1/tables/1/items/6"
    assert record.severity == "critical"


async def test_tables_retrieve_detail_is_logged(client, restaurant, poison, caplog):
    poison(restaurant.table_store)
    with caplog.at_level(logging.ERROR, logger="restaurant_api.api.error_handlers"):
        res = await client.get("/api/v1/tables")
    assert res.status_code == 500
    [record] = [
        r for r in caplog.records
        if getattr(r, "error_code", None) == "TABLES_RETRIEVE_ERROR"
    ]
    assert "poisoned" in record.detail
    assert "poisoned" in record.getMessage()
    assert record.category == "synchronization"
