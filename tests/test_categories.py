import pytest


async def _create_category(async_client, **fields):
    resp = await async_client.post("/api/v1/categories", json=fields)
    assert resp.status_code == 201, resp.text
    return resp.json()


@pytest.mark.anyio
async def test_create_and_list_category(async_client):
    data = await _create_category(
        async_client, name="Computer Equipment", default_useful_life=5, default_property_class="5"
    )
    assert data["name"] == "Computer Equipment"
    assert data["default_useful_life"] == 5
    assert data["default_property_class"] == "5"

    resp = await async_client.get("/api/v1/categories")
    assert resp.status_code == 200, resp.text
    assert any(item["id"] == data["id"] for item in resp.json())

    resp = await async_client.get(f"/api/v1/categories/{data['id']}")
    assert resp.status_code == 200, resp.text
    assert resp.json()["name"] == "Computer Equipment"


@pytest.mark.anyio
async def test_create_category_rejects_invalid_fields(async_client):
    resp = await async_client.post(
        "/api/v1/categories",
        json={"name": "", "default_useful_life": 0, "default_property_class": "12"},
    )
    assert resp.status_code == 400, resp.text
    assert resp.json()["detail"]["errors"] == [
        "Category name is required",
        "Default useful life must be at least 1 year",
        "Invalid default property class: 12",
    ]


@pytest.mark.anyio
async def test_duplicate_category_name(async_client):
    await _create_category(async_client, name="Duplicate Tools")

    resp = await async_client.post("/api/v1/categories", json={"name": "Duplicate Tools"})
    assert resp.status_code == 409, resp.text
    assert "already exists" in resp.json()["detail"]


@pytest.mark.anyio
async def test_update_category(async_client):
    data = await _create_category(async_client, name="Renamable Fixtures", default_useful_life=7)

    resp = await async_client.put(
        f"/api/v1/categories/{data['id']}",
        json={"name": "Renamed Fixtures", "default_useful_life": 10, "default_property_class": ""},
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["name"] == "Renamed Fixtures"
    assert body["default_useful_life"] == 10
    assert body["default_property_class"] is None

    # Keeping its own name is not a conflict
    resp = await async_client.put(
        f"/api/v1/categories/{data['id']}", json={"name": "Renamed Fixtures"}
    )
    assert resp.status_code == 200, resp.text


@pytest.mark.anyio
async def test_update_missing_category(async_client):
    resp = await async_client.put("/api/v1/categories/999999", json={"name": "Ghost"})
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_delete_unused_category(async_client):
    data = await _create_category(async_client, name="Unused Category")

    resp = await async_client.delete(f"/api/v1/categories/{data['id']}")
    assert resp.status_code == 204, resp.text

    resp = await async_client.get(f"/api/v1/categories/{data['id']}")
    assert resp.status_code == 404


@pytest.mark.anyio
async def test_delete_category_in_use_is_rejected(async_client, asset_payload):
    category = await _create_category(async_client, name="Blocked Machinery")

    for i in range(3):
        resp = await async_client.post(
            "/api/v1/assets",
            json=asset_payload(name=f"Blocked Lathe {i}", category_id=category["id"]),
        )
        assert resp.status_code == 201, resp.text

    resp = await async_client.delete(f"/api/v1/categories/{category['id']}")
    assert resp.status_code == 409, resp.text
    detail = resp.json()["detail"]
    assert detail["blocking_count"] == 3
    assert "3 asset(s)" in detail["message"]

    resp = await async_client.get(f"/api/v1/categories/{category['id']}")
    assert resp.status_code == 200


@pytest.mark.anyio
async def test_categories_with_counts(async_client, asset_payload):
    used = await _create_category(async_client, name="Counted Vehicles")
    empty = await _create_category(async_client, name="Counted Empty")

    for name in ("Counted Van", "Counted Truck"):
        resp = await async_client.post(
            "/api/v1/assets", json=asset_payload(name=name, category_id=used["id"])
        )
        assert resp.status_code == 201, resp.text

    resp = await async_client.get("/api/v1/categories/with-counts")
    assert resp.status_code == 200, resp.text
    counts = {item["id"]: item["asset_count"] for item in resp.json()}
    assert counts[used["id"]] == 2
    assert counts[empty["id"]] == 0
