"""
Integration tests for the pricing endpoints.

Tests request mapping, status codes and response bodies over HTTP.
"""

import pytest

CREATE_URL = "/api/pricing/create-entry"
CALCULATE_URL = "/api/pricing/calculate-price"

FOODHUT_ENTRY = {
    "organizationName": "FoodHut",
    "zone": "south",
    "item_type": "perishable",
    "description": "icecake",
    "base_distance_in_km": 5,
    "km_price": 1.5,
    "fix_price": 10
}


@pytest.fixture
async def foodhut_id(client, db_session):
    """Create the FoodHut entry over HTTP and return its organization id."""
    from sqlalchemy import select
    from pricing_backend.app.models.organization import Organization

    response = await client.post(CREATE_URL, json=FOODHUT_ENTRY)
    assert response.status_code == 200

    organization = (
        await db_session.execute(select(Organization).where(Organization.name == "FoodHut"))
    ).scalar_one()
    return str(organization.id)


# TEST 1: Create entry
@pytest.mark.asyncio
async def test_create_entry_success(client):
    response = await client.post(CREATE_URL, json=FOODHUT_ENTRY)

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Pricing structure created successfully"}


@pytest.mark.asyncio
async def test_create_entry_missing_fields(client):
    response = await client.post(CREATE_URL, json={**FOODHUT_ENTRY, "organizationName": "", "item_type": ""})

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": "Missing required input data",
        "message": "Bad request"
    }


@pytest.mark.asyncio
async def test_create_entry_invalid_numeric(client):
    response = await client.post(CREATE_URL, json={**FOODHUT_ENTRY, "base_distance_in_km": "string"})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid numeric values"


@pytest.mark.asyncio
async def test_create_entry_invalid_item_type(client):
    response = await client.post(CREATE_URL, json={**FOODHUT_ENTRY, "item_type": "invalidType"})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid item type"


# TEST 2: Calculate price
@pytest.mark.asyncio
async def test_calculate_price_success(client, foodhut_id):
    response = await client.post(CALCULATE_URL, json={
        "zone": "south",
        "organization_id": foodhut_id,
        "total_distance": 12,
        "item_type": "perishable"
    })

    assert response.status_code == 200
    assert response.json() == {"success": True, "total_price": "20.50"}


@pytest.mark.asyncio
async def test_calculate_price_reflects_latest_entry(client, foodhut_id):
    await client.post(CREATE_URL, json={**FOODHUT_ENTRY, "fix_price": 20})

    response = await client.post(CALCULATE_URL, json={
        "zone": "south",
        "organization_id": foodhut_id,
        "total_distance": 12,
        "item_type": "perishable"
    })

    assert response.json()["total_price"] == "30.50"


@pytest.mark.asyncio
async def test_calculate_price_empty_body_is_missing_input(client):
    response = await client.post(CALCULATE_URL, json={})

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required input data"


@pytest.mark.asyncio
async def test_calculate_price_numeric_organization_id_rejected(client, foodhut_id):
    response = await client.post(CALCULATE_URL, json={
        "zone": "south",
        "organization_id": int(foodhut_id),
        "total_distance": 12,
        "item_type": "perishable"
    })

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid distance value"


@pytest.mark.asyncio
@pytest.mark.parametrize("body,error", [
    ({"zone": "east", "organization_id": "1", "total_distance": "string", "item_type": "perishable"}, "Invalid distance value"),
    ({"zone": "east", "organization_id": "1", "total_distance": 12, "item_type": "invalidType"}, "Invalid item type"),
    ({"zone": "east", "organization_id": "005", "total_distance": 12, "item_type": "perishable"}, "Organization not found"),
    ({"zone": "central", "organization_id": "", "total_distance": 12, "item_type": ""}, "Missing required input data"),
])
async def test_calculate_price_failures(client, body, error):
    response = await client.post(CALCULATE_URL, json=body)

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": error, "message": "Bad request"}


@pytest.mark.asyncio
async def test_calculate_price_unknown_zone(client, foodhut_id):
    response = await client.post(CALCULATE_URL, json={
        "zone": "central",
        "organization_id": foodhut_id,
        "total_distance": 12,
        "item_type": "perishable"
    })

    assert response.status_code == 400
    assert response.json()["error"] == "Pricing data not found for the given parameters"


# TEST 3: Adapter-level errors
@pytest.mark.asyncio
@pytest.mark.parametrize("url", [CALCULATE_URL, CREATE_URL])
async def test_request_without_body_is_missing_input(client, url):
    response = await client.post(url)

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": "Missing required input data",
        "message": "Bad request"
    }


@pytest.mark.asyncio
async def test_malformed_json_is_bad_request(client):
    response = await client.post(
        CALCULATE_URL,
        content=b"{not json",
        headers={"content-type": "application/json"}
    )

    assert response.status_code == 400
    payload = response.json()
    assert payload["success"] is False
    assert payload["error"] == "Invalid request body"
    assert payload["message"] == "Bad request"


@pytest.mark.asyncio
async def test_non_object_body_is_bad_request(client):
    response = await client.post(CREATE_URL, json=["FoodHut"])

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"


# TEST 4: Service endpoints
@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


@pytest.mark.asyncio
async def test_root_redirects_to_docs(client):
    response = await client.get("/")

    assert response.status_code in (302, 307)
    assert response.headers["location"] == "/docs"


@pytest.mark.asyncio
async def test_correlation_id_is_echoed(client):
    response = await client.get("/health", headers={"X-Correlation-ID": "abc-123"})

    assert response.headers["X-Correlation-ID"] == "abc-123"
    assert "X-Process-Time" in response.headers
