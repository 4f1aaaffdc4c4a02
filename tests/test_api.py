import pytest
from fastapi.testclient import TestClient

from hotel_backend.api import create_app
from hotel_backend.config import Settings
from hotel_backend.db.database import Database
from hotel_backend.db.seed import seed


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_properties_endpoint_empty(client):
    resp = client.get("/api/properties")
    assert resp.status_code == 200
    assert resp.json() == []


def test_create_and_fetch_property(client, valid_fields):
    resp = client.post("/api/properties", json=valid_fields)
    assert resp.status_code == 201
    created = resp.json()
    assert created["id"]
    assert "createdAt" in created
    for key, value in valid_fields.items():
        assert created[key] == value

    fetched = client.get(f"/api/properties/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created

    listing = client.get("/api/properties").json()
    assert [item["id"] for item in listing] == [created["id"]]


def test_create_validation_errors(client, valid_fields):
    resp = client.post("/api/properties", json={**valid_fields, "name": "", "occupancy": 1.2})
    assert resp.status_code == 400
    payload = resp.json()
    assert payload["error"] == "Invalid property data"
    assert {item["field"] for item in payload["details"]} == {"name", "occupancy"}
    assert client.get("/api/properties").json() == []


def test_create_with_malformed_body(client):
    resp = client.post("/api/properties", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400


def test_get_missing_property(client):
    resp = client.get("/api/properties/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Property not found"}


def test_update_property(client, valid_fields):
    created = client.post("/api/properties", json=valid_fields).json()
    resp = client.put(f"/api/properties/{created['id']}", json={**valid_fields, "adr": 199.99})
    assert resp.status_code == 200
    body = resp.json()
    assert body["adr"] == 199.99
    assert body["createdAt"] == created["createdAt"]


def test_update_with_required_fields_keeps_seeded_details(client, repository):
    original = next(p for p in seed(repository) if p.name == "Grand Plaza Hotel")
    body = {key: getattr(original, key) for key in ("name", "city", "state", "rooms", "adr", "occupancy", "revpar")}
    resp = client.put(f"/api/properties/{original.id}", json={**body, "adr": 190.0})
    assert resp.status_code == 200
    updated = resp.json()
    assert updated["adr"] == 190.0
    assert updated["amenities"] == original.amenities
    assert updated["description"] == original.description
    assert updated["rating"] == original.rating
    assert updated["address"] == original.address


def test_create_accepts_whole_number_float_rooms(client, valid_fields):
    resp = client.post("/api/properties", json={**valid_fields, "rooms": 100.0})
    assert resp.status_code == 201
    assert resp.json()["rooms"] == 100


def test_update_errors(client, valid_fields):
    assert client.put("/api/properties/nope", json=valid_fields).status_code == 404
    created = client.post("/api/properties", json=valid_fields).json()
    resp = client.put(f"/api/properties/{created['id']}", json={**valid_fields, "rooms": -1})
    assert resp.status_code == 400
    assert resp.json()["details"][0]["field"] == "rooms"


def test_delete_property_twice(client, valid_fields):
    created = client.post("/api/properties", json=valid_fields).json()
    resp = client.delete(f"/api/properties/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == {"message": "Property deleted successfully"}
    assert client.delete(f"/api/properties/{created['id']}").status_code == 404


def test_dashboard_endpoint(client, valid_fields):
    client.post("/api/properties", json=valid_fields)
    client.post("/api/properties", json={**valid_fields, "name": "Budget Inn", "rooms": 50, "revpar": 60.0})
    resp = client.get("/api/dashboard")
    assert resp.status_code == 200
    payload = resp.json()
    assert payload["summary"]["count"] == 2
    assert payload["summary"]["totalRooms"] == 300
    assert [p["name"] for p in payload["revparLeaders"]] == ["Grand Plaza Hotel", "Budget Inn"]
    assert payload["occupancy"] == {"min": 78.0, "max": 78.0}


def test_chart_endpoint(client, valid_fields):
    client.post("/api/properties", json=valid_fields)
    resp = client.get("/api/dashboard/charts/revenue")
    assert resp.status_code == 200
    assert resp.json()[0]["potentialRevenue"] == 46375.0


def test_store_failure_returns_500():
    database = Database("sqlite:///:memory:")  # no schema: every query fails
    client = TestClient(create_app(Settings(database_url="sqlite:///:memory:"), database=database))
    resp = client.get("/api/properties")
    assert resp.status_code == 500
    payload = resp.json()
    assert payload["error"] == "Database connection failed"
    assert "no such table" in payload["details"]


@pytest.mark.parametrize(
    "method, path, with_body",
    [
        ("post", "/api/properties", True),
        ("get", "/api/properties/some-id", False),
        ("put", "/api/properties/some-id", True),
        ("delete", "/api/properties/some-id", False),
    ],
)
def test_store_failure_on_single_property_routes(valid_fields, method, path, with_body):
    database = Database("sqlite:///:memory:")
    client = TestClient(create_app(Settings(database_url="sqlite:///:memory:"), database=database))
    kwargs = {"json": valid_fields} if with_body else {}
    resp = client.request(method.upper(), path, **kwargs)
    assert resp.status_code == 500
    payload = resp.json()
    assert set(payload) == {"error", "details"}
    assert payload["error"] == "Database connection failed"
    assert "no such table" in payload["details"]
    database.dispose()


def test_chart_endpoint_rejects_unknown_mode(client):
    resp = client.get("/api/dashboard/charts/forecast")
    assert resp.status_code == 400
