import pytest
from fastapi.testclient import TestClient

from discovery_service.errors import RecordStoreUnavailable
from discovery_service.main import app
from discovery_service.repository import InMemoryWorkerRepository
from discovery_service.routes import get_repository


class BrokenRepository:
    async def query_by_attributes(self, filters):
        raise RecordStoreUnavailable("connection refused")


@pytest.fixture
def client(palermo_and_recoleta, make_worker):
    workers = palermo_and_recoleta + [
        make_worker("w3", name="Ana Gómez", zone="Belgrano", services_offered=["babysitting"], average_rating=4.2),
        make_worker("w4", zone="Palermo", is_active=False),
    ]
    app.dependency_overrides[get_repository] = lambda: InMemoryWorkerRepository(workers)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    r = client.get("/health")

    assert r.status_code == 200
    assert r.json()["service"] == "discovery-service"


def test_list_with_location(client):
    r = client.get(
        "/employees",
        params={"latitude": "-34.6118", "longitude": "-58.3960", "radius": "5"},
    )

    assert r.status_code == 200
    body = r.json()
    # w3 has no coordinates, so it is kept and sorted last
    assert [e["id"] for e in body["employees"]] == ["w2", "w1", "w3"]
    assert [e["distance_km"] for e in body["employees"]] == [2.6, 2.7, None]
    assert body["count"] == 3
    assert body["filters_applied"] == ["latitude", "longitude", "radius"]


def test_list_without_location_sorted_by_rating(client):
    body = client.get("/employees").json()

    assert [e["id"] for e in body["employees"]] == ["w2", "w1", "w3"]
    assert all(e["distance_km"] is None for e in body["employees"])
    assert body["filters_applied"] == []


def test_list_with_attribute_filters(client):
    body = client.get(
        "/employees",
        params={"zone": "palermo", "services": "cooking,ironing", "min_rating": "4"},
    ).json()

    assert [e["id"] for e in body["employees"]] == ["w1"]
    assert body["filters_applied"] == ["zone", "services", "min_rating"]


def test_malformed_rating_is_rejected(client):
    r = client.get("/employees", params={"min_rating": "four"})

    assert r.status_code == 400
    detail = r.json()["detail"]
    assert detail["error"] == "InvalidFilterValue"
    assert detail["field"] == "min_rating"


def test_record_store_failure_is_internal_error(client):
    app.dependency_overrides[get_repository] = lambda: BrokenRepository()

    r = client.get("/employees")

    assert r.status_code == 500
    assert r.json() == {"detail": "Internal server error"}


def test_nearby_requires_location(client):
    r = client.get("/employees/nearby")

    assert r.status_code == 400
    assert r.json()["detail"]["field"] == "latitude"


def test_nearby_uses_default_radius(client):
    r = client.get("/employees/nearby", params={"latitude": "-34.6118", "longitude": "-58.3960"})

    assert r.status_code == 200
    body = r.json()
    assert body["radius"] == 10.0
    assert body["location"] == {"latitude": -34.6118, "longitude": -58.396}
    assert [e["id"] for e in body["employees"]] == ["w2", "w1", "w3"]
    assert body["count"] == 3


def test_search_by_free_text(client):
    body = client.get("/employees/search", params={"q": "baby"}).json()

    assert [e["id"] for e in body["employees"]] == ["w3"]
    assert body["search_term"] == "baby"
    assert body["count"] == 1


def test_search_combines_text_and_filters(client):
    body = client.get("/employees/search", params={"q": "clean", "min_rating": "4.85"}).json()

    assert [e["id"] for e in body["employees"]] == ["w2"]
    assert body["filters_applied"] == ["min_rating"]


def test_request_id_is_echoed(client):
    r = client.get("/health", headers={"X-Request-Id": "abc-123"})

    assert r.headers["X-Request-Id"] == "abc-123"
