import httpx
import pytest

from discovery_service.errors import RecordStoreUnavailable
from discovery_service.filters import parse_filters
from discovery_service.repository import HttpWorkerRepository, InMemoryWorkerRepository

RECORD = {
    "id": "emp_1",
    "name": "Rosa Martínez",
    "email": "rosa@example.com",
    "phone": "+54 11 1234-5678",
    "zone": "Palermo",
    "services_offered": ["cleaning", "cooking"],
    "languages": ["Español", "Inglés"],
    "experience_years": 8,
    "hourly_rate": 1200,
    "average_rating": 4.8,
    "total_reviews": 24,
    "is_active": True,
    "verification_status": "approved",
    "latitude": -34.5875,
    "longitude": -58.3974,
}


def _repository(handler) -> HttpWorkerRepository:
    return HttpWorkerRepository(
        base_url="http://employee-service:8000/",
        transport=httpx.MockTransport(handler),
    )


async def test_pushes_down_zone_and_rating():
    seen = {}

    def handler(request: httpx.Request):
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json=[RECORD])

    repo = _repository(handler)
    workers = await repo.query_by_attributes(
        parse_filters({"zone": "Palermo", "min_rating": "4.5", "services": "cooking"})
    )

    assert seen["path"] == "/employees/discoverable"
    assert seen["params"] == {"zone": "Palermo", "min_rating": "4.5"}
    assert [w.id for w in workers] == ["emp_1"]
    assert workers[0].services_offered == ["cleaning", "cooking"]


async def test_no_params_without_filters():
    seen = {}

    def handler(request: httpx.Request):
        seen["params"] = dict(request.url.params)
        return httpx.Response(200, json=[])

    workers = await _repository(handler).query_by_attributes(parse_filters({}))

    assert workers == []
    assert seen["params"] == {}


async def test_error_status_raises_record_store_unavailable():
    repo = _repository(lambda request: httpx.Response(503, text="down"))

    with pytest.raises(RecordStoreUnavailable):
        await repo.query_by_attributes(parse_filters({}))


async def test_connection_error_raises_record_store_unavailable():
    def handler(request: httpx.Request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(RecordStoreUnavailable):
        await _repository(handler).query_by_attributes(parse_filters({}))


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, json={"employees": []}),
        httpx.Response(200, json=[{"name": "missing id"}]),
        httpx.Response(200, text="not json"),
    ],
)
async def test_malformed_payload_raises_record_store_unavailable(response):
    repo = _repository(lambda request: response)

    with pytest.raises(RecordStoreUnavailable):
        await repo.query_by_attributes(parse_filters({}))


async def test_in_memory_repository_returns_discoverable_matches(make_worker):
    repo = InMemoryWorkerRepository(
        [
            make_worker("active"),
            make_worker("inactive", is_active=False),
            make_worker("pending", verification_status="pending"),
            make_worker("elsewhere", zone="Recoleta"),
        ]
    )

    workers = await repo.query_by_attributes(parse_filters({"zone": "palermo"}))

    assert [w.id for w in workers] == ["active"]
