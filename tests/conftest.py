import os

# must be set before employee_service is imported
os.environ.setdefault("EMPLOYEE_DB", "sqlite+aiosqlite://")
os.environ.setdefault("LOG_FORMAT", "console")

import pytest

from discovery_service.schemas import WorkerProfile


@pytest.fixture
def make_worker():
    def _make(worker_id: str, **overrides) -> WorkerProfile:
        data = {
            "id": worker_id,
            "name": f"Worker {worker_id}",
            "email": f"{worker_id}@example.com",
            "zone": "Palermo",
            "services_offered": ["cleaning"],
            "languages": ["Español"],
            "hourly_rate": 1200,
            "average_rating": 4.5,
            "is_active": True,
            "verification_status": "approved",
            "latitude": None,
            "longitude": None,
        }
        data.update(overrides)
        return WorkerProfile(**data)

    return _make


@pytest.fixture
def requester_location():
    # Obelisco area
    return (-34.6118, -58.3960)


@pytest.fixture
def palermo_and_recoleta(make_worker):
    w1 = make_worker(
        "w1",
        name="Rosa Martínez",
        zone="Palermo",
        average_rating=4.8,
        latitude=-34.5875,
        longitude=-58.3974,
        services_offered=["cleaning", "cooking"],
    )
    w2 = make_worker(
        "w2",
        name="Carmen López",
        zone="Recoleta",
        average_rating=4.9,
        latitude=-34.5889,
        longitude=-58.3993,
        services_offered=["cleaning", "elderly_care"],
    )
    return [w1, w2]
