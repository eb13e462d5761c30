import asyncio
from typing import Iterable

import structlog

from .config import REPOSITORY_TIMEOUT_SECONDS
from .errors import RecordStoreUnavailable
from .filters import FilterSpec, apply_attribute_filters, norm
from .geo import haversine_km
from .repository import WorkerRepository
from .schemas import DiscoveredWorker, DiscoveryResult, WorkerProfile

logger = structlog.get_logger()


def attach_distances(
    workers: Iterable[WorkerProfile],
    location: tuple[float, float] | None,
) -> list[DiscoveredWorker]:
    """
    Copy each worker with a distance_km from the requester.
    distance_km stays None without a requester location or worker coordinates.
    """
    results = []
    for w in workers:
        distance = None
        if location is not None and w.has_location:
            distance = haversine_km(location[0], location[1], w.latitude, w.longitude)
        results.append(DiscoveredWorker.model_validate({**w.model_dump(), "distance_km": distance}))
    return results


def within_radius(worker: DiscoveredWorker, radius_km: float | None) -> bool:
    # workers without coordinates are never cut by the radius
    if radius_km is None or worker.distance_km is None:
        return True
    return worker.distance_km <= radius_km


def distance_sort_key(worker: DiscoveredWorker):
    missing = worker.distance_km is None
    return (
        missing,
        0.0 if missing else worker.distance_km,
        -worker.average_rating,
        worker.id,
    )


def rating_sort_key(worker: DiscoveredWorker):
    return (-worker.average_rating, worker.id)


def rank(
    workers: Iterable[WorkerProfile],
    location: tuple[float, float] | None,
    radius_km: float | None,
) -> list[DiscoveredWorker]:
    ranked = attach_distances(workers, location)

    if location is None:
        ranked.sort(key=rating_sort_key)
        return ranked

    ranked = [w for w in ranked if within_radius(w, radius_km)]
    ranked.sort(key=distance_sort_key)
    return ranked


def matches_search_term(worker: WorkerProfile, term: str) -> bool:
    needle = norm(term)
    if not needle:
        return True
    if needle in norm(worker.name) or needle in norm(worker.zone):
        return True
    return any(needle in norm(s) for s in worker.services_offered)


async def fetch_candidates(
    repository: WorkerRepository,
    criteria: FilterSpec,
    timeout: float = REPOSITORY_TIMEOUT_SECONDS,
) -> list[WorkerProfile]:
    try:
        return await asyncio.wait_for(repository.query_by_attributes(criteria), timeout=timeout)
    except asyncio.TimeoutError:
        raise RecordStoreUnavailable(f"Record store query exceeded {timeout}s deadline")


async def discover(
    repository: WorkerRepository,
    criteria: FilterSpec,
    timeout: float = REPOSITORY_TIMEOUT_SECONDS,
) -> DiscoveryResult:
    """
    Run the discovery pipeline: record-store query, attribute filters,
    distance + radius cutoff, then ordering.
    """
    candidates = await fetch_candidates(repository, criteria, timeout=timeout)
    filtered = apply_attribute_filters(candidates, criteria)
    employees = rank(filtered, criteria.location, criteria.radius_km)

    logger.info(
        "discovery completed",
        candidates=len(candidates),
        returned=len(employees),
        filters_applied=list(criteria.applied),
        with_location=criteria.location is not None,
    )

    return DiscoveryResult(
        employees=employees,
        count=len(employees),
        filters_applied=list(criteria.applied),
    )
