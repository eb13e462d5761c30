import structlog
from fastapi import APIRouter, Depends, HTTPException

from .errors import InvalidFilterValue, RecordStoreUnavailable
from .filters import FilterSpec, parse_filters
from .pipeline import discover, matches_search_term
from .repository import HttpWorkerRepository, WorkerRepository
from .schemas import DiscoveryResult, Location, NearbyResult, SearchResult

logger = structlog.get_logger()

router = APIRouter()


def get_repository() -> WorkerRepository:
    return HttpWorkerRepository()


def _parse_or_400(params: dict) -> FilterSpec:
    try:
        return parse_filters(params)
    except InvalidFilterValue as e:
        logger.info("invalid filter value", field=e.field, value=e.value)
        raise HTTPException(status_code=400, detail=e.to_dict())


async def _discover_or_500(repository: WorkerRepository, criteria: FilterSpec) -> DiscoveryResult:
    try:
        return await discover(repository, criteria)
    except RecordStoreUnavailable as e:
        logger.error("record store query failed", error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/employees", response_model=DiscoveryResult)
async def list_employees(
    zone: str | None = None,
    services: str | None = None,
    min_rating: str | None = None,
    latitude: str | None = None,
    longitude: str | None = None,
    radius: str | None = None,
    languages: str | None = None,
    repository: WorkerRepository = Depends(get_repository),
):
    criteria = _parse_or_400(
        {
            "zone": zone,
            "services": services,
            "min_rating": min_rating,
            "latitude": latitude,
            "longitude": longitude,
            "radius": radius,
            "languages": languages,
        }
    )
    return await _discover_or_500(repository, criteria)


@router.get("/employees/nearby", response_model=NearbyResult)
async def nearby_employees(
    latitude: str | None = None,
    longitude: str | None = None,
    radius: str | None = None,
    repository: WorkerRepository = Depends(get_repository),
):
    criteria = _parse_or_400({"latitude": latitude, "longitude": longitude, "radius": radius})

    if criteria.location is None:
        raise HTTPException(
            status_code=400,
            detail=InvalidFilterValue(
                "latitude", latitude, "latitude and longitude are required"
            ).to_dict(),
        )

    result = await _discover_or_500(repository, criteria)

    return NearbyResult(
        employees=result.employees,
        count=result.count,
        location=Location(latitude=criteria.location[0], longitude=criteria.location[1]),
        radius=criteria.radius_km,
    )


@router.get("/employees/search", response_model=SearchResult)
async def search_employees(
    q: str | None = None,
    zone: str | None = None,
    services: str | None = None,
    min_rating: str | None = None,
    languages: str | None = None,
    repository: WorkerRepository = Depends(get_repository),
):
    criteria = _parse_or_400(
        {
            "zone": zone,
            "services": services,
            "min_rating": min_rating,
            "languages": languages,
        }
    )
    result = await _discover_or_500(repository, criteria)

    term = (q or "").strip() or None
    employees = result.employees
    if term:
        employees = [w for w in employees if matches_search_term(w, term)]

    return SearchResult(
        employees=employees,
        count=len(employees),
        search_term=term,
        filters_applied=result.filters_applied,
    )
