"""
Filter specification parsing and the attribute filter stage.

Query parameters arrive as raw strings. They are parsed once into a
FilterSpec; numeric fields that cannot be parsed raise InvalidFilterValue
instead of silently dropping out of the comparison.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Mapping

from .config import DEFAULT_RADIUS_KM
from .errors import InvalidFilterValue
from .schemas import WorkerProfile

# canonical order used when reporting filters_applied
FILTER_FIELDS = (
    "zone",
    "services",
    "languages",
    "min_rating",
    "latitude",
    "longitude",
    "radius",
)


def norm(s: str | None) -> str:
    return (s or "").strip().lower()


@dataclass(frozen=True)
class FilterSpec:
    zone: str | None = None
    services: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()
    min_rating: float | None = None
    location: tuple[float, float] | None = None
    radius_km: float | None = None
    applied: tuple[str, ...] = ()


def parse_tags(raw: str | None) -> tuple[str, ...]:
    """Split a comma-separated list into normalized, de-duplicated tags."""
    tags = []
    for part in (raw or "").split(","):
        tag = norm(part)
        if tag and tag not in tags:
            tags.append(tag)
    return tuple(tags)


def parse_number(field: str, raw: str | None) -> float | None:
    text = (raw or "").strip()
    if not text:
        return None

    try:
        value = float(text)
    except ValueError:
        raise InvalidFilterValue(field, raw)

    if not math.isfinite(value):
        raise InvalidFilterValue(field, raw, f"{field} must be a finite number")

    return value


def parse_filters(
    params: Mapping[str, str | None],
    default_radius_km: float = DEFAULT_RADIUS_KM,
) -> FilterSpec:
    zone = (params.get("zone") or "").strip() or None
    services = parse_tags(params.get("services"))
    languages = parse_tags(params.get("languages"))
    min_rating = parse_number("min_rating", params.get("min_rating"))

    latitude = parse_number("latitude", params.get("latitude"))
    longitude = parse_number("longitude", params.get("longitude"))
    if (latitude is None) != (longitude is None):
        missing = "longitude" if longitude is None else "latitude"
        raise InvalidFilterValue(
            missing,
            params.get(missing),
            "latitude and longitude must be supplied together",
        )

    radius = parse_number("radius", params.get("radius"))
    if radius is not None and radius < 0:
        raise InvalidFilterValue("radius", params.get("radius"), "radius must not be negative")

    location = (latitude, longitude) if latitude is not None else None

    present = {
        "zone": zone is not None,
        "services": bool(services),
        "languages": bool(languages),
        "min_rating": min_rating is not None,
        "latitude": latitude is not None,
        "longitude": longitude is not None,
        "radius": radius is not None,
    }

    return FilterSpec(
        zone=zone,
        services=services,
        languages=languages,
        min_rating=min_rating,
        location=location,
        radius_km=radius if radius is not None else default_radius_km,
        applied=tuple(f for f in FILTER_FIELDS if present[f]),
    )


def _any_tag(requested: tuple[str, ...], offered: Iterable[str]) -> bool:
    offered_norm = {norm(x) for x in offered or []}
    return any(tag in offered_norm for tag in requested)


def matches_attributes(worker: WorkerProfile, criteria: FilterSpec) -> bool:
    if not worker.is_discoverable:
        return False

    if criteria.zone and norm(criteria.zone) not in norm(worker.zone):
        return False

    if criteria.services and not _any_tag(criteria.services, worker.services_offered):
        return False

    if criteria.languages and not _any_tag(criteria.languages, worker.languages):
        return False

    if criteria.min_rating is not None and worker.average_rating < criteria.min_rating:
        return False

    return True


def apply_attribute_filters(workers: Iterable[WorkerProfile], criteria: FilterSpec) -> list[WorkerProfile]:
    return [w for w in workers if matches_attributes(w, criteria)]
