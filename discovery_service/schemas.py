from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

VerificationStatus = Literal["pending", "approved", "rejected"]


class WorkerProfile(BaseModel):
    """Employee record as served by the employee-service record store."""

    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    email: str | None = None
    phone: str | None = None

    zone: str = ""
    services_offered: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    experience_years: int = 0
    hourly_rate: float | None = None
    average_rating: float = 5.0
    total_reviews: int = 0

    is_active: bool = False
    verification_status: VerificationStatus = "pending"

    latitude: float | None = None
    longitude: float | None = None

    @property
    def is_discoverable(self) -> bool:
        return self.is_active and self.verification_status == "approved"

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class DiscoveredWorker(WorkerProfile):
    # computed per request, never persisted
    distance_km: float | None = None


class Location(BaseModel):
    latitude: float
    longitude: float


class DiscoveryResult(BaseModel):
    employees: List[DiscoveredWorker]
    count: int
    filters_applied: List[str]


class NearbyResult(BaseModel):
    employees: List[DiscoveredWorker]
    count: int
    location: Location
    radius: float


class SearchResult(BaseModel):
    employees: List[DiscoveredWorker]
    count: int
    search_term: str | None = None
    filters_applied: List[str]
