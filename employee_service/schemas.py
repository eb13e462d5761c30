from typing import List, Literal

from pydantic import BaseModel, Field

VerificationStatus = Literal["pending", "approved", "rejected"]


class CreateEmployee(BaseModel):
    # verification_status is not accepted here; approval goes through
    # PATCH /employees/{id}/verification
    email: str
    name: str
    phone: str | None = None
    zone: str
    services_offered: List[str] = Field(default_factory=list)
    languages: List[str] = Field(default_factory=list)
    experience_years: int = Field(default=0, ge=0)
    hourly_rate: float = Field(gt=0)
    is_active: bool = True
    latitude: float | None = None
    longitude: float | None = None


class UpdateStatus(BaseModel):
    is_active: bool


class UpdateVerification(BaseModel):
    verification_status: VerificationStatus


class UpdateLocation(BaseModel):
    latitude: float
    longitude: float
