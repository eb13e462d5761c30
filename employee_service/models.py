import uuid

from sqlalchemy import Boolean, Column, Float, Integer, JSON, String
from .db import Base


def _new_id() -> str:
    return str(uuid.uuid4())


class Employee(Base):
    __tablename__ = "employees"

    id = Column(String, primary_key=True, default=_new_id)
    email = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    phone = Column(String, nullable=True)

    zone = Column(String, nullable=False, index=True)
    services_offered = Column(JSON, nullable=False)
    languages = Column(JSON, nullable=False)
    experience_years = Column(Integer, nullable=False, default=0)
    hourly_rate = Column(Float, nullable=False)

    # new employees start at 5.0 until reviews accrue
    average_rating = Column(Float, nullable=False, default=5.0)
    total_reviews = Column(Integer, nullable=False, default=0)

    is_active = Column(Boolean, nullable=False, default=True)
    verification_status = Column(String, nullable=False, default="pending", index=True)  # pending/approved/rejected

    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
