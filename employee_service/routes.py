from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from .db import SessionLocal
from .models import Employee
from .schemas import CreateEmployee, UpdateLocation, UpdateStatus, UpdateVerification
from .rabbitmq import publisher

router = APIRouter()


async def get_db():
    async with SessionLocal() as session:
        yield session


def employee_to_dict(employee: Employee) -> dict:
    return {
        "id": employee.id,
        "email": employee.email,
        "name": employee.name,
        "phone": employee.phone,
        "zone": employee.zone,
        "services_offered": employee.services_offered or [],
        "languages": employee.languages or [],
        "experience_years": employee.experience_years,
        "hourly_rate": employee.hourly_rate,
        "average_rating": employee.average_rating,
        "total_reviews": employee.total_reviews,
        "is_active": employee.is_active,
        "verification_status": employee.verification_status,
        "latitude": employee.latitude,
        "longitude": employee.longitude,
    }


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


async def _get_or_404(db: AsyncSession, employee_id: str) -> Employee:
    result = await db.execute(select(Employee).where(Employee.id == employee_id))
    employee = result.scalar_one_or_none()

    if not employee:
        raise HTTPException(status_code=404, detail="Employee not found")

    return employee


@router.get("/employees/discoverable")
async def list_discoverable(
    zone: str | None = None,
    min_rating: float | None = None,
    db: AsyncSession = Depends(get_db),
):
    """
    Record-store query used by the discovery service.
    Only active, approved employees are returned, in no particular order.
    """
    stmt = select(Employee).where(
        Employee.is_active.is_(True),
        Employee.verification_status == "approved",
    )

    if zone:
        stmt = stmt.where(Employee.zone.ilike(_like_pattern(zone), escape="\\"))

    if min_rating is not None:
        stmt = stmt.where(Employee.average_rating >= min_rating)

    result = await db.execute(stmt)
    return [employee_to_dict(e) for e in result.scalars().all()]


@router.post("/employees", status_code=201)
async def create_employee(data: CreateEmployee, db: AsyncSession = Depends(get_db)):
    result = await db.execute(select(Employee).where(Employee.email == data.email))
    existing = result.scalar_one_or_none()

    if existing:
        raise HTTPException(status_code=400, detail="Employee already exists")

    employee = Employee(
        email=data.email,
        name=data.name,
        phone=data.phone,
        zone=data.zone,
        services_offered=data.services_offered,
        languages=data.languages,
        experience_years=data.experience_years,
        hourly_rate=data.hourly_rate,
        average_rating=5.0,
        total_reviews=0,
        is_active=data.is_active,
        verification_status="pending",
        latitude=data.latitude,
        longitude=data.longitude,
    )

    db.add(employee)
    await db.commit()

    payload = employee_to_dict(employee)
    await publisher.publish_event("employee.created", payload)

    return {"message": "Employee created", "employee": payload}


@router.get("/employees/{employee_id}")
async def get_employee(employee_id: str, db: AsyncSession = Depends(get_db)):
    employee = await _get_or_404(db, employee_id)
    return {"employee": employee_to_dict(employee)}


@router.patch("/employees/{employee_id}/status")
async def update_status(employee_id: str, data: UpdateStatus, db: AsyncSession = Depends(get_db)):
    employee = await _get_or_404(db, employee_id)

    employee.is_active = data.is_active
    await db.commit()

    await publisher.publish_event(
        "employee.status_updated",
        {"id": employee.id, "is_active": employee.is_active},
    )

    state = "activated" if employee.is_active else "deactivated"
    return {"message": f"Employee {state}", "employee": employee_to_dict(employee)}


@router.put("/employees/{employee_id}/location")
async def update_location(employee_id: str, data: UpdateLocation, db: AsyncSession = Depends(get_db)):
    employee = await _get_or_404(db, employee_id)

    employee.latitude = data.latitude
    employee.longitude = data.longitude

    await db.commit()

    await publisher.publish_event(
        "employee.location_updated",
        {
            "id": employee.id,
            "latitude": employee.latitude,
            "longitude": employee.longitude,
        },
    )

    return {"message": "Location updated"}


@router.patch("/employees/{employee_id}/verification")
async def update_verification(
    employee_id: str,
    data: UpdateVerification,
    db: AsyncSession = Depends(get_db),
):
    """Records the admin approval outcome. Only approved employees are discoverable."""
    employee = await _get_or_404(db, employee_id)

    employee.verification_status = data.verification_status
    await db.commit()

    await publisher.publish_event(
        "employee.verification_updated",
        {"id": employee.id, "verification_status": employee.verification_status},
    )

    return {
        "message": f"Employee verification {employee.verification_status}",
        "employee": employee_to_dict(employee),
    }
