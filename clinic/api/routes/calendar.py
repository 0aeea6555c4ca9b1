from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List, Optional

from ...core.database import get_db
from ...core.permissions import Permission
from ...api.deps import require_permission
from ...models.patient import Patient
from ...models.user import User
from ...services.appointment_service import AppointmentService
from ...services.availability_service import AvailabilityService
from ...services.calendar_service import merge_events
from ...schemas.calendar import CalendarEvent

router = APIRouter(prefix="/calendar", tags=["Calendar"])

@router.get(
    "/events",
    response_model=List[CalendarEvent],
    dependencies=[Depends(require_permission(Permission.AVAILABILITY_READ, Permission.APPOINTMENT_READ))]
)
async def list_calendar_events(
    doctor_id: Optional[int] = Query(None, alias="doctorId"),
    db: Session = Depends(get_db)
):
    """Availability and appointments merged into calendar events."""
    availabilities = AvailabilityService(db).list_slots(doctor_id)
    appointments = AppointmentService(db).list_appointments(doctor_id=doctor_id)
    doctors = db.query(User).filter(
        User.id.in_(sorted({row.doctor_id for row in availabilities} | {row.doctor_id for row in appointments}))
    ).all()
    patients = db.query(Patient).filter(
        Patient.id.in_(sorted({row.patient_id for row in appointments}))
    ).all()
    return merge_events(availabilities, appointments, doctors, patients)
