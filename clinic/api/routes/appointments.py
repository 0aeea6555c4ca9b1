from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from ...core.database import get_db
from ...core.permissions import Permission
from ...api.deps import require_permission
from ...services.appointment_service import AppointmentService
from ...schemas.appointment import AppointmentCreate, AppointmentUpdate, AppointmentResponse

router = APIRouter(prefix="/appointments", tags=["Appointments"])

@router.get("", response_model=List[AppointmentResponse], dependencies=[Depends(require_permission(Permission.APPOINTMENT_READ))])
async def list_appointments(
    doctor_id: Optional[int] = Query(None, alias="doctorId"),
    patient_id: Optional[int] = Query(None, alias="patientId"),
    db: Session = Depends(get_db)
):
    return AppointmentService(db).list_appointments(doctor_id, patient_id)

@router.post(
    "",
    response_model=AppointmentResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_permission(Permission.APPOINTMENT_CREATE))]
)
async def create_appointment(appointment_data: AppointmentCreate, db: Session = Depends(get_db)):
    """Book an appointment. Slot availability is not checked."""
    return AppointmentService(db).create_appointment(appointment_data)

@router.get(
    "/{appointment_id}",
    response_model=AppointmentResponse,
    dependencies=[Depends(require_permission(Permission.APPOINTMENT_READ))]
)
async def get_appointment(appointment_id: int, db: Session = Depends(get_db)):
    return AppointmentService(db).get_appointment(appointment_id)

@router.patch(
    "/{appointment_id}",
    response_model=AppointmentResponse,
    dependencies=[Depends(require_permission(Permission.APPOINTMENT_UPDATE))]
)
async def update_appointment(
    appointment_id: int,
    appointment_data: AppointmentUpdate,
    db: Session = Depends(get_db)
):
    return AppointmentService(db).update_appointment(appointment_id, appointment_data)

@router.delete(
    "/{appointment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission(Permission.APPOINTMENT_DELETE))]
)
async def delete_appointment(appointment_id: int, db: Session = Depends(get_db)):
    AppointmentService(db).delete_appointment(appointment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
