from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from typing import List, Optional

from ...core.database import get_db
from ...core.permissions import Permission
from ...api.deps import require_permission
from ...services.availability_service import AvailabilityService
from ...schemas.availability import AvailabilityCreate, AvailabilityUpdate, AvailabilityResponse

router = APIRouter(prefix="/availability", tags=["Availability"])

@router.get("", response_model=List[AvailabilityResponse], dependencies=[Depends(require_permission(Permission.AVAILABILITY_READ))])
async def list_availability(
    doctor_id: Optional[int] = Query(None, alias="doctorId"),
    db: Session = Depends(get_db)
):
    return AvailabilityService(db).list_slots(doctor_id)

@router.post(
    "",
    response_model=AvailabilityResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_permission(Permission.AVAILABILITY_CREATE))]
)
async def create_availability(slot_data: AvailabilityCreate, db: Session = Depends(get_db)):
    return AvailabilityService(db).create_slot(slot_data)

@router.patch(
    "/{slot_id}",
    response_model=AvailabilityResponse,
    dependencies=[Depends(require_permission(Permission.AVAILABILITY_UPDATE))]
)
async def update_availability(slot_id: int, slot_data: AvailabilityUpdate, db: Session = Depends(get_db)):
    """Reschedule a slot, typically after a calendar drag."""
    return AvailabilityService(db).update_slot(slot_id, slot_data)

@router.delete(
    "/{slot_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_permission(Permission.AVAILABILITY_DELETE))]
)
async def delete_availability(slot_id: int, db: Session = Depends(get_db)):
    AvailabilityService(db).delete_slot(slot_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
