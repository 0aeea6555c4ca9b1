from sqlalchemy.orm import Session
from datetime import datetime
from typing import List, Optional
import logging

from ..models.availability import Availability
from ..core.errors import NotFoundError
from ..schemas.availability import AvailabilityCreate, AvailabilityUpdate

logger = logging.getLogger(__name__)

class AvailabilityService:
    def __init__(self, db: Session):
        self.db = db
    
    def list_slots(self, doctor_id: Optional[int] = None) -> List[Availability]:
        query = self.db.query(Availability)
        if doctor_id is not None:
            query = query.filter(Availability.doctor_id == doctor_id)
        return query.order_by(Availability.start_time, Availability.id).all()
    
    def get_slot(self, slot_id: int) -> Availability:
        slot = self.db.query(Availability).filter(Availability.id == slot_id).first()
        if not slot:
            raise NotFoundError("Availability", slot_id)
        return slot
    
    def create_slot(self, slot_data: AvailabilityCreate) -> Availability:
        """Open a new, unbooked slot for a doctor."""
        slot = Availability(
            doctor_id=slot_data.doctor_id,
            start_time=slot_data.start_time,
            end_time=slot_data.end_time,
            is_booked=False,
        )
        self.db.add(slot)
        self.db.commit()
        self.db.refresh(slot)
        return slot
    
    def update_slot(self, slot_id: int, slot_data: AvailabilityUpdate) -> Availability:
        """Move or resize a slot.

        Only the submitted fields change; the end time is never derived here.
        """
        slot = self.get_slot(slot_id)
        
        for field, value in slot_data.model_dump(exclude_unset=True).items():
            if value is None:
                continue
            setattr(slot, field, value)
        
        self.db.commit()
        self.db.refresh(slot)
        return slot
    
    def delete_slot(self, slot_id: int) -> None:
        slot = self.get_slot(slot_id)
        if slot.is_booked:
            logger.warning(f"Deleting booked availability {slot_id}")
        self.db.delete(slot)
        self.db.commit()
    
    def mark_booked(self, doctor_id: int, start: datetime, end: datetime) -> Optional[Availability]:
        """Flag the first free slot of the doctor that covers [start, end].

        The caller commits. Nothing prevents two appointments from landing
        in the same slot.
        """
        candidates = self.db.query(Availability).filter(
            Availability.doctor_id == doctor_id,
            Availability.is_booked == False,
            Availability.start_time <= start,
            Availability.end_time >= end
        ).order_by(Availability.start_time, Availability.id)
        
        slot = candidates.first()
        if slot:
            slot.is_booked = True
            logger.info(f"Availability {slot.id} booked for doctor {doctor_id}")
        return slot
