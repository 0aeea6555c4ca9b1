from sqlalchemy.orm import Session
from typing import List, Optional

from ..models.appointment import Appointment
from ..core.errors import NotFoundError
from ..schemas.appointment import AppointmentCreate, AppointmentUpdate
from .availability_service import AvailabilityService

class AppointmentService:
    def __init__(self, db: Session):
        self.db = db
    
    def list_appointments(
        self,
        doctor_id: Optional[int] = None,
        patient_id: Optional[int] = None
    ) -> List[Appointment]:
        query = self.db.query(Appointment)
        if doctor_id is not None:
            query = query.filter(Appointment.doctor_id == doctor_id)
        if patient_id is not None:
            query = query.filter(Appointment.patient_id == patient_id)
        return query.order_by(Appointment.start_time, Appointment.id).all()
    
    def get_appointment(self, appointment_id: int) -> Appointment:
        appointment = self.db.query(Appointment).filter(
            Appointment.id == appointment_id
        ).first()
        if not appointment:
            raise NotFoundError("Appointment", appointment_id)
        return appointment
    
    def create_appointment(self, appointment_data: AppointmentCreate) -> Appointment:
        """Book an appointment and flag the doctor's covering slot, if any."""
        appointment = Appointment(**appointment_data.model_dump())
        self.db.add(appointment)
        
        AvailabilityService(self.db).mark_booked(
            appointment.doctor_id,
            appointment.start_time,
            appointment.end_time
        )
        
        self.db.commit()
        self.db.refresh(appointment)
        return appointment
    
    def update_appointment(
        self,
        appointment_id: int,
        appointment_data: AppointmentUpdate
    ) -> Appointment:
        """Partial update; any status may follow any other."""
        appointment = self.get_appointment(appointment_id)
        placement = (appointment.doctor_id, appointment.start_time, appointment.end_time)
        
        for field, value in appointment_data.model_dump(exclude_unset=True).items():
            if value is None and field not in ("motif", "notes"):
                continue
            setattr(appointment, field, value)
        
        # Moving an appointment books the slot it lands in
        if (appointment.doctor_id, appointment.start_time, appointment.end_time) != placement:
            AvailabilityService(self.db).mark_booked(
                appointment.doctor_id,
                appointment.start_time,
                appointment.end_time
            )
        
        self.db.commit()
        self.db.refresh(appointment)
        return appointment
    
    def delete_appointment(self, appointment_id: int) -> None:
        appointment = self.get_appointment(appointment_id)
        self.db.delete(appointment)
        self.db.commit()
