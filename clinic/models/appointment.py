from sqlalchemy import Column, Integer, String, DateTime, Text, Enum as SQLEnum
from sqlalchemy.sql import func
import enum

from ..core.database import Base

class AppointmentStatus(str, enum.Enum):
    SCHEDULED = "scheduled"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"

class AppointmentType(str, enum.Enum):
    CONSULTATION = "consultation"
    FOLLOW_UP = "follow-up"
    EMERGENCY = "emergency"

def _enum_values(enum_cls):
    return [member.value for member in enum_cls]

class Appointment(Base):
    __tablename__ = "appointments"
    
    id = Column(Integer, primary_key=True, index=True)
    
    # Not cross-checked against patients/users: booking is advisory
    patient_id = Column(Integer, nullable=False, index=True)
    doctor_id = Column(Integer, nullable=False, index=True)
    
    # Appointment details
    start_time = Column(DateTime, nullable=False, index=True)
    end_time = Column(DateTime, nullable=False)
    type = Column(SQLEnum(AppointmentType, values_callable=_enum_values), nullable=False)
    status = Column(
        SQLEnum(AppointmentStatus, values_callable=_enum_values),
        nullable=False,
        default=AppointmentStatus.SCHEDULED
    )
    motif = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)
    
    # Tracking
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
    
    def __repr__(self):
        return f"<Appointment(id={self.id}, patient_id={self.patient_id}, doctor_id={self.doctor_id}, start='{self.start_time}')>"
