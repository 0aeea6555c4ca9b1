from datetime import datetime
from pydantic import Field, field_validator, model_validator
from typing import Optional

from .base import CamelModel, UtcDateTime
from ..models.appointment import AppointmentStatus, AppointmentType
from ..services.scheduling import default_end_time, to_utc_naive

class AppointmentCreate(CamelModel):
    patient_id: int = Field(..., gt=0)
    doctor_id: int = Field(..., gt=0)
    start_time: datetime
    end_time: Optional[datetime] = None
    type: AppointmentType
    status: AppointmentStatus = AppointmentStatus.SCHEDULED
    motif: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = None
    
    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_time(cls, value):
        return to_utc_naive(value)
    
    @model_validator(mode="after")
    def fill_end_time(self):
        if self.end_time is None:
            self.end_time = default_end_time(self.start_time)
        return self

class AppointmentUpdate(CamelModel):
    patient_id: Optional[int] = Field(None, gt=0)
    doctor_id: Optional[int] = Field(None, gt=0)
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    type: Optional[AppointmentType] = None
    status: Optional[AppointmentStatus] = None
    motif: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = None
    
    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_time(cls, value):
        return to_utc_naive(value)

class AppointmentResponse(CamelModel):
    id: int
    patient_id: int
    doctor_id: int
    start_time: UtcDateTime
    end_time: UtcDateTime
    type: AppointmentType
    status: AppointmentStatus
    motif: Optional[str] = None
    notes: Optional[str] = None
