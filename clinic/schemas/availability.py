from datetime import datetime
from pydantic import Field, field_validator, model_validator
from typing import Optional

from .base import CamelModel, UtcDateTime
from ..services.scheduling import default_end_time, to_utc_naive

class AvailabilityCreate(CamelModel):
    doctor_id: int = Field(..., gt=0)
    start_time: datetime
    # Omitted end time follows the creation-form default
    end_time: Optional[datetime] = None
    
    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_time(cls, value):
        return to_utc_naive(value)
    
    @model_validator(mode="after")
    def fill_end_time(self):
        if self.end_time is None:
            self.end_time = default_end_time(self.start_time)
        return self

class AvailabilityUpdate(CamelModel):
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    is_booked: Optional[bool] = None
    
    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_time(cls, value):
        return to_utc_naive(value)

class AvailabilityResponse(CamelModel):
    id: int
    doctor_id: int
    start_time: UtcDateTime
    end_time: UtcDateTime
    is_booked: bool
