from datetime import date
from pydantic import EmailStr, Field
from typing import Optional

from .base import CamelModel

class PatientCreate(CamelModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    date_of_birth: date
    phone: str = Field(..., min_length=1, max_length=30)
    email: EmailStr
    notes: Optional[str] = None

class PatientUpdate(CamelModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    date_of_birth: Optional[date] = None
    phone: Optional[str] = Field(None, min_length=1, max_length=30)
    email: Optional[EmailStr] = None
    notes: Optional[str] = None

class PatientResponse(CamelModel):
    id: int
    first_name: str
    last_name: str
    date_of_birth: date
    phone: str
    email: str
    notes: Optional[str] = None
