from pydantic import Field, field_validator
from typing import Optional, List
import re

from .base import CamelModel
from ..core.security import UserRole
from ..core.permissions import Permission

HEX_COLOR = re.compile(r"^#[0-9a-fA-F]{6}$")

def check_color(value: Optional[str]) -> Optional[str]:
    if value is not None and not HEX_COLOR.match(value):
        raise ValueError("Color must be a hex value such as #3b82f6")
    return value

class UserLogin(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

class UserCreate(CamelModel):
    username: str = Field(..., min_length=1, max_length=150)
    password: str = Field(..., min_length=6, max_length=72)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    role: UserRole
    is_admin: bool = False
    is_active: bool = True
    # None means "use the role defaults"
    permissions: Optional[List[Permission]] = None
    color: Optional[str] = None
    
    @field_validator("color")
    @classmethod
    def validate_color(cls, value):
        return check_color(value)

class UserUpdate(CamelModel):
    username: Optional[str] = Field(None, min_length=1, max_length=150)
    password: Optional[str] = Field(None, min_length=6, max_length=72)
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    role: Optional[UserRole] = None
    is_admin: Optional[bool] = None
    is_active: Optional[bool] = None
    permissions: Optional[List[Permission]] = None
    color: Optional[str] = None
    
    @field_validator("color")
    @classmethod
    def validate_color(cls, value):
        return check_color(value)

class UserResponse(CamelModel):
    id: int
    username: str
    first_name: str
    last_name: str
    role: UserRole
    is_admin: bool
    is_active: bool
    permissions: List[str] = []
    color: Optional[str] = None

class MessageResponse(CamelModel):
    message: str
