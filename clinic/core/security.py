from passlib.context import CryptContext
from typing import Optional
import secrets
from enum import Enum

from .config import settings

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

SESSION_KEY_PREFIX = "session:"

class UserRole(str, Enum):
    ADMIN = "admin"
    DOCTOR = "doctor"
    STAFF = "staff"

# Password utilities
def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)

def get_password_hash(password: str) -> str:
    """Generate password hash."""
    return pwd_context.hash(password)

# Session utilities
def generate_session_id() -> str:
    """Generate an opaque, unguessable session identifier."""
    return secrets.token_urlsafe(32)

def session_key(session_id: str) -> str:
    return f"{SESSION_KEY_PREFIX}{session_id}"

def store_session(redis_client, session_id: str, user_id: int) -> None:
    """Bind a session id to a user for the configured lifetime."""
    redis_client.setex(session_key(session_id), settings.SESSION_TTL_SECONDS, str(user_id))

def read_session(redis_client, session_id: Optional[str]) -> Optional[int]:
    """Return the user id bound to a session, or None if unknown or expired."""
    if not session_id:
        return None
    value = redis_client.get(session_key(session_id))
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None

def revoke_session(redis_client, session_id: Optional[str]) -> None:
    if session_id:
        redis_client.delete(session_key(session_id))
