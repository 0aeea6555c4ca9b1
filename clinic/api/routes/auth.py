from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from typing import Optional

from ...core.config import settings
from ...core.database import get_db, get_redis
from ...api.deps import get_current_user, get_session_id
from ...services.auth_service import AuthService
from ...schemas.auth import UserLogin, UserResponse, MessageResponse
from ...models.user import User

router = APIRouter(tags=["Authentication"])

@router.post("/login", response_model=UserResponse)
async def login(
    login_data: UserLogin,
    response: Response,
    db: Session = Depends(get_db),
    redis_client = Depends(get_redis)
):
    """Check credentials and open a session."""
    auth_service = AuthService(db, redis_client)
    user = auth_service.authenticate_user(login_data)
    session_id = auth_service.open_session(user)
    
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=session_id,
        max_age=settings.SESSION_TTL_SECONDS,
        httponly=True,
        samesite="lax",
        secure=settings.SESSION_COOKIE_SECURE,
    )
    return user

@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    session_id: Optional[str] = Depends(get_session_id),
    db: Session = Depends(get_db),
    redis_client = Depends(get_redis)
):
    """Close the current session, if any."""
    AuthService(db, redis_client).close_session(session_id)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logged out"}

@router.get("/user", response_model=UserResponse)
async def get_current_user_info(
    current_user: User = Depends(get_current_user)
):
    """Get current user information."""
    return current_user
