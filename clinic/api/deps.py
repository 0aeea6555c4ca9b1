from fastapi import Depends, Request
from sqlalchemy.orm import Session
from typing import Optional

from ..core.config import settings
from ..core.database import get_db, get_redis
from ..core.errors import AuthorizationError
from ..core.permissions import Permission, has_permission
from ..models.user import User
from ..services.auth_service import AuthService

def get_session_id(request: Request) -> Optional[str]:
    """Read the session id from its cookie."""
    return request.cookies.get(settings.SESSION_COOKIE_NAME)

async def get_current_user(
    session_id: Optional[str] = Depends(get_session_id),
    db: Session = Depends(get_db),
    redis_client = Depends(get_redis)
) -> User:
    """Get the authenticated user attached to the session, or fail with 401."""
    return AuthService(db, redis_client).get_session_user(session_id)

def require_permission(*required: Permission):
    """Create a dependency that requires every listed permission.

    Authentication is resolved first, so anonymous requests get 401 before
    any permission is looked at.
    """
    async def permission_checker(
        current_user: User = Depends(get_current_user)
    ) -> User:
        missing = [p.value for p in required if not has_permission(current_user, p)]
        if missing:
            raise AuthorizationError(
                f"Missing permission: {', '.join(missing)}"
            )
        return current_user
    
    return permission_checker

async def get_admin_user(
    current_user: User = Depends(get_current_user)
) -> User:
    """Require the administrator flag."""
    if not current_user.is_admin:
        raise AuthorizationError("Admin access required")
    return current_user
