from sqlalchemy.orm import Session
from datetime import datetime
from typing import Optional
import logging

from ..models.user import User
from ..core.errors import AuthenticationError
from ..core.security import (
    verify_password, generate_session_id, store_session,
    read_session, revoke_session
)
from ..schemas.auth import UserLogin

logger = logging.getLogger(__name__)

class AuthService:
    def __init__(self, db: Session, redis_client):
        self.db = db
        self.redis = redis_client
    
    def authenticate_user(self, login_data: UserLogin) -> User:
        """Check credentials and return the matching active user."""
        user = self.db.query(User).filter(
            User.username == login_data.username
        ).first()
        
        if (
            not user
            or not user.is_active
            or not verify_password(login_data.password, user.password_hash)
        ):
            logger.warning(f"Authentication failed for user: {login_data.username}")
            raise AuthenticationError("Invalid credentials")
        
        user.last_login = datetime.utcnow()
        self.db.commit()
        self.db.refresh(user)
        
        logger.info(f"User {user.id} authenticated")
        return user
    
    def open_session(self, user: User) -> str:
        """Create a server-side session for the user and return its id."""
        session_id = generate_session_id()
        store_session(self.redis, session_id, user.id)
        return session_id
    
    def close_session(self, session_id: Optional[str]) -> None:
        revoke_session(self.redis, session_id)
    
    def get_session_user(self, session_id: Optional[str]) -> User:
        """Resolve the user attached to a session cookie."""
        user_id = read_session(self.redis, session_id)
        if user_id is None:
            raise AuthenticationError("Not authenticated")
        
        user = self.db.query(User).filter(User.id == user_id).first()
        if not user:
            revoke_session(self.redis, session_id)
            raise AuthenticationError("Not authenticated")
        
        if not user.is_active:
            raise AuthenticationError("User account is deactivated")
        
        return user
