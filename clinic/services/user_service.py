from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from ..models.user import User
from ..core.errors import BadRequestError, NotFoundError
from ..core.permissions import default_permissions, normalize_permissions
from ..core.security import UserRole, get_password_hash
from ..schemas.auth import UserCreate, UserUpdate

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, db: Session):
        self.db = db
    
    def list_users(self) -> List[User]:
        return self.db.query(User).order_by(User.id).all()
    
    def list_doctors(self) -> List[User]:
        return self.db.query(User).filter(
            User.role == UserRole.DOCTOR,
            User.is_active == True
        ).order_by(User.last_name, User.first_name).all()
    
    def get_user(self, user_id: int) -> User:
        user = self.db.query(User).filter(User.id == user_id).first()
        if not user:
            raise NotFoundError("User", user_id)
        return user
    
    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.query(User).filter(User.username == username).first()
    
    def create_user(self, user_data: UserCreate) -> User:
        """Create a user; permissions default to those of the role."""
        if self.get_by_username(user_data.username):
            raise BadRequestError("Username already exists")
        
        if user_data.permissions is None:
            permissions = default_permissions(user_data.role)
        else:
            permissions = normalize_permissions(user_data.permissions)
        
        user = User(
            username=user_data.username,
            password_hash=get_password_hash(user_data.password),
            first_name=user_data.first_name,
            last_name=user_data.last_name,
            role=user_data.role,
            is_admin=user_data.is_admin,
            is_active=user_data.is_active,
            permissions=permissions,
            color=user_data.color,
        )
        
        self.db.add(user)
        self._commit_unique_username()
        self.db.refresh(user)
        
        logger.info(f"Created user {user.id} ({user.username}, role={user.role.value})")
        return user
    
    def update_user(self, user_id: int, user_data: UserUpdate) -> User:
        """Apply a partial update."""
        user = self.get_user(user_id)
        changes = user_data.model_dump(exclude_unset=True)
        
        username = changes.pop("username", None)
        if username is not None and username != user.username:
            if self.get_by_username(username):
                raise BadRequestError("Username already exists")
            user.username = username
        
        password = changes.pop("password", None)
        if password is not None:
            user.password_hash = get_password_hash(password)
        
        permissions = changes.pop("permissions", None)
        if permissions is not None:
            user.permissions = normalize_permissions(permissions)
        
        for field, value in changes.items():
            if value is None and field in ("first_name", "last_name", "role", "is_admin", "is_active"):
                continue
            setattr(user, field, value)
        
        self._commit_unique_username()
        self.db.refresh(user)
        
        logger.info(f"Updated user {user.id}: {sorted(user_data.model_dump(exclude_unset=True))}")
        return user
    
    def delete_user(self, user_id: int) -> None:
        user = self.get_user(user_id)
        self.db.delete(user)
        self.db.commit()
        logger.info(f"Deleted user {user_id}")
    
    def ensure_admin(self, username: str, password: str) -> Optional[User]:
        """Create the administrator account unless the username is taken."""
        if self.get_by_username(username):
            logger.info(f"User {username} already exists, nothing to do")
            return None
        
        return self.create_user(UserCreate(
            username=username,
            password=password,
            first_name="Admin",
            last_name="Admin",
            role=UserRole.ADMIN,
            is_admin=True,
        ))
    
    def _commit_unique_username(self) -> None:
        """Commit, reporting a username taken by a concurrent request as 400."""
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise BadRequestError("Username already exists")
