from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from typing import List

from ...core.database import get_db
from ...api.deps import get_admin_user, get_current_user
from ...services.user_service import UserService
from ...schemas.auth import UserCreate, UserUpdate, UserResponse

router = APIRouter(tags=["Users"])

@router.get("/admin/users", response_model=List[UserResponse], dependencies=[Depends(get_admin_user)])
async def list_users(db: Session = Depends(get_db)):
    """List all users (admin only)."""
    return UserService(db).list_users()

@router.post(
    "/admin/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_admin_user)]
)
async def create_user(user_data: UserCreate, db: Session = Depends(get_db)):
    """Create a user (admin only)."""
    return UserService(db).create_user(user_data)

@router.patch("/admin/users/{user_id}", response_model=UserResponse, dependencies=[Depends(get_admin_user)])
async def update_user(user_id: int, user_data: UserUpdate, db: Session = Depends(get_db)):
    """Partially update a user (admin only)."""
    return UserService(db).update_user(user_id, user_data)

@router.delete(
    "/admin/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(get_admin_user)]
)
async def delete_user(user_id: int, db: Session = Depends(get_db)):
    UserService(db).delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/doctors", response_model=List[UserResponse], dependencies=[Depends(get_current_user)])
async def list_doctors(db: Session = Depends(get_db)):
    """Active doctors, for scheduling pickers."""
    return UserService(db).list_doctors()
