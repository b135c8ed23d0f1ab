from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from alumni.core.db import get_db
from alumni.models.user import User
from alumni.api.auth import get_current_user
from alumni.schemas.user import UserRead, user_to_read
from alumni.services.users import get_user

router = APIRouter()


@router.get("", response_model=UserRead)
def get_me(current_user: User = Depends(get_current_user)):
    """Профиль текущего пользователя"""
    return user_to_read(current_user)


@router.get("/{user_id}", response_model=UserRead)
def get_user_profile(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    user = get_user(db, user_id)
    if user is None:
        raise HTTPException(status_code=404, detail="Пользователь не найден")
    return user_to_read(user)
