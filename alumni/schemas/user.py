from typing import Optional
from pydantic import BaseModel
from alumni.models.user import User


class UserRead(BaseModel):
    id: int
    name: str
    bio: Optional[str]
    fun_fact: Optional[str]
    picture_url: Optional[str]
    status: Optional[str]


def user_to_read(user: User) -> UserRead:
    return UserRead(
        id=user.id,
        name=user.name,
        bio=user.bio,
        fun_fact=user.fun_fact,
        picture_url=user.picture_url,
        status=user.status,
    )
