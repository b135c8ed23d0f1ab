from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from alumni.core.db import get_db
from alumni.models.post import Post
from alumni.models.user import User
from alumni.api.auth import get_current_user
from alumni.schemas.post import PostRead, post_to_read
from alumni.services.access import post_group, user_has_access

router = APIRouter()


@router.get("/{post_id}", response_model=PostRead)
def get_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Пост вместе с id ответов.
    Посты группы (и ответы в её ветках) видят только участники, посты тем открыты всем.
    """
    post = db.get(Post, post_id)
    if post is None:
        raise HTTPException(status_code=404, detail="Пост не найден")

    group = post_group(post)
    if group is not None and not user_has_access(db, group, current_user):
        raise HTTPException(status_code=403, detail="Нет доступа к группе")

    return post_to_read(post)
