from typing import Optional
from sqlalchemy.orm import Session
from alumni.models.group import Group
from alumni.models.post import Post
from alumni.models.user import User
from alumni.services import membership


def user_has_access(db: Session, group: Group, user: User) -> bool:
    """Доступ к группе есть только у её участников."""
    return membership.has_member(db, group.id, user.id)


def post_group(post: Post) -> Optional[Group]:
    """Группа, к которой относится ветка поста (ответы наследуют её от родителя)."""
    while post is not None:
        if post.group is not None:
            return post.group
        post = post.reply_parent
    return None
