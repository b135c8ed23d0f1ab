import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from alumni.models.group import Group
from alumni.models.group_membership import GroupMembership
from alumni.models.user import User
from alumni.services import access, membership
from alumni.services.outcomes import JoinOutcome
from alumni.services.users import get_user

logger = logging.getLogger(__name__)


def get_user_groups(db: Session, user: User) -> List[Group]:
    """Все группы, в которых состоит пользователь."""
    return (
        db.query(Group)
        .join(GroupMembership, GroupMembership.group_id == Group.id)
        .filter(GroupMembership.user_id == user.id)
        .order_by(Group.id)
        .all()
    )


def get_group(db: Session, group_id: int) -> Optional[Group]:
    return db.get(Group, group_id)


def group_exists(db: Session, group_id: int) -> bool:
    return get_group(db, group_id) is not None


def user_has_access(db: Session, group: Group, user: User) -> bool:
    return access.user_has_access(db, group, user)


def create_group(db: Session, group: Group, creator: User) -> Group:
    """
    Сохраняет новую группу и делает создателя её первым участником.
    Обе вставки идут в одной транзакции: при ошибке откатываем всё,
    группа без участников в БД не остаётся.
    """
    db.add(group)
    try:
        db.flush()
        membership.add_member(db, group.id, creator.id)
        db.commit()
    except SQLAlchemyError:
        logger.exception(f"Не удалось создать группу '{group.name}', откатываем транзакцию")
        db.rollback()
        raise

    db.refresh(group)
    logger.info(f"Группа {group.id} создана пользователем {creator.id}")
    return group


def join_group(
    db: Session,
    group_id: int,
    requesting_user: User,
    target_user_id: Optional[int] = None,
) -> JoinOutcome:
    """
    Добавляет пользователя в группу.

    Без target_user_id (None или 0) вступает сам requesting_user. Добавлять кого-либо
    (в том числе себя) может только текущий участник группы.
    """
    if not target_user_id:
        target = requesting_user
    else:
        target = get_user(db, target_user_id)
        if target is None:
            return JoinOutcome.INVALID_USER

    group = get_group(db, group_id)
    if group is None:
        return JoinOutcome.NOT_FOUND

    if not user_has_access(db, group, requesting_user):
        logger.warning(f"Пользователь {requesting_user.id} не состоит в группе {group_id}, вступление отклонено")
        return JoinOutcome.FORBIDDEN

    membership.commit_join(
        db,
        lambda: membership.add_member(db, group.id, target.id),
        lambda: membership.has_member(db, group.id, target.id),
    )
    logger.info(f"Пользователь {target.id} добавлен в группу {group.id} (пригласил {requesting_user.id})")
    return JoinOutcome.JOINED
