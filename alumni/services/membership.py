"""
Хранилище связей Group↔User и Topic↔User.

Функции только читают и изменяют сессию (flush), фиксацию транзакции
выполняет вызывающий сервис (через commit_join или сам). Существование
группы/темы проверяет тоже он.
"""
import logging
from typing import Callable
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from alumni.models.group_membership import GroupMembership
from alumni.models.topic_subscription import TopicSubscription

logger = logging.getLogger(__name__)


def add_member(db: Session, group_id: int, user_id: int) -> bool:
    """Добавляет участника. Возвращает False, если связь уже была."""
    if has_member(db, group_id, user_id):
        return False
    db.add(GroupMembership(group_id=group_id, user_id=user_id))
    db.flush()
    return True


def has_member(db: Session, group_id: int, user_id: int) -> bool:
    return db.get(GroupMembership, (group_id, user_id)) is not None


def members_of(db: Session, group_id: int) -> set[int]:
    rows = db.execute(select(GroupMembership.user_id).where(GroupMembership.group_id == group_id))
    return set(rows.scalars())


def groups_of(db: Session, user_id: int) -> set[int]:
    rows = db.execute(select(GroupMembership.group_id).where(GroupMembership.user_id == user_id))
    return set(rows.scalars())


def add_subscriber(db: Session, topic_id: int, user_id: int) -> bool:
    """Подписывает пользователя на тему. Возвращает False, если подписка уже была."""
    if has_subscriber(db, topic_id, user_id):
        return False
    db.add(TopicSubscription(topic_id=topic_id, user_id=user_id))
    db.flush()
    return True


def has_subscriber(db: Session, topic_id: int, user_id: int) -> bool:
    return db.get(TopicSubscription, (topic_id, user_id)) is not None


def subscribers_of(db: Session, topic_id: int) -> set[int]:
    rows = db.execute(select(TopicSubscription.user_id).where(TopicSubscription.topic_id == topic_id))
    return set(rows.scalars())


def topics_of(db: Session, user_id: int) -> set[int]:
    rows = db.execute(select(TopicSubscription.topic_id).where(TopicSubscription.user_id == user_id))
    return set(rows.scalars())


def commit_join(db: Session, insert: Callable[[], bool], exists: Callable[[], bool]) -> None:
    """
    Фиксирует вставку связи.
    Если параллельный запрос успел вставить ту же пару, ловим нарушение
    уникальности и считаем вступление успешным.
    """
    try:
        insert()
        db.commit()
    except IntegrityError:
        db.rollback()
        if not exists():
            raise
        logger.info("Связь уже создана параллельным запросом")
