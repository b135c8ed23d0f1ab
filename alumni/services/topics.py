import logging
from typing import List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from alumni.models.topic import Topic
from alumni.models.user import User
from alumni.services import membership
from alumni.services.outcomes import JoinOutcome

logger = logging.getLogger(__name__)


def get_all_topics(db: Session) -> List[Topic]:
    return db.query(Topic).order_by(Topic.id).all()


def get_topic(db: Session, topic_id: int) -> Optional[Topic]:
    return db.get(Topic, topic_id)


def topic_exists(db: Session, topic_id: int) -> bool:
    return get_topic(db, topic_id) is not None


def create_topic(db: Session, topic: Topic, creator: User) -> Topic:
    """
    Сохраняет новую тему.
    В отличие от групп, создатель на тему не подписывается.
    """
    db.add(topic)
    try:
        db.commit()
    except SQLAlchemyError:
        logger.exception(f"Не удалось создать тему '{topic.name}'")
        db.rollback()
        raise

    db.refresh(topic)
    logger.info(f"Тема {topic.id} создана пользователем {creator.id}")
    return topic


def join_topic(db: Session, topic_id: int, user: User) -> JoinOutcome:
    """Темы открытые: подписаться может любой пользователь, нужна только существующая тема."""
    if not topic_exists(db, topic_id):
        return JoinOutcome.NOT_FOUND

    membership.commit_join(
        db,
        lambda: membership.add_subscriber(db, topic_id, user.id),
        lambda: membership.has_subscriber(db, topic_id, user.id),
    )
    logger.info(f"Пользователь {user.id} подписан на тему {topic_id}")
    return JoinOutcome.JOINED
