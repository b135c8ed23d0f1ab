from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session
from alumni.core.db import get_db
from alumni.models.user import User
from alumni.api.auth import get_current_user
from alumni.schemas.topic import TopicCreate, TopicRead, topic_from_create, topic_to_read
from alumni.services import topics as topic_service
from alumni.services.outcomes import JoinOutcome

router = APIRouter()


@router.get("", response_model=List[TopicRead])
def get_all_topics(db: Session = Depends(get_db)):
    """Все темы открыты, авторизация не нужна."""
    return [topic_to_read(t) for t in topic_service.get_all_topics(db)]


@router.get("/{topic_id}", response_model=TopicRead)
def get_topic(topic_id: int, db: Session = Depends(get_db)):
    topic = topic_service.get_topic(db, topic_id)
    if topic is None:
        raise HTTPException(status_code=404, detail="Тема не найдена")
    return topic_to_read(topic)


@router.post("", response_model=TopicRead, status_code=status.HTTP_201_CREATED)
def create_topic(
    payload: TopicCreate,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    topic = topic_service.create_topic(db, topic_from_create(payload), current_user)
    response.headers["Location"] = str(request.url_for("get_topic", topic_id=topic.id))
    return topic_to_read(topic)


@router.post("/{topic_id}/join", status_code=status.HTTP_200_OK)
def join_topic(
    topic_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Подписывает текущего пользователя на тему."""
    if topic_service.join_topic(db, topic_id, current_user) is JoinOutcome.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Тема не найдена")

    return Response(status_code=status.HTTP_200_OK)
