from typing import List, Optional
from pydantic import BaseModel, Field
from alumni.models.topic import Topic


class TopicCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None


class TopicRead(BaseModel):
    id: int
    name: str
    description: Optional[str]
    subscribers: List[int]
    posts: List[int]


def topic_from_create(payload: TopicCreate) -> Topic:
    return Topic(name=payload.name, description=payload.description)


def topic_to_read(topic: Topic) -> TopicRead:
    return TopicRead(
        id=topic.id,
        name=topic.name,
        description=topic.description,
        subscribers=[s.user_id for s in topic.subscriptions],
        posts=[p.id for p in topic.posts],
    )
