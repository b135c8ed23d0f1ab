from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from alumni.core.db import Base

class Topic(Base):
    __tablename__ = "topics"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    subscriptions = relationship(
        "TopicSubscription",
        back_populates="topic",
        cascade="all, delete-orphan",
        order_by="TopicSubscription.user_id",
    )
    # Посты создаются в другом месте, здесь только чтение
    posts = relationship("Post", back_populates="topic", order_by="Post.id")
