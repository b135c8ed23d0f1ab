from sqlalchemy import Column, Integer, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from alumni.core.db import Base

class TopicSubscription(Base):
    __tablename__ = "topic_subscription"

    topic_id = Column(Integer, ForeignKey("topics.id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    subscribed_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="topic_subscriptions")
    topic = relationship("Topic", back_populates="subscriptions")
