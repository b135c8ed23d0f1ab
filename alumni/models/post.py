from sqlalchemy import Column, Integer, String, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from alumni.core.db import Base

class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    body = Column(String, nullable=False)
    timestamp = Column(DateTime, server_default=func.now())
    sender_id = Column(Integer, ForeignKey("users.id"), nullable=False)
    reply_parent_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=True)
    topic_id = Column(Integer, ForeignKey("topics.id", ondelete="SET NULL"), nullable=True)
    group_id = Column(Integer, ForeignKey("groups.id", ondelete="SET NULL"), nullable=True)

    sender = relationship("User", back_populates="posts")
    topic = relationship("Topic", back_populates="posts")
    group = relationship("Group", back_populates="posts")

    # Ветка ответов
    reply_parent = relationship("Post", remote_side=[id], back_populates="replies")
    replies = relationship("Post", back_populates="reply_parent", order_by="Post.id")
