from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from alumni.core.db import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    # subject (sub) из токена Keycloak
    keycloak_id = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    bio = Column(String, nullable=True)
    fun_fact = Column(String, nullable=True)
    picture_url = Column(String, nullable=True)
    status = Column(String, nullable=True)

    # Связи многие ко многим с группами и темами
    group_memberships = relationship("GroupMembership", back_populates="user", cascade="all, delete-orphan")
    topic_subscriptions = relationship("TopicSubscription", back_populates="user", cascade="all, delete-orphan")

    posts = relationship("Post", back_populates="sender")
