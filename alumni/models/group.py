from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from alumni.core.db import Base

class Group(Base):
    __tablename__ = "groups"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    # Связь многие ко многим с пользователями
    memberships = relationship(
        "GroupMembership",
        back_populates="group",
        cascade="all, delete-orphan",
        order_by="GroupMembership.user_id",
    )
    posts = relationship("Post", back_populates="group")
