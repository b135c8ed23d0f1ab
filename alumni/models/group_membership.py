from sqlalchemy import Column, Integer, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from alumni.core.db import Base

class GroupMembership(Base):
    __tablename__ = "group_membership"

    # Составной первичный ключ: пара (группа, пользователь) уникальна
    group_id = Column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    joined_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="group_memberships")
    group = relationship("Group", back_populates="memberships")
