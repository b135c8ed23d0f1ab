from typing import List, Optional
from pydantic import BaseModel, Field
from alumni.models.group import Group


class GroupCreate(BaseModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None


class GroupRead(BaseModel):
    id: int
    name: str
    description: Optional[str]
    members: List[int]


def group_from_create(payload: GroupCreate) -> Group:
    return Group(name=payload.name, description=payload.description)


def group_to_read(group: Group) -> GroupRead:
    return GroupRead(
        id=group.id,
        name=group.name,
        description=group.description,
        members=[m.user_id for m in group.memberships],
    )
