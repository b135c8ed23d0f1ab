from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel
from alumni.models.post import Post


class PostRead(BaseModel):
    id: int
    title: str
    body: str
    timestamp: datetime
    sender_id: int
    sender_name: str
    reply_parent_id: Optional[int]
    topic_id: Optional[int]
    group_id: Optional[int]
    replies: List[int]


def post_to_read(post: Post) -> PostRead:
    return PostRead(
        id=post.id,
        title=post.title,
        body=post.body,
        timestamp=post.timestamp,
        sender_id=post.sender_id,
        sender_name=post.sender.name,
        reply_parent_id=post.reply_parent_id,
        topic_id=post.topic_id,
        group_id=post.group_id,
        replies=[r.id for r in post.replies],
    )
