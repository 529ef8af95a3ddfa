"""Comment entity.

Comments belong to a post and may reply to another comment on the same post.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    ``child`` lists the direct replies, derived from their ``parent_id``.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    child: list[CommentId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
