"""Post aggregate root."""

from datetime import datetime

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import CommentId, PostId, Slug, TagName, UserId


class Post(DomainModel):
    """Post aggregate root.

    ``votes`` (voting users) and ``comments`` (oldest first) are derived by
    the repository and ignored on save.
    """

    id: PostId
    slug: Slug
    title: str = Field(min_length=1, max_length=300)
    content: str = Field(min_length=1, max_length=100000)
    tags: list[TagName] = Field(default_factory=list)
    author_id: UserId
    views: int = Field(default=0, ge=0)
    votes: list[UserId] = Field(default_factory=list)
    comments: list[CommentId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
