"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from inkwell.domain.model.common import DomainModel, utcnow
from inkwell.domain.value import PostId, UserId, Username


class User(DomainModel):
    """User aggregate root.

    ``posts`` and ``score`` are read-only views derived by the repository:
    the posts this user authored and the posts this user voted on.
    """

    id: UserId
    username: Username
    password_hash: str = Field(repr=False)
    email: Optional[str] = None
    posts: list[PostId] = Field(default_factory=list)
    score: list[PostId] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
