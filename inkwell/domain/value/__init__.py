"""Domain value objects for Inkwell."""

from inkwell.domain.value.identifiers import CommentId, PostId, UserId
from inkwell.domain.value.types import Slug, TagName, Username

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "Username",
    "TagName",
    "Slug",
]
