"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from inkwell.domain.model.comment import Comment
from inkwell.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Implementations fill the derived ``child`` list on read.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, oldest first.

        Args:
            post_id: The post ID

        Returns:
            Comments on the post, replies included
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment and its replies.

        Returns:
            True if a comment was deleted, False if it did not exist
        """
        pass
