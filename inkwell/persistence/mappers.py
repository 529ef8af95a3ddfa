"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping. Derived lists (a
user's posts and votes, a post's tags, votes and comments, a comment's
replies) are loaded separately and passed in.
"""

from typing import Any, Dict, Optional, Sequence
from uuid import UUID

from inkwell.domain.model import Comment, Post, User, UserSession
from inkwell.domain.value import CommentId, PostId, Slug, TagName, UserId, Username


def _uuid(value: Any) -> UUID:
    """Accept a UUID or its string form (asyncpg returns UUID objects)."""
    return UUID(value) if isinstance(value, str) else value


def row_to_user(
    row: Dict[str, Any],
    posts: Sequence[UUID] = (),
    score: Sequence[UUID] = (),
) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict
        posts: IDs of posts the user authored
        score: IDs of posts the user voted on

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        password_hash=row["password_hash"],
        email=row.get("email"),
        posts=[PostId(_uuid(post_id)) for post_id in posts],
        score=[PostId(_uuid(post_id)) for post_id in score],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update (derived lists excluded)
    """
    return user.model_dump(exclude={"posts", "score"})


def row_to_post(
    row: Dict[str, Any],
    tags: Sequence[str] = (),
    votes: Sequence[UUID] = (),
    comments: Sequence[UUID] = (),
) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict
        tags: Tag names in author order
        votes: IDs of users who voted on the post
        comments: IDs of the post's comments, oldest first

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        slug=Slug(row["slug"]),
        title=row["title"],
        content=row["content"],
        tags=[TagName(tag) for tag in tags],
        author_id=UserId(_uuid(row["author_id"])),
        views=row["views"],
        votes=[UserId(_uuid(user_id)) for user_id in votes],
        comments=[CommentId(_uuid(comment_id)) for comment_id in comments],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict for the posts table. Tags, votes and comments live in their own
        tables and are excluded.
    """
    return post.model_dump(exclude={"tags", "votes", "comments"})


def row_to_comment(
    row: Dict[str, Any], child: Sequence[UUID] = ()
) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict
        child: IDs of direct replies

    Returns:
        Comment domain model
    """
    parent_id: Optional[UUID] = row.get("parent_id")
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(parent_id)) if parent_id else None,
        child=[CommentId(_uuid(child_id)) for child_id in child],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return comment.model_dump(exclude={"child"})


def row_to_session(row: Dict[str, Any]) -> UserSession:
    """Convert database row to UserSession domain model."""
    return UserSession(
        token=row["token"],
        user_id=UserId(_uuid(row["user_id"])),
        username=Username(row["username"]),
        email=row.get("email"),
        created_at=row["created_at"],
        expires_at=row["expires_at"],
    )


def session_to_dict(session: UserSession) -> Dict[str, Any]:
    """Convert UserSession domain model to database dict."""
    return session.model_dump()
