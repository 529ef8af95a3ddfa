"""Response items shared by several use cases."""

from datetime import datetime

from pydantic import BaseModel

from inkwell.domain.model import Comment, Post, User, UserSession


class UserSummary(BaseModel):
    """Public identity of a user, as stored in the login session."""

    id: str
    username: str
    email: str | None

    @classmethod
    def from_session(cls, session: UserSession) -> "UserSummary":
        return cls(
            id=str(session.user_id),
            username=session.username.root,
            email=session.email,
        )


class UserItem(BaseModel):
    """User record with its derived post and vote lists. Never carries the password."""

    id: str
    username: str
    email: str | None
    posts: list[str]
    score: list[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserItem":
        return cls(
            id=str(user.id),
            username=user.username.root,
            email=user.email,
            posts=[str(post_id) for post_id in user.posts],
            score=[str(post_id) for post_id in user.score],
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class PostItem(BaseModel):
    """Post with its author populated."""

    id: str
    slug: str
    title: str
    content: str
    tags: list[str]
    views: int
    votes: list[str]
    comments: list[str]
    author_id: str
    author: UserItem | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post, author: User | None = None) -> "PostItem":
        return cls(
            id=str(post.id),
            slug=str(post.slug),
            title=post.title,
            content=post.content,
            tags=[tag.root for tag in post.tags],
            views=post.views,
            votes=[str(user_id) for user_id in post.votes],
            comments=[str(comment_id) for comment_id in post.comments],
            author_id=str(post.author_id),
            author=UserItem.from_user(author) if author else None,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class CommentItem(BaseModel):
    """Comment with its author populated."""

    id: str
    post_id: str
    content: str
    parent_id: str | None
    child: list[str]
    author_id: str
    author: UserItem | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(
        cls, comment: Comment, author: User | None = None
    ) -> "CommentItem":
        return cls(
            id=str(comment.id),
            post_id=str(comment.post_id),
            content=comment.content,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            child=[str(child_id) for child_id in comment.child],
            author_id=str(comment.author_id),
            author=UserItem.from_user(author) if author else None,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class PostPage(BaseModel):
    """One page of a post listing."""

    docs: list[PostItem]
    total: int
    limit: int
    page: int
    pages: int


class TagItem(BaseModel):
    """Tag with the number of posts carrying it."""

    name: str
    count: int
