"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .comment_service import CommentService
from .post_service import PostService
from .session_service import SessionService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "AuthService",
    "CommentService",
    "PostService",
    "Service",
    "SessionService",
    "UserService",
    "VoteService",
]
