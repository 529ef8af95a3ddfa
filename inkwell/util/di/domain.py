"""Domain layer DI providers."""

from dishka import Scope, provide

from inkwell.config import AuthSettings, ContentSettings
from inkwell.domain.repository import (
    CommentRepository,
    PostRepository,
    SessionRepository,
    UserRepository,
    VoteRepository,
)
from inkwell.domain.service import (
    AuthService,
    CommentService,
    PostService,
    SessionService,
    UserService,
    VoteService,
)
from inkwell.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_auth_service(
        self, user_service: UserService, auth_settings: AuthSettings
    ) -> AuthService:
        """Provide registration and password login service."""
        return AuthService(user_service=user_service, auth_settings=auth_settings)

    @provide
    def get_session_service(
        self, session_repository: SessionRepository, auth_settings: AuthSettings
    ) -> SessionService:
        """Provide server-side session service."""
        return SessionService(
            session_repository=session_repository, auth_settings=auth_settings
        )

    @provide
    def get_post_service(
        self, post_repository: PostRepository, content_settings: ContentSettings
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, content_settings=content_settings
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        user_service: UserService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            post_service=post_service,
            user_service=user_service,
        )
