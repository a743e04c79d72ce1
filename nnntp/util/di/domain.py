"""Domain layer DI providers."""

from dishka import Scope, provide

from nnntp.config import AuthSettings
from nnntp.domain.repository import CommentRepository, PostRepository, UserRepository
from nnntp.domain.service import (
    AuthService,
    CommentService,
    PasswordHasher,
    PostService,
)
from nnntp.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped so they can sit on top of either
    the shared SQL repositories or per-request in-memory ones.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, user_repository: UserRepository, password_hasher: PasswordHasher
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(
            user_repository=user_repository, password_hasher=password_hasher
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, comment_repository=comment_repository
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        auth_settings: AuthSettings,
    ) -> CommentService:
        """Provide comment domain service with the configured parent policy."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            policy=auth_settings.comment_policy,
        )
