"""Application layer DI providers."""

from dishka import Scope, provide

from nnntp.application.usecase.comment import CreateCommentUseCase
from nnntp.application.usecase.post import CreatePostUseCase, ListPostsUseCase
from nnntp.application.usecase.user import RegisterUserUseCase
from nnntp.domain.service import AuthService, CommentService, PostService
from nnntp.interface.dispatcher import Dispatcher
from nnntp.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_register_user_use_case(
        self, auth_service: AuthService
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(auth_service=auth_service)

    @provide(scope=Scope.REQUEST)
    def get_create_post_use_case(
        self, auth_service: AuthService, post_service: PostService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(auth_service=auth_service, post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, auth_service: AuthService, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            auth_service=auth_service, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_dispatcher(
        self,
        register_user: RegisterUserUseCase,
        create_post: CreatePostUseCase,
        create_comment: CreateCommentUseCase,
        list_posts: ListPostsUseCase,
    ) -> Dispatcher:
        """Provide the request dispatcher."""
        return Dispatcher(
            register_user=register_user,
            create_post=create_post,
            create_comment=create_comment,
            list_posts=list_posts,
        )
