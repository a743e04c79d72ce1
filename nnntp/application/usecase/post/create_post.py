"""Create post use case."""

import logfire
from pydantic import BaseModel

from nnntp.application.usecase.base import BaseUseCase
from nnntp.domain.service import AuthService, PostService
from nnntp.domain.value import PostId


class CreatePostRequest(BaseModel):
    """Create post request."""

    group: str
    subject: str
    body: str
    username: str
    password: str
    email: str


class CreatePostResponse(BaseModel):
    """Create post response."""

    post_id: PostId


class CreatePostUseCase(BaseUseCase[CreatePostRequest, CreatePostResponse]):
    """Use case for posting an article to a group."""

    def __init__(self, auth_service: AuthService, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            auth_service: Auth domain service
            post_service: Post domain service
        """
        self.auth_service = auth_service
        self.post_service = post_service

    def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Authenticate the author (nothing is written on failure)
        2. Insert the post and take the id from the insert

        Raises:
            UnknownUserError: If the author does not exist
            InvalidUserError: If the password is wrong
            StorageFailureError: If the store fails
        """
        with logfire.span("create_post.execute", group=request.group):
            self.auth_service.authenticate(request.username, request.password)

            post_id = self.post_service.create_post(
                group=request.group,
                subject=request.subject,
                body=request.body,
                author=request.username,
                author_email=request.email,
            )
            return CreatePostResponse(post_id=post_id)
