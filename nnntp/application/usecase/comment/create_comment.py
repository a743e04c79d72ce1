"""Create comment use case."""

import logfire
from pydantic import BaseModel

from nnntp.application.usecase.base import BaseUseCase
from nnntp.domain.service import AuthService, CommentService
from nnntp.domain.value import PostId


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    parent_id: PostId
    body: str
    username: str
    password: str
    email: str


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    parent_id: PostId


class CreateCommentUseCase(
    BaseUseCase[CreateCommentRequest, CreateCommentResponse]
):
    """Use case for commenting on a post."""

    def __init__(
        self, auth_service: AuthService, comment_service: CommentService
    ) -> None:
        """Initialize create comment use case.

        Args:
            auth_service: Auth domain service
            comment_service: Comment domain service
        """
        self.auth_service = auth_service
        self.comment_service = comment_service

    def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Authenticate the author (nothing is written on failure)
        2. Store the comment (the service applies the parent policy)

        Raises:
            UnknownUserError: If the author does not exist
            InvalidUserError: If the password is wrong
            ParentPostNotFoundError: Under the strict policy, for a missing post
            StorageFailureError: If the store fails
        """
        with logfire.span("create_comment.execute", parent_id=request.parent_id):
            self.auth_service.authenticate(request.username, request.password)

            self.comment_service.create_comment(
                parent_id=request.parent_id,
                body=request.body,
                author=request.username,
                author_email=request.email,
            )
            return CreateCommentResponse(parent_id=request.parent_id)
