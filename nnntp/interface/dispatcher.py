"""Request dispatcher.

Turns a decoded request envelope into a protocol response. Each request
runs synchronously from validation to encoding and stops at the first
failure; every failure becomes a status code and a message.
"""

from collections.abc import Callable
from typing import Any

import logfire
from pydantic import BaseModel

from nnntp.application.usecase.comment import CreateCommentRequest, CreateCommentUseCase
from nnntp.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from nnntp.application.usecase.user import RegisterUserRequest, RegisterUserUseCase
from nnntp.domain.error import (
    AuthenticationError,
    DomainError,
    DuplicateUserError,
    RequestValidationError,
)
from nnntp.domain.value import PostId
from nnntp.protocol.envelope import PROTOCOL_KEY, RequestType, response_body
from nnntp.protocol.mapper import decode_request, encode_posts
from nnntp.protocol.request import (
    CommentRequest,
    ListRequest,
    NewUserRequest,
    NnntpRequest,
    PostRequest,
)
from nnntp.protocol.validator import validate

STATUS_OK = 200
STATUS_BAD_REQUEST = 400
STATUS_UNAUTHORIZED = 401


class ProtocolResponse(BaseModel):
    """Status code and body to send back."""

    status_code: int
    body: dict[str, Any]


def _bad_request(error: RequestValidationError) -> ProtocolResponse:
    return ProtocolResponse(
        status_code=STATUS_BAD_REQUEST, body=response_body(f"bad request - {error}")
    )


class Dispatcher:
    """Routes validated requests to their use cases.

    The request path selects the operation. The envelope's own type must
    agree with it.
    """

    def __init__(
        self,
        register_user: RegisterUserUseCase,
        create_post: CreatePostUseCase,
        create_comment: CreateCommentUseCase,
        list_posts: ListPostsUseCase,
    ) -> None:
        """Initialize dispatcher.

        Args:
            register_user: Registration use case
            create_post: Create post use case
            create_comment: Create comment use case
            list_posts: List posts use case
        """
        self.register_user = register_user
        self.create_post = create_post
        self.create_comment = create_comment
        self.list_posts = list_posts

        self._handlers: dict[
            RequestType, Callable[[Any], ProtocolResponse]
        ] = {
            RequestType.NEW: self._handle_new,
            RequestType.POST: self._handle_post,
            RequestType.COMMENT: self._handle_comment,
            RequestType.LIST: self._handle_list,
        }

    def dispatch(self, operation: RequestType, envelope: Any) -> ProtocolResponse:
        """Handle one request envelope.

        Args:
            operation: Operation selected by the request path
            envelope: Decoded request body

        Returns:
            Response to send
        """
        with logfire.span("dispatcher.dispatch", path=operation.path) as span:
            try:
                request_type = validate(envelope, expected=operation)
                request: NnntpRequest = decode_request(envelope, request_type)
            except RequestValidationError as e:
                logfire.warn("Invalid request", path=operation.path, error=str(e))
                response = _bad_request(e)
            else:
                response = self._handlers[request_type](request)

            span.set_attribute("status_code", response.status_code)
            return response

    def _handle_new(self, request: NewUserRequest) -> ProtocolResponse:
        try:
            self.register_user.execute(
                RegisterUserRequest(username=request.username, password=request.password)
            )
        except DuplicateUserError as e:
            return ProtocolResponse(
                status_code=STATUS_BAD_REQUEST, body=response_body(str(e))
            )
        except DomainError as e:
            return self._failure(e, "Failed to create user")

        return ProtocolResponse(status_code=STATUS_OK, body=response_body("User created"))

    def _handle_post(self, request: PostRequest) -> ProtocolResponse:
        try:
            result = self.create_post.execute(
                CreatePostRequest(
                    group=request.group,
                    subject=request.post.subject,
                    body=request.post.body,
                    username=request.author.username,
                    password=request.author.password,
                    email=request.author.email,
                )
            )
        except DomainError as e:
            return self._failure(e, "Failed to post")

        return ProtocolResponse(
            status_code=STATUS_OK, body=response_body("Posted OK", id=result.post_id)
        )

    def _handle_comment(self, request: CommentRequest) -> ProtocolResponse:
        try:
            self.create_comment.execute(
                CreateCommentRequest(
                    parent_id=PostId(request.parent.id),
                    body=request.comment.body,
                    username=request.author.username,
                    password=request.author.password,
                    email=request.author.email,
                )
            )
        except DomainError as e:
            return self._failure(e, "Failed to comment")

        return ProtocolResponse(
            status_code=STATUS_OK, body=response_body("Commented OK")
        )

    def _handle_list(self, request: ListRequest) -> ProtocolResponse:
        try:
            result = self.list_posts.execute(ListPostsRequest(group=request.group))
        except DomainError as e:
            return self._failure(e, "Failed to list")

        return ProtocolResponse(
            status_code=STATUS_OK,
            body=response_body("processed OK", **{PROTOCOL_KEY: encode_posts(result.posts)}),
        )

    @staticmethod
    def _failure(error: DomainError, message: str) -> ProtocolResponse:
        """Map a business failure to 401 or a generic 400."""
        if isinstance(error, AuthenticationError):
            logfire.warn("Authentication failed", error=str(error))
            return ProtocolResponse(
                status_code=STATUS_UNAUTHORIZED, body=response_body("Invalid user")
            )

        if isinstance(error, RequestValidationError):
            logfire.warn("Invalid request", error=str(error))
            return _bad_request(error)

        logfire.error(
            message, error=str(error), error_type=type(error).__name__
        )
        return ProtocolResponse(
            status_code=STATUS_BAD_REQUEST, body=response_body(message)
        )
