"""NNNTP client.

Encodes requests, sends them over HTTP with httpx and decodes the results.
"""

from typing import Any, Optional

import httpx
import logfire

from nnntp.client.error import (
    BadRequestError,
    MissingCredentialsError,
    TransportError,
    UnauthorizedError,
    UnknownServerError,
)
from nnntp.client.mapper import decode_detail, decode_listing, decode_post_id
from nnntp.client.model import PostListing, UserCredentials
from nnntp.config import Settings
from nnntp.domain.value import PostId
from nnntp.protocol.envelope import DEFAULT_AUTHOR_EMAIL, RequestType
from nnntp.protocol.mapper import encode_request
from nnntp.protocol.request import (
    AuthorPayload,
    CommentPayload,
    CommentRequest,
    ListRequest,
    NewUserRequest,
    NnntpRequest,
    ParentPayload,
    PostPayload,
    PostRequest,
)


class NnntpClient:
    """Client for an NNNTP server.

    Writes (post, comment) are made as the configured user; listing and
    registration need no user.

    Usage:
        user = UserCredentials(username="alice", password="secret")
        with NnntpClient("http://localhost:8000", user=user) as client:
            post_id = client.post("comp.lang.python", "Hello", "First post")
            client.comment(post_id, "Welcome")
            listing = client.list("comp.lang.python")
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        user: Optional[UserCredentials] = None,
        *,
        http_client: Optional[httpx.Client] = None,
        timeout: float = 10.0,
    ) -> None:
        """Initialize client.

        Args:
            base_url: Server URL, used when no http_client is given
            user: Account to write as
            http_client: Preconfigured client bound to the server
                (for example FastAPI's TestClient)
            timeout: Request timeout in seconds for the default client
        """
        self.user = user
        self._owns_http_client = http_client is None
        self.http_client = http_client or httpx.Client(
            base_url=base_url, timeout=timeout
        )

    @classmethod
    def from_settings(
        cls, settings: Settings, user: Optional[UserCredentials] = None
    ) -> "NnntpClient":
        """Create a client from the client section of the settings."""
        return cls(
            settings.client.base_url, user=user, timeout=settings.client.timeout
        )

    def __enter__(self) -> "NnntpClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this client created it."""
        if self._owns_http_client:
            self.http_client.close()

    def post(self, group: str, subject: str, body: str) -> PostId:
        """Post an article to a group.

        Returns:
            Id the server assigned to the post

        Raises:
            MissingCredentialsError: If no user is configured
            BadRequestError: On 400
            UnauthorizedError: On 401
            InvalidResponseError: If the response carries no id
        """
        request = PostRequest(
            group=group,
            post=PostPayload(subject=subject, body=body),
            author=self._author(),
        )
        response_body = self._send(RequestType.POST, request)
        return decode_post_id(response_body)

    def comment(self, parent_id: int, body: str) -> None:
        """Comment on a post.

        Raises:
            MissingCredentialsError: If no user is configured
            BadRequestError: On 400
            UnauthorizedError: On 401
        """
        request = CommentRequest(
            parent=ParentPayload(id=parent_id),
            comment=CommentPayload(body=body),
            author=self._author(),
        )
        self._send(RequestType.COMMENT, request)

    def list(self, group: str) -> PostListing:
        """List the posts of a group with their comments.

        Raises:
            BadRequestError: On 400
            InvalidResponseError: If any post or comment is malformed
        """
        response_body = self._send(RequestType.LIST, ListRequest(group=group))
        return decode_listing(response_body)

    def register_user(self, username: str, password: str) -> None:
        """Register a new account.

        Raises:
            BadRequestError: On 400, including an existing username
        """
        request = NewUserRequest(username=username, password=password)
        self._send(RequestType.NEW, request)

    def _author(self) -> AuthorPayload:
        if self.user is None:
            raise MissingCredentialsError()
        return AuthorPayload(
            username=self.user.username,
            password=self.user.password,
            email=self.user.email or DEFAULT_AUTHOR_EMAIL,
        )

    def _send(self, request_type: RequestType, request: NnntpRequest) -> Any:
        """Send a request and return the decoded body of a 200 response."""
        try:
            response = self.http_client.post(
                request_type.path, json=encode_request(request)
            )
        except httpx.HTTPError as e:
            logfire.error(
                "NNNTP request failed", path=request_type.path, error=str(e)
            )
            raise TransportError(str(e)) from e

        try:
            body = response.json()
        except ValueError:
            body = None

        status_code = response.status_code
        if status_code == 200:
            return body

        detail = decode_detail(body)
        logfire.warn(
            "NNNTP request rejected",
            path=request_type.path,
            status_code=status_code,
            detail=detail,
        )
        if status_code == 400:
            raise BadRequestError(status_code, detail)
        if status_code == 401:
            raise UnauthorizedError(status_code, detail)
        raise UnknownServerError(status_code, detail)
