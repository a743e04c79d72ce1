"""Typed request models, one per request type.

The server builds these from validated envelopes and the client dumps them
to build envelopes, so both sides share one request shape.
"""

from typing import Annotated, Literal, Union

from pydantic import AfterValidator, BaseModel, Field

from nnntp.protocol.envelope import RequestType

# Range of a SQLite INTEGER column
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1


def _require_utf8(value: str) -> str:
    # JSON can carry lone surrogates, which no store or hash can take
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValueError("must be valid UTF-8 text") from e
    return value


Text = Annotated[str, AfterValidator(_require_utf8)]


class AuthorPayload(BaseModel):
    """Credentials and contact of the writing user."""

    username: Text
    password: Text
    email: Text


class PostPayload(BaseModel):
    """Article content."""

    subject: Text
    body: Text


class ParentPayload(BaseModel):
    """Reference to the post being commented on."""

    id: int = Field(ge=MIN_ID, le=MAX_ID)


class CommentPayload(BaseModel):
    """Comment content."""

    body: Text


class PostRequest(BaseModel):
    """Post an article to a group."""

    type: Literal["post"] = "post"
    group: Text
    post: PostPayload
    author: AuthorPayload


class CommentRequest(BaseModel):
    """Comment on an existing post."""

    type: Literal["comment"] = "comment"
    parent: ParentPayload
    comment: CommentPayload
    author: AuthorPayload


class ListRequest(BaseModel):
    """List the posts of a group."""

    type: Literal["list"] = "list"
    group: Text


class NewUserRequest(BaseModel):
    """Register an account."""

    type: Literal["new"] = "new"
    username: Text
    password: Text


NnntpRequest = Annotated[
    Union[PostRequest, CommentRequest, ListRequest, NewUserRequest],
    Field(discriminator="type"),
]

REQUEST_MODELS: dict[RequestType, type[BaseModel]] = {
    RequestType.POST: PostRequest,
    RequestType.COMMENT: CommentRequest,
    RequestType.LIST: ListRequest,
    RequestType.NEW: NewUserRequest,
}
