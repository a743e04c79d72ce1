"""Mapping between wire JSON and domain entities.

Server side: envelopes become typed requests, posts become wire dicts.
Both sides: wire posts become domain posts again, and typed requests
become envelopes.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from nnntp.domain.error import InvalidFieldError
from nnntp.domain.model import Comment, Post
from nnntp.domain.value import PostId
from nnntp.protocol.envelope import PROTOCOL_KEY, RequestType
from nnntp.protocol.request import REQUEST_MODELS, NnntpRequest
from nnntp.protocol.wire import WireComment, WirePost


def decode_request(envelope: Mapping[str, Any], request_type: RequestType) -> NnntpRequest:
    """Build the typed request for a validated envelope.

    Args:
        envelope: Envelope that already passed validation
        request_type: Type returned by validation

    Returns:
        One of PostRequest, CommentRequest, ListRequest, NewUserRequest

    Raises:
        InvalidFieldError: If a present field has an unusable value
    """
    model = REQUEST_MODELS[request_type]
    try:
        return model.model_validate(envelope[PROTOCOL_KEY])
    except PydanticValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        raise InvalidFieldError(field, f"is invalid: {error['msg']}") from e


def encode_request(request: NnntpRequest) -> dict[str, Any]:
    """Wrap a typed request in an envelope.

    Args:
        request: Typed request

    Returns:
        Request body with the payload under the protocol key
    """
    return {PROTOCOL_KEY: request.model_dump(mode="json")}


def post_to_wire(post: Post) -> WirePost:
    """Convert a Post domain model to its wire schema."""
    return WirePost(
        id=post.id,
        group_name=post.group,
        subject=post.subject,
        body=post.body,
        author=post.author,
        author_email=post.author_email,
        comments=[
            WireComment(
                body=comment.body,
                author=comment.author,
                author_email=comment.author_email,
            )
            for comment in post.comments
        ],
    )


def encode_post(post: Post) -> dict[str, Any]:
    """Convert a Post domain model to wire JSON.

    Args:
        post: Post with its comments

    Returns:
        Dict with id, group_name, subject, body, author, author_email, comments
    """
    return post_to_wire(post).model_dump()


def encode_posts(posts: list[Post]) -> list[dict[str, Any]]:
    """Convert a listing to wire JSON, keeping its order."""
    return [encode_post(post) for post in posts]


def wire_to_post(wire: WirePost) -> Post:
    """Convert a wire post back to a Post domain model.

    Comments are not sent with a parent id; they take the enclosing post's.
    """
    post_id = PostId(wire.id)
    return Post(
        id=post_id,
        group=wire.group_name,
        subject=wire.subject,
        body=wire.body,
        author=wire.author,
        author_email=wire.author_email,
        comments=tuple(
            Comment(
                parent_id=post_id,
                body=comment.body,
                author=comment.author,
                author_email=comment.author_email,
            )
            for comment in wire.comments
        ),
    )


def decode_post(data: Any) -> Post:
    """Convert wire JSON to a Post domain model.

    Args:
        data: Decoded JSON for one post

    Returns:
        Post with its comments

    Raises:
        pydantic.ValidationError: If a field is missing or mistyped
    """
    return wire_to_post(WirePost.model_validate(data))
