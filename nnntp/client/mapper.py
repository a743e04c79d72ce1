"""Decoding of server responses into client results."""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from nnntp.client.error import InvalidResponseError
from nnntp.client.model import PostListing
from nnntp.domain.value import PostId
from nnntp.protocol.envelope import CONTENT_KEY, NO_POSTS_GROUP, PROTOCOL_KEY
from nnntp.protocol.mapper import decode_post


def decode_listing(body: Any) -> PostListing:
    """Decode a list response.

    Args:
        body: Decoded response body

    Returns:
        Listing with every post and comment

    Raises:
        InvalidResponseError: If the post array is missing or any post or
            comment in it is malformed
    """
    if not isinstance(body, dict) or not isinstance(body.get(PROTOCOL_KEY), list):
        raise InvalidResponseError(f"Response has no {PROTOCOL_KEY} post list")

    try:
        posts = [decode_post(item) for item in body[PROTOCOL_KEY]]
    except PydanticValidationError as e:
        raise InvalidResponseError(f"Malformed post in listing: {e}") from e

    group = posts[0].group if posts else NO_POSTS_GROUP
    return PostListing(group=group, posts=posts)


def decode_post_id(body: Any) -> PostId:
    """Decode the generated id from a post response.

    Raises:
        InvalidResponseError: If the body has no integer id
    """
    post_id = body.get("id") if isinstance(body, dict) else None
    if not isinstance(post_id, int) or isinstance(post_id, bool):
        raise InvalidResponseError("Response has no post id")
    return PostId(post_id)


def decode_detail(body: Any) -> str | None:
    """Extract the human-readable message from any response body."""
    if isinstance(body, dict) and isinstance(body.get(CONTENT_KEY), str):
        return body[CONTENT_KEY]
    return None
