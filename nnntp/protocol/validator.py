"""Structural validation of request envelopes.

Validation checks that fields are present, nothing more. Whether a present
value has a usable type is decided later, when the typed request is built.
"""

from collections.abc import Mapping
from typing import Any

import logfire

from nnntp.domain.error import MissingFieldError, UnknownRequestTypeError
from nnntp.protocol.envelope import PROTOCOL_KEY, RequestType

_AUTHOR_FIELDS = (
    ("author",),
    ("author", "username"),
    ("author", "password"),
    ("author", "email"),
)

# Checked in order, the first missing one is reported
REQUIRED_FIELDS: dict[RequestType, tuple[tuple[str, ...], ...]] = {
    RequestType.POST: (
        ("group",),
        ("post",),
        ("post", "subject"),
        ("post", "body"),
        *_AUTHOR_FIELDS,
    ),
    RequestType.COMMENT: (
        ("parent",),
        ("parent", "id"),
        ("comment",),
        ("comment", "body"),
        *_AUTHOR_FIELDS,
    ),
    RequestType.LIST: (("group",),),
    RequestType.NEW: (("username",), ("password",)),
}


def _has_field(payload: Mapping[str, Any], path: tuple[str, ...]) -> bool:
    node: Any = payload
    for key in path:
        if not isinstance(node, Mapping) or key not in node:
            return False
        node = node[key]
    return node is not None


def validate(envelope: Any, expected: RequestType | None = None) -> RequestType:
    """Check that an envelope has every field its request type needs.

    Args:
        envelope: Decoded request body
        expected: Operation selected by the request path, if any

    Returns:
        The request type named by the envelope

    Raises:
        MissingFieldError: If the protocol key or a required field is absent
        UnknownRequestTypeError: If the type is missing, unknown, or differs
            from the expected operation
    """
    if not isinstance(envelope, Mapping):
        raise MissingFieldError(PROTOCOL_KEY)

    payload = envelope.get(PROTOCOL_KEY)
    if not isinstance(payload, Mapping):
        raise MissingFieldError(PROTOCOL_KEY)

    raw_type = payload.get("type")
    if raw_type is None:
        raise UnknownRequestTypeError("type is required")

    try:
        request_type = RequestType(raw_type) if isinstance(raw_type, str) else None
    except ValueError:
        request_type = None

    if request_type is None:
        logfire.warn("Unknown request type", type=repr(raw_type))
        raise UnknownRequestTypeError()

    if expected is not None and request_type != expected:
        logfire.warn(
            "Request type does not match path",
            type=request_type.value,
            path=expected.path,
        )
        raise UnknownRequestTypeError(
            f"type {request_type.value} does not match {expected.path}"
        )

    for path in REQUIRED_FIELDS[request_type]:
        if not _has_field(payload, path):
            raise MissingFieldError(".".join(path))

    return request_type
