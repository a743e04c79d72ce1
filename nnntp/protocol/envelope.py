"""Envelope constants shared by the server and the client.

Requests carry their payload under the protocol key:

    {"nnntp": {"type": "list", "group": "comp.lang.python"}}

Responses carry a human-readable ``content`` string plus any extra keys:

    {"content": "Posted OK", "id": 7}
    {"content": "processed OK", "nnntp": [ ...posts... ]}
"""

from enum import Enum
from typing import Any

PROTOCOL_KEY = "nnntp"
CONTENT_KEY = "content"

# Group label reported for an empty listing
NO_POSTS_GROUP = "no_posts"

# Email the client sends when its user has none
DEFAULT_AUTHOR_EMAIL = "no_email@provided.com"


class RequestType(str, Enum):
    """Request discriminator, one per operation and path."""

    POST = "post"
    COMMENT = "comment"
    LIST = "list"
    NEW = "new"

    @property
    def path(self) -> str:
        """Request path serving this operation."""
        return f"/{self.value}"


def response_body(content: str, **extra: Any) -> dict[str, Any]:
    """Build a response body.

    Args:
        content: Human-readable message
        **extra: Additional top-level keys

    Returns:
        Response body dict
    """
    return {CONTENT_KEY: content, **extra}
