"""Domain value types for NNNTP."""

from enum import Enum


class CommentPolicy(str, Enum):
    """How comments on a post id that does not exist are handled."""

    PERMISSIVE = "permissive"  # Store the comment anyway
    STRICT = "strict"  # Reject it before writing
