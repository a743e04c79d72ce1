"""Domain value objects for NNNTP."""

from nnntp.domain.value.identifiers import CommentId, PostId
from nnntp.domain.value.types import CommentPolicy

__all__ = [
    # Identifiers
    "PostId",
    "CommentId",
    # Types
    "CommentPolicy",
]
