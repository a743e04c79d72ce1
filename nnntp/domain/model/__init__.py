"""Domain model entities for NNNTP."""

from nnntp.domain.model.comment import Comment
from nnntp.domain.model.post import Post
from nnntp.domain.model.user import User

__all__ = [
    "User",
    "Post",
    "Comment",
]
