"""SQL repository implementations."""

from nnntp.persistence.repository.comment import SqlCommentRepository
from nnntp.persistence.repository.post import SqlPostRepository
from nnntp.persistence.repository.user import SqlUserRepository

__all__ = [
    "SqlUserRepository",
    "SqlPostRepository",
    "SqlCommentRepository",
]
