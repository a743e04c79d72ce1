"""Repository interfaces for the NNNTP domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from nnntp.domain.repository.comment import CommentRepository
from nnntp.domain.repository.post import PostRepository
from nnntp.domain.repository.user import UserRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "CommentRepository",
]
