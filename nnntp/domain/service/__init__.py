"""Domain services."""

from .auth_service import AuthService, PasswordHasher
from .base import Service
from .comment_service import CommentService
from .post_service import PostService

__all__ = [
    "AuthService",
    "CommentService",
    "PasswordHasher",
    "PostService",
    "Service",
]
