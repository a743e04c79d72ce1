"""Mappers for converting database rows to domain models."""

from typing import Any, Dict

from nnntp.domain.model import Comment, Post, User
from nnntp.domain.value import PostId


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(username=row["username"], password_digest=row["password"])


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model (without comments).

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        group=row["group_name"],
        subject=row["subject"],
        body=row["body"],
        author=row["author"],
        author_email=row["author_email"],
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        parent_id=PostId(row["parent_id"]),
        body=row["body"],
        author=row["author"],
        author_email=row["author_email"],
    )
