"""SQL implementation of Comment repository."""

from typing import List

import logfire
from sqlalchemy import insert, select
from sqlalchemy.engine import Engine

from nnntp.domain.model import Comment
from nnntp.domain.repository import CommentRepository
from nnntp.domain.value import CommentId, PostId
from nnntp.persistence.database import transaction
from nnntp.persistence.mappers import row_to_comment
from nnntp.persistence.tables import comments_table


class SqlCommentRepository(CommentRepository):
    """SQLAlchemy implementation of CommentRepository."""

    def __init__(self, engine: Engine) -> None:
        """Initialize repository with a database engine.

        Args:
            engine: SQLAlchemy engine
        """
        self.engine = engine

    def create(
        self,
        parent_id: PostId,
        body: str,
        author: str,
        author_email: str,
    ) -> CommentId:
        """Insert a comment tagged with its parent post id."""
        with logfire.span(
            "comment_repository.create", parent_id=parent_id, author=author
        ):
            stmt = (
                insert(comments_table)
                .values(
                    parent_id=parent_id,
                    body=body,
                    author=author,
                    author_email=author_email,
                )
                .returning(comments_table.c.id)
            )
            with transaction(self.engine, "comment.create") as connection:
                comment_id = connection.execute(stmt).scalar_one()

            return CommentId(comment_id)

    def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find the comments on a post in creation order."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == post_id)
            .order_by(comments_table.c.id)
        )
        with transaction(self.engine, "comment.find_by_post") as connection:
            rows = connection.execute(stmt).fetchall()

        return [row_to_comment(row._asdict()) for row in rows]
