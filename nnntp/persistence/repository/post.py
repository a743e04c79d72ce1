"""SQL implementation of Post repository."""

from typing import List

import logfire
from sqlalchemy import func, insert, select
from sqlalchemy.engine import Engine

from nnntp.domain.model import Post
from nnntp.domain.repository import PostRepository
from nnntp.domain.value import PostId
from nnntp.persistence.database import transaction
from nnntp.persistence.mappers import row_to_post
from nnntp.persistence.tables import posts_table


class SqlPostRepository(PostRepository):
    """SQLAlchemy implementation of PostRepository."""

    def __init__(self, engine: Engine) -> None:
        """Initialize repository with a database engine.

        Args:
            engine: SQLAlchemy engine
        """
        self.engine = engine

    def create(
        self,
        group: str,
        subject: str,
        body: str,
        author: str,
        author_email: str,
    ) -> PostId:
        """Insert a post and return its generated id from the same statement."""
        with logfire.span("post_repository.create", group=group, author=author):
            stmt = (
                insert(posts_table)
                .values(
                    group_name=group,
                    subject=subject,
                    body=body,
                    author=author,
                    author_email=author_email,
                )
                .returning(posts_table.c.id)
            )
            with transaction(self.engine, "post.create") as connection:
                post_id = connection.execute(stmt).scalar_one()

            logfire.info("Post inserted", post_id=post_id, group=group)
            return PostId(post_id)

    def find_by_group(self, group: str) -> List[Post]:
        """Find all posts in a group, ascending by id."""
        with logfire.span("post_repository.find_by_group", group=group):
            stmt = (
                select(posts_table)
                .where(posts_table.c.group_name == group)
                .order_by(posts_table.c.id)
            )
            with transaction(self.engine, "post.find_by_group") as connection:
                rows = connection.execute(stmt).fetchall()

            if not rows:
                logfire.info("No posts found", group=group)
                return []

            return [row_to_post(row._asdict()) for row in rows]

    def exists(self, post_id: PostId) -> bool:
        """Check whether a post with this id exists."""
        stmt = (
            select(func.count())
            .select_from(posts_table)
            .where(posts_table.c.id == post_id)
        )
        with transaction(self.engine, "post.exists") as connection:
            count = connection.execute(stmt).scalar()

        return (count or 0) > 0
