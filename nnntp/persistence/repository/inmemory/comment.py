"""In-memory comment repository for testing."""

from itertools import count

from nnntp.domain.model.comment import Comment
from nnntp.domain.repository.comment import CommentRepository
from nnntp.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    def create(
        self,
        parent_id: PostId,
        body: str,
        author: str,
        author_email: str,
    ) -> CommentId:
        """Insert a comment with the next id."""
        comment_id = CommentId(next(self._ids))
        self._comments[comment_id] = Comment(
            parent_id=parent_id,
            body=body,
            author=author,
            author_email=author_email,
        )
        return comment_id

    def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find the comments on a post in creation order."""
        return [
            comment
            for _, comment in sorted(self._comments.items())
            if comment.parent_id == post_id
        ]
