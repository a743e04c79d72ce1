"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List

from nnntp.domain.model.comment import Comment
from nnntp.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entities.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    def create(
        self,
        parent_id: PostId,
        body: str,
        author: str,
        author_email: str,
    ) -> CommentId:
        """Insert a comment tagged with its parent post id.

        Args:
            parent_id: Id of the post being commented on
            body: Comment body
            author: Author username
            author_email: Author email at comment time

        Returns:
            Internal id of the stored comment
        """
        pass

    @abstractmethod
    def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find the comments on a post in creation order.

        Args:
            post_id: The parent post id

        Returns:
            Comments on the post (empty when there are none)
        """
        pass
