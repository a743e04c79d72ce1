"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List

from nnntp.domain.model.post import Post
from nnntp.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregates.

    Defines the contract for post persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    def create(
        self,
        group: str,
        subject: str,
        body: str,
        author: str,
        author_email: str,
    ) -> PostId:
        """Insert a post and return the id the store generated for it.

        The id must come back from the insert itself, never from a
        follow-up query on the inserted values.

        Args:
            group: Group tag
            subject: Post subject
            body: Post body
            author: Author username
            author_email: Author email at posting time

        Returns:
            The new post id
        """
        pass

    @abstractmethod
    def find_by_group(self, group: str) -> List[Post]:
        """Find all posts in a group, ascending by id.

        Returned posts carry no comments; those are loaded separately.

        Args:
            group: Group tag

        Returns:
            Posts in the group (empty when there are none)
        """
        pass

    @abstractmethod
    def exists(self, post_id: PostId) -> bool:
        """Check whether a post with this id exists.

        Args:
            post_id: The post id

        Returns:
            True if the post exists
        """
        pass
