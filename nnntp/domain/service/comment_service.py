"""Comment domain service."""

import logfire

from nnntp.domain.error import ParentPostNotFoundError
from nnntp.domain.repository import CommentRepository, PostRepository
from nnntp.domain.value import CommentId, CommentPolicy, PostId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        policy: CommentPolicy = CommentPolicy.PERMISSIVE,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository, used for the strict parent check
            policy: Whether comments on missing posts are accepted
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository
        self.policy = policy

    def create_comment(
        self,
        parent_id: PostId,
        body: str,
        author: str,
        author_email: str,
    ) -> CommentId:
        """Attach a comment to a post.

        Callers authenticate the author first.

        Args:
            parent_id: Id of the post being commented on
            body: Comment body
            author: Author username
            author_email: Author email

        Returns:
            Internal id of the stored comment

        Raises:
            ParentPostNotFoundError: Under the strict policy, if the post is missing
        """
        with logfire.span(
            "comment_service.create_comment",
            parent_id=parent_id,
            author=author,
            policy=self.policy.value,
        ):
            if self.policy == CommentPolicy.STRICT and not self.post_repository.exists(
                parent_id
            ):
                logfire.warn("Comment on missing post rejected", parent_id=parent_id)
                raise ParentPostNotFoundError(parent_id)

            comment_id = self.comment_repository.create(
                parent_id=parent_id,
                body=body,
                author=author,
                author_email=author_email,
            )
            logfire.info(
                "Comment created",
                comment_id=comment_id,
                parent_id=parent_id,
                author=author,
            )
            return comment_id
