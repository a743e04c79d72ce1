"""Post domain service."""

import logfire

from nnntp.domain.model.post import Post
from nnntp.domain.repository import CommentRepository, PostRepository
from nnntp.domain.value import PostId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    def create_post(
        self,
        group: str,
        subject: str,
        body: str,
        author: str,
        author_email: str,
    ) -> PostId:
        """Create a post in a group.

        Callers authenticate the author first.

        Args:
            group: Group tag
            subject: Post subject
            body: Post body
            author: Author username
            author_email: Author email

        Returns:
            Id generated by the store
        """
        with logfire.span(
            "post_service.create_post", group=group, subject=subject, author=author
        ):
            post_id = self.post_repository.create(
                group=group,
                subject=subject,
                body=body,
                author=author,
                author_email=author_email,
            )
            logfire.info("Post created", post_id=post_id, group=group, author=author)
            return post_id

    def list_posts(self, group: str) -> list[Post]:
        """List every post in a group with its comments.

        Args:
            group: Group tag

        Returns:
            Posts ascending by id, each with comments in creation order
        """
        with logfire.span("post_service.list_posts", group=group):
            posts = self.post_repository.find_by_group(group)

            listed = [
                post.model_copy(
                    update={
                        "comments": tuple(
                            self.comment_repository.find_by_post(post.id)
                        )
                    }
                )
                for post in posts
            ]

            logfire.info("Posts listed", group=group, count=len(listed))
            return listed
