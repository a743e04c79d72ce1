"""In-memory post repository for testing."""

from itertools import count

from nnntp.domain.model.post import Post
from nnntp.domain.repository.post import PostRepository
from nnntp.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._ids = count(1)

    def create(
        self,
        group: str,
        subject: str,
        body: str,
        author: str,
        author_email: str,
    ) -> PostId:
        """Insert a post with the next id."""
        post_id = PostId(next(self._ids))
        self._posts[post_id] = Post(
            id=post_id,
            group=group,
            subject=subject,
            body=body,
            author=author,
            author_email=author_email,
        )
        return post_id

    def find_by_group(self, group: str) -> list[Post]:
        """Find all posts in a group, ascending by id."""
        posts = [p for p in self._posts.values() if p.group == group]
        posts.sort(key=lambda p: p.id)
        return posts

    def exists(self, post_id: PostId) -> bool:
        """Check whether a post with this id exists."""
        return post_id in self._posts
