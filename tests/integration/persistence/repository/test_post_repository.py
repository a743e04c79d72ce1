"""Integration tests for PostRepository and CommentRepository."""

from concurrent.futures import ThreadPoolExecutor

from nnntp.domain.repository import CommentRepository, PostRepository
from nnntp.domain.service import PostService
from nnntp.domain.value import PostId
from tests.harness import create_env_fixture

# Integration test fixture - real SQLite persistence
integration_env = create_env_fixture(unmock={"persistence"})


def _create_post(repo: PostRepository, group: str = "comp.lang.python", subject: str = "Hello") -> PostId:
    return repo.create(
        group=group,
        subject=subject,
        body="First post",
        author="alice",
        author_email="alice@example.com",
    )


class TestPostRepository:
    """Integration tests for SqlPostRepository."""

    def test_create_returns_generated_ids(self, integration_env):
        """Ids come from the insert and increase."""
        repo = integration_env.get(PostRepository)

        first = _create_post(repo)
        second = _create_post(repo)

        assert first == 1
        assert second == 2

    def test_identical_posts_get_distinct_ids(self, integration_env):
        """Duplicate content is two posts, not one."""
        # Arrange
        repo = integration_env.get(PostRepository)

        # Act
        ids = {_create_post(repo) for _ in range(3)}

        # Assert
        assert len(ids) == 3
        assert len(repo.find_by_group("comp.lang.python")) == 3

    def test_find_by_group_filters_and_orders(self, integration_env):
        """Only the group's posts are returned, ascending by id."""
        # Arrange
        repo = integration_env.get(PostRepository)
        a = _create_post(repo, subject="a")
        _create_post(repo, group="rec.arts", subject="other")
        b = _create_post(repo, subject="b")

        # Act
        posts = repo.find_by_group("comp.lang.python")

        # Assert
        assert [p.id for p in posts] == [a, b]
        assert posts[0].author_email == "alice@example.com"
        assert posts[0].comments == ()

    def test_find_by_group_empty(self, integration_env):
        """An unknown group yields an empty list."""
        repo = integration_env.get(PostRepository)

        assert repo.find_by_group("alt.empty") == []

    def test_exists(self, integration_env):
        """exists reflects stored posts only."""
        repo = integration_env.get(PostRepository)
        post_id = _create_post(repo)

        assert repo.exists(post_id)
        assert not repo.exists(PostId(post_id + 1))


class TestCommentRepository:
    """Integration tests for SqlCommentRepository."""

    def test_comments_in_creation_order(self, integration_env):
        """Comments on a post come back oldest first."""
        # Arrange
        post_repo = integration_env.get(PostRepository)
        comment_repo = integration_env.get(CommentRepository)
        post_id = _create_post(post_repo)
        other_id = _create_post(post_repo)

        # Act
        comment_repo.create(post_id, "first", "bob", "bob@example.com")
        comment_repo.create(other_id, "elsewhere", "bob", "bob@example.com")
        comment_repo.create(post_id, "second", "carol", "carol@example.com")

        # Assert
        comments = comment_repo.find_by_post(post_id)
        assert [c.body for c in comments] == ["first", "second"]
        assert all(c.parent_id == post_id for c in comments)

    def test_comment_on_missing_post_is_stored(self, integration_env):
        """The store does not enforce parent existence."""
        comment_repo = integration_env.get(CommentRepository)

        comment_repo.create(PostId(404), "orphan", "bob", "bob@example.com")

        assert [c.body for c in comment_repo.find_by_post(PostId(404))] == ["orphan"]

    def test_listing_assembles_comments(self, integration_env):
        """PostService joins posts and comments from the store."""
        # Arrange
        post_service = integration_env.get(PostService)
        comment_repo = integration_env.get(CommentRepository)
        post_id = _create_post(integration_env.get(PostRepository))
        comment_repo.create(post_id, "Nice", "bob", "bob@example.com")

        # Act
        posts = post_service.list_posts("comp.lang.python")

        # Assert
        assert len(posts) == 1
        assert posts[0].comments[0].body == "Nice"


class TestConcurrentPosts:
    """Posts created from several threads at once."""

    def test_each_post_gets_its_own_id(self, integration_env):
        """Ids from concurrent inserts never collide."""
        # Arrange
        repo = integration_env.get(PostRepository)

        # Act
        with ThreadPoolExecutor(max_workers=8) as pool:
            ids = list(pool.map(lambda n: _create_post(repo, subject=f"p{n}"), range(40)))

        # Assert
        assert len(set(ids)) == 40
        listed = repo.find_by_group("comp.lang.python")
        assert sorted(ids) == [p.id for p in listed]
        assert {p.id: p.subject for p in listed} == {
            post_id: f"p{n}" for n, post_id in enumerate(ids)
        }
