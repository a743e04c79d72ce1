"""Unit tests for PostService."""

from nnntp.domain.repository import CommentRepository
from nnntp.domain.service import PostService
from nnntp.domain.value import PostId
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


def _create(post_service: PostService, group: str, subject: str) -> PostId:
    return post_service.create_post(
        group=group,
        subject=subject,
        body=f"{subject} body",
        author="alice",
        author_email="alice@example.com",
    )


class TestCreatePost:
    """Tests for create_post method."""

    def test_ids_are_distinct_for_identical_content(self, unit_env):
        """Two identical posts get two ids."""
        # Arrange
        post_service = unit_env.get(PostService)

        # Act
        first = _create(post_service, "comp.lang.python", "Hello")
        second = _create(post_service, "comp.lang.python", "Hello")

        # Assert
        assert first != second
        assert len(post_service.list_posts("comp.lang.python")) == 2


class TestListPosts:
    """Tests for list_posts method."""

    def test_empty_group(self, unit_env):
        """A group with no posts lists nothing."""
        post_service = unit_env.get(PostService)

        assert post_service.list_posts("alt.empty") == []

    def test_posts_ascend_by_id_within_group(self, unit_env):
        """Only the requested group is listed, oldest first."""
        # Arrange
        post_service = unit_env.get(PostService)
        first = _create(post_service, "comp.lang.python", "One")
        _create(post_service, "rec.arts", "Elsewhere")
        second = _create(post_service, "comp.lang.python", "Two")

        # Act
        posts = post_service.list_posts("comp.lang.python")

        # Assert
        assert [p.id for p in posts] == [first, second]
        assert [p.subject for p in posts] == ["One", "Two"]

    def test_comments_attached_in_creation_order(self, unit_env):
        """Each post carries only its own comments, oldest first."""
        # Arrange
        post_service = unit_env.get(PostService)
        comment_repo = unit_env.get(CommentRepository)
        first = _create(post_service, "comp.lang.python", "One")
        second = _create(post_service, "comp.lang.python", "Two")

        comment_repo.create(first, "a", "bob", "bob@example.com")
        comment_repo.create(second, "b", "bob", "bob@example.com")
        comment_repo.create(first, "c", "carol", "carol@example.com")

        # Act
        posts = post_service.list_posts("comp.lang.python")

        # Assert
        assert [c.body for c in posts[0].comments] == ["a", "c"]
        assert [c.body for c in posts[1].comments] == ["b"]
        assert all(c.parent_id == first for c in posts[0].comments)
