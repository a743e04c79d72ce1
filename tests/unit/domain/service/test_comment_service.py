"""Unit tests for CommentService."""

import pytest

from nnntp.domain.error import ParentPostNotFoundError
from nnntp.domain.repository import CommentRepository, PostRepository
from nnntp.domain.service import CommentService
from nnntp.domain.value import CommentPolicy, PostId
from nnntp.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryPostRepository,
)
from tests.di import build_test_container
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    def test_comment_is_stored_under_parent(self, unit_env):
        """A comment is listed under the post it names."""
        # Arrange
        comment_service = unit_env.get(CommentService)
        post_repo = unit_env.get(PostRepository)
        comment_repo = unit_env.get(CommentRepository)
        post_id = post_repo.create("g", "s", "b", "alice", "alice@example.com")

        # Act
        comment_service.create_comment(
            parent_id=post_id,
            body="Nice",
            author="bob",
            author_email="bob@example.com",
        )

        # Assert
        comments = comment_repo.find_by_post(post_id)
        assert len(comments) == 1
        assert comments[0].body == "Nice"
        assert comments[0].author == "bob"

    def test_permissive_policy_accepts_missing_parent(self, unit_env):
        """By default a comment on a missing post is stored."""
        # Arrange
        comment_service = unit_env.get(CommentService)
        comment_repo = unit_env.get(CommentRepository)

        # Act
        comment_service.create_comment(
            parent_id=PostId(999),
            body="Orphan",
            author="bob",
            author_email="bob@example.com",
        )

        # Assert
        assert comment_service.policy == CommentPolicy.PERMISSIVE
        assert [c.body for c in comment_repo.find_by_post(PostId(999))] == ["Orphan"]

    def test_strict_policy_rejects_missing_parent(self):
        """Under the strict policy nothing is written for a missing post."""
        # Arrange
        comment_repo = InMemoryCommentRepository()
        comment_service = CommentService(
            comment_repository=comment_repo,
            post_repository=InMemoryPostRepository(),
            policy=CommentPolicy.STRICT,
        )

        # Act
        with pytest.raises(ParentPostNotFoundError) as exc_info:
            comment_service.create_comment(
                parent_id=PostId(999),
                body="Orphan",
                author="bob",
                author_email="bob@example.com",
            )

        # Assert
        assert exc_info.value.parent_id == 999
        assert comment_repo.find_by_post(PostId(999)) == []

    def test_strict_policy_accepts_existing_parent(self):
        """The strict policy still accepts comments on real posts."""
        # Arrange
        post_repo = InMemoryPostRepository()
        comment_repo = InMemoryCommentRepository()
        comment_service = CommentService(
            comment_repository=comment_repo,
            post_repository=post_repo,
            policy=CommentPolicy.STRICT,
        )
        post_id = post_repo.create("g", "s", "b", "alice", "alice@example.com")

        # Act
        comment_service.create_comment(
            parent_id=post_id,
            body="Nice",
            author="bob",
            author_email="bob@example.com",
        )

        # Assert
        assert len(comment_repo.find_by_post(post_id)) == 1

    def test_strict_policy_from_settings(self, monkeypatch):
        """The policy is read from AUTH__COMMENT_POLICY."""
        # Arrange
        monkeypatch.setenv("AUTH__COMMENT_POLICY", "strict")

        container = build_test_container()

        # Act
        with container() as request_container:
            comment_service = request_container.get(CommentService)

        # Assert
        assert comment_service.policy == CommentPolicy.STRICT
        container.close()
