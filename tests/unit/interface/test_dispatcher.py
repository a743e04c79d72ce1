"""Unit tests for the request dispatcher."""

import pytest

from nnntp.domain.error import StorageFailureError
from nnntp.domain.repository import CommentRepository, PostRepository
from nnntp.interface.dispatcher import Dispatcher
from nnntp.protocol.envelope import RequestType
from tests.harness import author_block, create_env_fixture, make_envelope

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


def _new(username: str = "alice", password: str = "s3cret") -> dict:
    return make_envelope(type="new", username=username, password=password)


def _post(group: str = "comp.lang.python", **author) -> dict:
    return make_envelope(
        type="post",
        group=group,
        post={"subject": "Hello", "body": "First post"},
        author=author_block(**author),
    )


def _comment(parent_id=1, **author) -> dict:
    return make_envelope(
        type="comment",
        parent={"id": parent_id},
        comment={"body": "Nice"},
        author=author_block(**author),
    )


def _list(group: str = "comp.lang.python") -> dict:
    return make_envelope(type="list", group=group)


@pytest.fixture
def dispatcher(unit_env) -> Dispatcher:
    """Dispatcher over in-memory repositories."""
    return unit_env.get(Dispatcher)


class TestNewUser:
    """Tests for /new."""

    def test_register(self, dispatcher):
        """A fresh username is created."""
        response = dispatcher.dispatch(RequestType.NEW, _new())

        assert response.status_code == 200
        assert response.body == {"content": "User created"}

    def test_duplicate(self, dispatcher):
        """A taken username is a 400 with its own message."""
        dispatcher.dispatch(RequestType.NEW, _new())

        response = dispatcher.dispatch(RequestType.NEW, _new(password="other"))

        assert response.status_code == 400
        assert response.body == {"content": "User already exists"}

    def test_overlong_password(self, dispatcher):
        """A password bcrypt cannot take is a bad request."""
        response = dispatcher.dispatch(RequestType.NEW, _new(password="x" * 73))

        assert response.status_code == 400
        assert response.body == {
            "content": "bad request - password must be at most 72 bytes"
        }


class TestPost:
    """Tests for /post."""

    def test_post_returns_generated_id(self, dispatcher):
        """A valid post answers with the new id."""
        dispatcher.dispatch(RequestType.NEW, _new())

        first = dispatcher.dispatch(RequestType.POST, _post())
        second = dispatcher.dispatch(RequestType.POST, _post())

        assert first.status_code == 200
        assert first.body == {"content": "Posted OK", "id": 1}
        assert second.body == {"content": "Posted OK", "id": 2}

    def test_unknown_user(self, dispatcher, unit_env):
        """Posting as an unregistered user is a 401 and writes nothing."""
        response = dispatcher.dispatch(RequestType.POST, _post(username="mallory"))

        assert response.status_code == 401
        assert response.body == {"content": "Invalid user"}
        assert unit_env.get(PostRepository).find_by_group("comp.lang.python") == []

    def test_wrong_password(self, dispatcher, unit_env):
        """Posting with a wrong password is a 401 and writes nothing."""
        dispatcher.dispatch(RequestType.NEW, _new())

        response = dispatcher.dispatch(RequestType.POST, _post(password="wrong"))

        assert response.status_code == 401
        assert response.body == {"content": "Invalid user"}
        assert unit_env.get(PostRepository).find_by_group("comp.lang.python") == []

    def test_missing_field(self, dispatcher):
        """A missing nested field is named in the message."""
        envelope = _post()
        del envelope["nnntp"]["post"]["subject"]

        response = dispatcher.dispatch(RequestType.POST, envelope)

        assert response.status_code == 400
        assert response.body == {"content": "bad request - post.subject is required"}

    def test_storage_failure(self, dispatcher, unit_env, monkeypatch):
        """A store failure is reported generically."""
        dispatcher.dispatch(RequestType.NEW, _new())

        def fail(**kwargs):
            raise StorageFailureError("post.create")

        monkeypatch.setattr(unit_env.get(PostRepository), "create", fail)

        response = dispatcher.dispatch(RequestType.POST, _post())

        assert response.status_code == 400
        assert response.body == {"content": "Failed to post"}


class TestComment:
    """Tests for /comment."""

    def test_comment(self, dispatcher, unit_env):
        """A valid comment is stored under its post."""
        dispatcher.dispatch(RequestType.NEW, _new())
        dispatcher.dispatch(RequestType.POST, _post())

        response = dispatcher.dispatch(RequestType.COMMENT, _comment(1))

        assert response.status_code == 200
        assert response.body == {"content": "Commented OK"}
        assert len(unit_env.get(CommentRepository).find_by_post(1)) == 1

    def test_invalid_credentials(self, dispatcher, unit_env):
        """Commenting with bad credentials is a 401 and writes nothing."""
        dispatcher.dispatch(RequestType.NEW, _new())

        response = dispatcher.dispatch(RequestType.COMMENT, _comment(1, password="x"))

        assert response.status_code == 401
        assert unit_env.get(CommentRepository).find_by_post(1) == []

    def test_non_numeric_parent(self, dispatcher):
        """A parent id that is not a number is a bad request."""
        dispatcher.dispatch(RequestType.NEW, _new())

        response = dispatcher.dispatch(RequestType.COMMENT, _comment("seven"))

        assert response.status_code == 400
        assert response.body["content"].startswith("bad request - parent.id is invalid")


class TestList:
    """Tests for /list."""

    def test_empty_group(self, dispatcher):
        """An empty group lists as an empty array."""
        response = dispatcher.dispatch(RequestType.LIST, _list("alt.empty"))

        assert response.status_code == 200
        assert response.body == {"content": "processed OK", "nnntp": []}

    def test_posts_with_comments(self, dispatcher):
        """Posts come back with their comments in wire form."""
        dispatcher.dispatch(RequestType.NEW, _new())
        dispatcher.dispatch(RequestType.POST, _post())
        dispatcher.dispatch(RequestType.COMMENT, _comment(1))

        response = dispatcher.dispatch(RequestType.LIST, _list())

        assert response.status_code == 200
        assert response.body["nnntp"] == [
            {
                "id": 1,
                "group_name": "comp.lang.python",
                "subject": "Hello",
                "body": "First post",
                "author": "alice",
                "author_email": "alice@example.com",
                "comments": [
                    {
                        "body": "Nice",
                        "author": "alice",
                        "author_email": "alice@example.com",
                    }
                ],
            }
        ]


class TestEnvelopeErrors:
    """Tests for envelopes rejected before reaching a use case."""

    def test_no_envelope(self, dispatcher):
        """A body that is not an envelope is a bad request."""
        response = dispatcher.dispatch(RequestType.LIST, None)

        assert response.status_code == 400
        assert response.body == {"content": "bad request - nnntp is required"}

    def test_unknown_type(self, dispatcher):
        """An unknown type is a bad request."""
        response = dispatcher.dispatch(
            RequestType.LIST, make_envelope(type="delete", group="g")
        )

        assert response.status_code == 400
        assert response.body == {"content": "bad request - valid type is required"}

    def test_type_path_mismatch(self, dispatcher):
        """A type that differs from the path is a bad request."""
        response = dispatcher.dispatch(RequestType.POST, _list())

        assert response.status_code == 400
        assert response.body == {
            "content": "bad request - type list does not match /post"
        }


class TestUnstorableValues:
    """Values the store or the hasher could not take become 400s."""

    def test_parent_id_beyond_integer_range(self, dispatcher, unit_env):
        """An oversized parent id is rejected before anything is written."""
        dispatcher.dispatch(RequestType.NEW, _new())

        response = dispatcher.dispatch(RequestType.COMMENT, _comment(2**64))

        assert response.status_code == 400
        assert response.body["content"].startswith("bad request - parent.id is invalid")
        assert unit_env.get(CommentRepository).find_by_post(2**64) == []

    def test_surrogate_password(self, dispatcher):
        """A password that is not valid UTF-8 is a bad request."""
        response = dispatcher.dispatch(
            RequestType.NEW, make_envelope(type="new", username="bob", password="\ud800")
        )

        assert response.status_code == 400
        assert response.body["content"].startswith("bad request - password is invalid")

    def test_surrogate_group(self, dispatcher):
        """A group that is not valid UTF-8 is a bad request."""
        response = dispatcher.dispatch(RequestType.LIST, _list("\ud800"))

        assert response.status_code == 400
        assert response.body["content"].startswith("bad request - group is invalid")

    def test_surrogate_subject(self, dispatcher):
        """Post text that is not valid UTF-8 is a bad request."""
        dispatcher.dispatch(RequestType.NEW, _new())
        envelope = _post()
        envelope["nnntp"]["post"]["subject"] = "\udc80"

        response = dispatcher.dispatch(RequestType.POST, envelope)

        assert response.status_code == 400
        assert response.body["content"].startswith(
            "bad request - post.subject is invalid"
        )
