"""Client-side models."""

from pydantic import BaseModel, ConfigDict

from nnntp.domain.model import Post


class UserCredentials(BaseModel):
    """Account the client writes as."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str
    email: str | None = None


class PostListing(BaseModel):
    """Posts of one group as returned by a list call.

    ``group`` is taken from the first post, or is ``"no_posts"`` when the
    group is empty.
    """

    model_config = ConfigDict(frozen=True)

    group: str
    posts: list[Post]
