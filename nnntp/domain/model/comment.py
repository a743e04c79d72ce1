"""Comment entity."""

from nnntp.domain.model.common import DomainModel
from nnntp.domain.value import PostId


class Comment(DomainModel):
    """A comment attached to a post.

    The author email is a copy taken when the comment was written.
    """

    parent_id: PostId
    body: str
    author: str
    author_email: str
