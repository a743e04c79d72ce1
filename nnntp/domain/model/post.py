"""Post aggregate root.

Posts belong to a group, which is nothing more than a string tag shared by
every post listed together.
"""

from pydantic import Field

from nnntp.domain.model.comment import Comment
from nnntp.domain.model.common import DomainModel
from nnntp.domain.value import PostId


class Post(DomainModel):
    """Post aggregate root.

    Comments are kept in creation order.
    """

    id: PostId
    group: str
    subject: str
    body: str
    author: str
    author_email: str
    comments: tuple[Comment, ...] = Field(default_factory=tuple)
