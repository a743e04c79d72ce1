"""Wire schemas for posts and comments in list responses.

Field names here are the wire contract and must not change.
Strict mode makes the client reject mistyped values instead of coercing them.
"""

from pydantic import BaseModel, ConfigDict


class WireComment(BaseModel):
    """A comment as transmitted. Comments carry no id of their own."""

    model_config = ConfigDict(strict=True)

    body: str
    author: str
    author_email: str


class WirePost(BaseModel):
    """A post as transmitted, with its comments in creation order."""

    model_config = ConfigDict(strict=True)

    id: int
    group_name: str
    subject: str
    body: str
    author: str
    author_email: str
    comments: list[WireComment]
