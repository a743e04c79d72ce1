"""Strongly typed identifiers for NNNTP domain entities.

Identifiers are integers generated by the store on insert.
"""

from typing import NewType

PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)
