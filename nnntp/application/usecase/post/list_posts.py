"""List posts use case."""

from pydantic import BaseModel

from nnntp.application.usecase.base import BaseUseCase
from nnntp.domain.model import Post
from nnntp.domain.service import PostService


class ListPostsRequest(BaseModel):
    """List posts request."""

    group: str


class ListPostsResponse(BaseModel):
    """List posts response."""

    group: str
    posts: list[Post]


class ListPostsUseCase(BaseUseCase[ListPostsRequest, ListPostsResponse]):
    """Use case for listing a group. No authentication needed."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow."""
        posts = self.post_service.list_posts(request.group)
        return ListPostsResponse(group=request.group, posts=posts)
