"""Toggle like use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.repository import CommentRepository, ThreadRepository
from forum.domain.service import LikeService
from forum.domain.value import CommentId, ThreadId, UserId


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    thread_id: str
    comment_id: str
    user_id: str  # User ID from authenticated user


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    liked: bool


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a comment."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        like_service: LikeService,
    ) -> None:
        """Initialize toggle like use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
            like_service: Like domain service
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Steps:
        1. Verify the thread exists
        2. Verify the comment exists under the thread
        3. Flip the like via like service

        Args:
            request: Toggle like request

        Returns:
            Whether the comment is liked after the call

        Raises:
            NotFoundError: If the thread or comment does not exist
            BusinessRuleViolationError: If a concurrent like won the race
        """
        thread_id = ThreadId(request.thread_id)
        comment_id = CommentId(request.comment_id)

        await self.thread_repository.verify_thread_exist(thread_id)
        await self.comment_repository.verify_comment_exist(thread_id, comment_id)

        liked = await self.like_service.toggle_like(
            comment_id, UserId(request.user_id)
        )
        return ToggleLikeResponse(liked=liked)
