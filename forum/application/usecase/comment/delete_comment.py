"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.repository import CommentRepository, ThreadRepository
from forum.domain.value import CommentId, ThreadId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    thread_id: str
    comment_id: str
    user_id: str  # User ID from authenticated user


class DeleteCommentUseCase(BaseUseCase):
    """Use case for soft deleting one's own comment."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Steps:
        1. Verify the thread exists
        2. Verify the comment exists under the thread
        3. Verify the user owns the comment
        4. Flag the comment as deleted

        Deleting an already deleted comment succeeds and changes nothing.

        Args:
            request: Delete comment request

        Raises:
            NotFoundError: If the thread or comment does not exist
            AuthorizationError: If the user does not own the comment
        """
        thread_id = ThreadId(request.thread_id)
        comment_id = CommentId(request.comment_id)
        user_id = UserId(request.user_id)

        with logfire.span(
            "delete_comment", thread_id=thread_id, comment_id=comment_id
        ):
            await self.thread_repository.verify_thread_exist(thread_id)
            await self.comment_repository.verify_comment_exist(thread_id, comment_id)
            await self.comment_repository.verify_comment_owner(
                thread_id, comment_id, user_id
            )
            await self.comment_repository.delete_comment(thread_id, comment_id)
            logfire.info("Comment deleted", comment_id=comment_id, user_id=user_id)
