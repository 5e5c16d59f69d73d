"""Delete reply use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId


class DeleteReplyRequest(BaseModel):
    """Delete reply request."""

    thread_id: str
    comment_id: str
    reply_id: str
    user_id: str  # User ID from authenticated user


class DeleteReplyUseCase(BaseUseCase):
    """Use case for soft deleting one's own reply."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> None:
        """Initialize delete reply use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
            reply_repository: Reply repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository

    async def execute(self, request: DeleteReplyRequest) -> None:
        """Execute delete reply flow.

        Steps:
        1. Verify the thread exists
        2. Verify the comment exists under the thread
        3. Verify the reply exists under the comment
        4. Verify the user owns the reply
        5. Flag the reply as deleted

        Args:
            request: Delete reply request

        Raises:
            NotFoundError: If the thread, comment or reply does not exist
            AuthorizationError: If the user does not own the reply
        """
        thread_id = ThreadId(request.thread_id)
        comment_id = CommentId(request.comment_id)
        reply_id = ReplyId(request.reply_id)
        user_id = UserId(request.user_id)

        with logfire.span("delete_reply", thread_id=thread_id, reply_id=reply_id):
            await self.thread_repository.verify_thread_exist(thread_id)
            await self.comment_repository.verify_comment_exist(thread_id, comment_id)
            await self.reply_repository.verify_reply_exist(
                thread_id, comment_id, reply_id
            )
            await self.reply_repository.verify_reply_owner(reply_id, user_id)
            await self.reply_repository.delete_reply_by_id(reply_id)
            logfire.info("Reply deleted", reply_id=reply_id, user_id=user_id)
