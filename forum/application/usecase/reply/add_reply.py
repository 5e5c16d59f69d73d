"""Add reply use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import AddedReply, NewReply
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import CommentId, ThreadId, UserId


class AddReplyRequest(BaseModel):
    """Add reply request."""

    thread_id: str
    comment_id: str
    payload: Any  # Raw client body, validated as NewReply
    owner: str  # User ID from authenticated user


class AddReplyUseCase(BaseUseCase):
    """Use case for replying to a comment."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
    ) -> None:
        """Initialize add reply use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
            reply_repository: Reply repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository

    async def execute(self, request: AddReplyRequest) -> AddedReply:
        """Execute add reply flow.

        Steps:
        1. Validate payload as NewReply
        2. Verify the thread exists
        3. Verify the comment exists under the thread
        4. Store the reply

        Replying to a deleted comment is allowed.

        Args:
            request: Add reply request

        Returns:
            The stored reply's id, content and owner

        Raises:
            ValidationError: If the payload is missing a field or mistyped
            NotFoundError: If the thread or comment does not exist
        """
        thread_id = ThreadId(request.thread_id)
        comment_id = CommentId(request.comment_id)

        with logfire.span("add_reply", thread_id=thread_id, comment_id=comment_id):
            new_reply = NewReply.model_validate(request.payload)
            await self.thread_repository.verify_thread_exist(thread_id)
            await self.comment_repository.verify_comment_exist(thread_id, comment_id)

            added_reply = await self.reply_repository.add_reply(
                thread_id, comment_id, new_reply, UserId(request.owner)
            )
            logfire.info("Reply added", comment_id=comment_id, reply_id=added_reply.id)
            return added_reply
