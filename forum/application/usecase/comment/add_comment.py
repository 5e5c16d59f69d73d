"""Add comment use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import AddedComment, NewComment
from forum.domain.repository import CommentRepository, ThreadRepository
from forum.domain.value import ThreadId, UserId


class AddCommentRequest(BaseModel):
    """Add comment request."""

    thread_id: str
    payload: Any  # Raw client body, validated as NewComment
    owner: str  # User ID from authenticated user


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a thread."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize add comment use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository

    async def execute(self, request: AddCommentRequest) -> AddedComment:
        """Execute add comment flow.

        Steps:
        1. Validate payload as NewComment
        2. Verify the thread exists
        3. Store the comment

        Args:
            request: Add comment request

        Returns:
            The stored comment's id, content and owner

        Raises:
            ValidationError: If the payload is missing a field or mistyped
            NotFoundError: If the thread does not exist
        """
        thread_id = ThreadId(request.thread_id)

        with logfire.span("add_comment", thread_id=thread_id, owner=request.owner):
            new_comment = NewComment.model_validate(request.payload)
            await self.thread_repository.verify_thread_exist(thread_id)

            added_comment = await self.comment_repository.add_comment(
                thread_id, new_comment, UserId(request.owner)
            )
            logfire.info(
                "Comment added", thread_id=thread_id, comment_id=added_comment.id
            )
            return added_comment
