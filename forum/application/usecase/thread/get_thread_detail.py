"""Get thread detail use case."""

import logfire
from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.model import (
    Comment,
    CommentDetail,
    Reply,
    ReplyDetail,
    ThreadDetail,
    mask_comment_content,
    mask_reply_content,
)
from forum.domain.repository import (
    CommentRepository,
    LikeRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.value import ThreadId


class GetThreadDetailRequest(BaseModel):
    """Get thread detail request."""

    thread_id: str


class GetThreadDetailUseCase(BaseUseCase):
    """Use case for assembling a thread with its comments, replies and likes."""

    def __init__(
        self,
        thread_repository: ThreadRepository,
        comment_repository: CommentRepository,
        reply_repository: ReplyRepository,
        like_repository: LikeRepository,
    ) -> None:
        """Initialize get thread detail use case.

        Args:
            thread_repository: Thread repository
            comment_repository: Comment repository
            reply_repository: Reply repository
            like_repository: Like repository
        """
        self.thread_repository = thread_repository
        self.comment_repository = comment_repository
        self.reply_repository = reply_repository
        self.like_repository = like_repository

    async def execute(self, request: GetThreadDetailRequest) -> ThreadDetail:
        """Execute get thread detail flow.

        Steps:
        1. Fetch the thread (fails if missing)
        2. Fetch its comments in creation order
        3. Fetch every reply of the thread in one query
        4. Per comment: mask content, count likes, attach its own replies
        5. Assemble the projection

        Args:
            request: Get thread detail request

        Returns:
            Thread detail with masked comments and replies

        Raises:
            NotFoundError: If the thread does not exist
        """
        thread_id = ThreadId(request.thread_id)

        with logfire.span("get_thread_detail", thread_id=thread_id):
            thread = await self.thread_repository.get_thread_by_id(thread_id)
            comments = await self.comment_repository.get_comments_by_thread_id(
                thread_id
            )
            replies = await self.reply_repository.get_replies_by_thread_id(thread_id)

            comment_details = [
                await self._build_comment_detail(comment, replies)
                for comment in comments
            ]

            return ThreadDetail(
                id=thread.id,
                title=thread.title,
                body=thread.body,
                date=thread.date,
                owner=thread.owner,
                comments=comment_details,
            )

    async def _build_comment_detail(
        self, comment: Comment, replies: list[Reply]
    ) -> CommentDetail:
        like_count = await self.like_repository.count_likes_by_comment_id(comment.id)

        return CommentDetail(
            id=comment.id,
            owner=comment.owner,
            date=comment.date,
            content=mask_comment_content(comment.content, comment.is_delete),
            like_count=like_count,
            replies=[
                ReplyDetail(
                    id=reply.id,
                    owner=reply.owner,
                    date=reply.date,
                    content=mask_reply_content(reply.content, reply.is_delete),
                )
                for reply in replies
                if reply.comment_id == comment.id
            ],
        )
