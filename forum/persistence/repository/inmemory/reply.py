"""In-memory reply repository for testing."""

from datetime import datetime, timezone
from typing import List

from forum.domain.error import AuthorizationError, NotFoundError
from forum.domain.model import AddedReply, NewReply, Reply
from forum.domain.repository.reply import ReplyRepository
from forum.domain.value import (
    REPLY_ID_PREFIX,
    CommentId,
    IdFactory,
    ReplyId,
    ThreadId,
    UserId,
)

from .store import InMemoryStore


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    def __init__(self, store: InMemoryStore, id_generator: IdFactory) -> None:
        self.store = store
        self.id_generator = id_generator

    async def add_reply(
        self,
        thread_id: ThreadId,
        comment_id: CommentId,
        new_reply: NewReply,
        owner: UserId,
    ) -> AddedReply:
        reply = Reply(
            id=ReplyId(f"{REPLY_ID_PREFIX}{self.id_generator()}"),
            thread_id=thread_id,
            comment_id=comment_id,
            owner=owner,
            date=datetime.now(timezone.utc),
            content=new_reply.content,
        )
        self.store.replies[reply.id] = reply
        return AddedReply(id=reply.id, content=reply.content, owner=reply.owner)

    async def get_replies_by_thread_id(self, thread_id: ThreadId) -> List[Reply]:
        replies = [r for r in self.store.replies.values() if r.thread_id == thread_id]
        return sorted(replies, key=lambda r: r.date)

    async def get_replies_by_comment_id(self, comment_id: CommentId) -> List[Reply]:
        replies = [r for r in self.store.replies.values() if r.comment_id == comment_id]
        return sorted(replies, key=lambda r: r.date)

    async def verify_reply_exist(
        self, thread_id: ThreadId, comment_id: CommentId, reply_id: ReplyId
    ) -> None:
        reply = self.store.replies.get(reply_id)
        if (
            reply is None
            or reply.thread_id != thread_id
            or reply.comment_id != comment_id
        ):
            raise NotFoundError("reply", reply_id)

    async def verify_reply_owner(self, reply_id: ReplyId, user_id: UserId) -> None:
        reply = self.store.replies.get(reply_id)
        if reply is None:
            raise NotFoundError("reply", reply_id)
        if reply.owner != user_id:
            raise AuthorizationError("reply", reply_id, user_id)

    async def delete_reply_by_id(self, reply_id: ReplyId) -> None:
        reply = self.store.replies.get(reply_id)
        if reply is not None:
            self.store.replies[reply_id] = reply.model_copy(update={"is_delete": True})
