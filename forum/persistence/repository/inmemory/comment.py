"""In-memory comment repository for testing."""

from datetime import datetime, timezone
from typing import List

from forum.domain.error import AuthorizationError, NotFoundError
from forum.domain.model import AddedComment, Comment, NewComment
from forum.domain.repository.comment import CommentRepository
from forum.domain.value import COMMENT_ID_PREFIX, CommentId, IdFactory, ThreadId, UserId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore, id_generator: IdFactory) -> None:
        self.store = store
        self.id_generator = id_generator

    async def add_comment(
        self,
        thread_id: ThreadId,
        new_comment: NewComment,
        owner: UserId,
    ) -> AddedComment:
        comment = Comment(
            id=CommentId(f"{COMMENT_ID_PREFIX}{self.id_generator()}"),
            thread_id=thread_id,
            owner=owner,
            date=datetime.now(timezone.utc),
            content=new_comment.content,
        )
        self.store.comments[comment.id] = comment
        return AddedComment(id=comment.id, content=comment.content, owner=comment.owner)

    async def get_comments_by_thread_id(self, thread_id: ThreadId) -> List[Comment]:
        comments = [c for c in self.store.comments.values() if c.thread_id == thread_id]
        # sorted() is stable, so equal dates keep insertion order
        return sorted(comments, key=lambda c: c.date)

    def _find(self, thread_id: ThreadId, comment_id: CommentId) -> Comment:
        comment = self.store.comments.get(comment_id)
        if comment is None or comment.thread_id != thread_id:
            raise NotFoundError("comment", comment_id)
        return comment

    async def verify_comment_exist(
        self, thread_id: ThreadId, comment_id: CommentId
    ) -> None:
        self._find(thread_id, comment_id)

    async def verify_comment_owner(
        self, thread_id: ThreadId, comment_id: CommentId, user_id: UserId
    ) -> None:
        comment = self._find(thread_id, comment_id)
        if comment.owner != user_id:
            raise AuthorizationError("comment", comment_id, user_id)

    async def delete_comment(self, thread_id: ThreadId, comment_id: CommentId) -> None:
        comment = self.store.comments.get(comment_id)
        if comment is None or comment.thread_id != thread_id:
            return
        self.store.comments[comment_id] = comment.model_copy(
            update={"is_delete": True}
        )
