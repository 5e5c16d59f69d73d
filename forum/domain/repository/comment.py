"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List

from forum.domain.error import MethodNotImplementedError
from forum.domain.model.comment import AddedComment, Comment, NewComment
from forum.domain.value import CommentId, ThreadId, UserId

_NAME = "COMMENT_REPOSITORY"


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def add_comment(
        self,
        thread_id: ThreadId,
        new_comment: NewComment,
        owner: UserId,
    ) -> AddedComment:
        """Store a new comment on a thread.

        Args:
            thread_id: The parent thread
            new_comment: The validated comment payload
            owner: ID of the commenting user

        Returns:
            The stored comment's id, content and owner
        """
        raise MethodNotImplementedError(_NAME)

    @abstractmethod
    async def get_comments_by_thread_id(self, thread_id: ThreadId) -> List[Comment]:
        """Fetch every comment of a thread, deleted ones included.

        Args:
            thread_id: The parent thread

        Returns:
            Comments in creation order (oldest first)
        """
        raise MethodNotImplementedError(_NAME)

    @abstractmethod
    async def verify_comment_exist(
        self, thread_id: ThreadId, comment_id: CommentId
    ) -> None:
        """Ensure a comment exists under the given thread.

        Args:
            thread_id: The thread the comment must belong to
            comment_id: The comment's identifier

        Raises:
            NotFoundError: If the comment is missing or under another thread
        """
        raise MethodNotImplementedError(_NAME)

    @abstractmethod
    async def verify_comment_owner(
        self, thread_id: ThreadId, comment_id: CommentId, user_id: UserId
    ) -> None:
        """Ensure the user owns the comment.

        Args:
            thread_id: The thread the comment belongs to
            comment_id: The comment's identifier
            user_id: The acting user

        Raises:
            AuthorizationError: If the user is not the comment's owner
        """
        raise MethodNotImplementedError(_NAME)

    @abstractmethod
    async def delete_comment(self, thread_id: ThreadId, comment_id: CommentId) -> None:
        """Soft delete a comment by setting its ``is_delete`` flag.

        Args:
            thread_id: The thread the comment belongs to
            comment_id: The comment's identifier
        """
        raise MethodNotImplementedError(_NAME)
