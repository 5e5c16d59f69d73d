"""Reply repository interface."""

from abc import ABC, abstractmethod
from typing import List

from forum.domain.error import MethodNotImplementedError
from forum.domain.model.reply import AddedReply, NewReply, Reply
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId

_NAME = "REPLY_REPOSITORY"


class ReplyRepository(ABC):
    """Repository for Reply entity.

    Defines the contract for reply persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def add_reply(
        self,
        thread_id: ThreadId,
        comment_id: CommentId,
        new_reply: NewReply,
        owner: UserId,
    ) -> AddedReply:
        """Store a new reply to a comment.

        Args:
            thread_id: The thread the comment belongs to
            comment_id: The parent comment
            new_reply: The validated reply payload
            owner: ID of the replying user

        Returns:
            The stored reply's id, content and owner
        """
        raise MethodNotImplementedError(_NAME)

    @abstractmethod
    async def get_replies_by_thread_id(self, thread_id: ThreadId) -> List[Reply]:
        """Fetch every reply under a thread in a single query.

        Args:
            thread_id: The thread

        Returns:
            Replies in creation order (oldest first), deleted ones included
        """
        raise MethodNotImplementedError(_NAME)

    @abstractmethod
    async def get_replies_by_comment_id(self, comment_id: CommentId) -> List[Reply]:
        """Fetch the replies of one comment.

        Args:
            comment_id: The parent comment

        Returns:
            Replies in creation order (oldest first), deleted ones included
        """
        raise MethodNotImplementedError(_NAME)

    @abstractmethod
    async def verify_reply_exist(
        self, thread_id: ThreadId, comment_id: CommentId, reply_id: ReplyId
    ) -> None:
        """Ensure a reply exists under the given thread and comment.

        Args:
            thread_id: The thread the reply must belong to
            comment_id: The comment the reply must belong to
            reply_id: The reply's identifier

        Raises:
            NotFoundError: If the reply is missing or under another parent
        """
        raise MethodNotImplementedError(_NAME)

    @abstractmethod
    async def verify_reply_owner(self, reply_id: ReplyId, user_id: UserId) -> None:
        """Ensure the user owns the reply.

        Args:
            reply_id: The reply's identifier
            user_id: The acting user

        Raises:
            AuthorizationError: If the user is not the reply's owner
        """
        raise MethodNotImplementedError(_NAME)

    @abstractmethod
    async def delete_reply_by_id(self, reply_id: ReplyId) -> None:
        """Soft delete a reply by setting its ``is_delete`` flag.

        Args:
            reply_id: The reply's identifier
        """
        raise MethodNotImplementedError(_NAME)
