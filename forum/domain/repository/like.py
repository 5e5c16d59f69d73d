"""Like repository interface."""

from abc import ABC, abstractmethod

from forum.domain.error import MethodNotImplementedError
from forum.domain.value import CommentId, UserId

_NAME = "LIKE_REPOSITORY"


class LikeRepository(ABC):
    """Repository for Like entity.

    Defines the contract for like persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def check_like_exist(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Check whether a user currently likes a comment.

        Args:
            comment_id: The comment
            user_id: The user

        Returns:
            True if the like exists
        """
        raise MethodNotImplementedError(_NAME)

    @abstractmethod
    async def add_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Record a like.

        Args:
            comment_id: The comment
            user_id: The user

        Raises:
            IntegrityError: If the pair is already liked (unique constraint)
        """
        raise MethodNotImplementedError(_NAME)

    @abstractmethod
    async def remove_like(self, comment_id: CommentId, user_id: UserId) -> None:
        """Remove a like if present.

        Args:
            comment_id: The comment
            user_id: The user
        """
        raise MethodNotImplementedError(_NAME)

    @abstractmethod
    async def count_likes_by_comment_id(self, comment_id: CommentId) -> int:
        """Count the likes on a comment.

        Args:
            comment_id: The comment

        Returns:
            Number of likes (never negative)
        """
        raise MethodNotImplementedError(_NAME)
