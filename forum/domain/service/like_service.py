"""Like domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from forum.domain.error import BusinessRuleViolationError
from forum.domain.repository import LikeRepository
from forum.domain.value import CommentId, UserId

from .base import Service


class LikeService(Service):
    """Domain service for like operations."""

    def __init__(self, like_repository: LikeRepository) -> None:
        """Initialize like service.

        Args:
            like_repository: Like repository
        """
        self.like_repository = like_repository

    async def toggle_like(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Flip a user's like on a comment.

        Reads the current state, then adds or removes the like. Two toggles
        by the same user leave the like count where it started.

        Args:
            comment_id: Comment ID
            user_id: User ID

        Returns:
            True if the comment is liked after the call, False otherwise

        Raises:
            BusinessRuleViolationError: If a concurrent request stored the
                same like first
        """
        with logfire.span(
            "like_service.toggle_like", comment_id=str(comment_id), user_id=str(user_id)
        ):
            if await self.like_repository.check_like_exist(comment_id, user_id):
                await self.like_repository.remove_like(comment_id, user_id)
                logfire.info(
                    "Like removed", comment_id=str(comment_id), user_id=str(user_id)
                )
                return False

            try:
                await self.like_repository.add_like(comment_id, user_id)
            except IntegrityError:
                logfire.warn(
                    "Duplicate like attempt",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise BusinessRuleViolationError("Comment already liked")

            logfire.info("Like added", comment_id=str(comment_id), user_id=str(user_id))
            return True
