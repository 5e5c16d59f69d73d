"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    COMMENT_ID_PREFIX,
    REPLY_ID_PREFIX,
    THREAD_ID_PREFIX,
    USER_ID_PREFIX,
    CommentId,
    IdFactory,
    IdGenerator,
    ReplyId,
    ThreadId,
    UserId,
)

__all__ = [
    # Identifiers
    "ThreadId",
    "CommentId",
    "ReplyId",
    "UserId",
    # Prefixes
    "THREAD_ID_PREFIX",
    "COMMENT_ID_PREFIX",
    "REPLY_ID_PREFIX",
    "USER_ID_PREFIX",
    # Generation
    "IdGenerator",
    "IdFactory",
]
