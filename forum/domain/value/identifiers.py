"""Strongly typed identifiers for forum domain entities.

Identifiers are opaque strings with a fixed prefix per entity type
(``thread-``, ``comment-``, ``reply-``, ``user-``). The prefix is part of the
domain convention; the random suffix comes from an injected ``IdGenerator``.
"""

from typing import Callable, NewType
from uuid import uuid4

# Core domain entity identifiers
ThreadId = NewType("ThreadId", str)
CommentId = NewType("CommentId", str)
ReplyId = NewType("ReplyId", str)
UserId = NewType("UserId", str)

THREAD_ID_PREFIX = "thread-"
COMMENT_ID_PREFIX = "comment-"
REPLY_ID_PREFIX = "reply-"
USER_ID_PREFIX = "user-"


class IdGenerator:
    """Produces the random suffix of a new identifier.

    Persistence adapters receive an instance through DI and prepend the
    entity prefix themselves. Any zero-argument callable returning a string
    can stand in for it (tests use ``lambda: "123"``).
    """

    def __init__(self, size: int = 16) -> None:
        self.size = size

    def __call__(self) -> str:
        return uuid4().hex[: self.size]


IdFactory = Callable[[], str]
