"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .like import InMemoryLikeRepository
from .reply import InMemoryReplyRepository
from .store import InMemoryStore
from .thread import InMemoryThreadRepository

__all__ = [
    "InMemoryStore",
    "InMemoryThreadRepository",
    "InMemoryCommentRepository",
    "InMemoryReplyRepository",
    "InMemoryLikeRepository",
]
