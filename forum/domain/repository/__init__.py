"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from forum.domain.repository.comment import CommentRepository
from forum.domain.repository.like import LikeRepository
from forum.domain.repository.reply import ReplyRepository
from forum.domain.repository.thread import ThreadRepository

__all__ = [
    "ThreadRepository",
    "CommentRepository",
    "ReplyRepository",
    "LikeRepository",
]
