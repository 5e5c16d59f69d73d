"""Comment entities.

Comments belong to exactly one thread. Deletion is soft: the row keeps its
content and is flagged with ``is_delete``; readers see a placeholder instead.
"""

from datetime import datetime
from typing import ClassVar

from forum.domain.model.common import DomainModel, PayloadEntity
from forum.domain.value import CommentId, ThreadId, UserId

DELETED_COMMENT_PLACEHOLDER = "**komentar telah dihapus**"


class NewComment(PayloadEntity):
    """Client payload for creating a comment."""

    __error_prefix__: ClassVar[str] = "NEW_COMMENT"

    content: str


class AddedComment(PayloadEntity):
    """Acknowledgement returned after a comment is stored."""

    __error_prefix__: ClassVar[str] = "ADDED_COMMENT"

    id: CommentId
    content: str
    owner: UserId


class Comment(DomainModel):
    """Stored comment row."""

    id: CommentId
    thread_id: ThreadId
    owner: UserId
    date: datetime
    content: str
    is_delete: bool = False


def mask_comment_content(content: str, is_delete: bool) -> str:
    """Return the content a reader should see for a comment."""
    return DELETED_COMMENT_PLACEHOLDER if is_delete else content
