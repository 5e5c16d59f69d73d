"""Reply entities.

Replies attach to a comment (and, through it, a thread). Like comments they
are soft-deleted and masked on read.
"""

from datetime import datetime
from typing import ClassVar

from forum.domain.model.common import DomainModel, PayloadEntity
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId

DELETED_REPLY_PLACEHOLDER = "**balasan telah dihapus**"


class NewReply(PayloadEntity):
    """Client payload for creating a reply."""

    __error_prefix__: ClassVar[str] = "NEW_REPLY"

    content: str


class AddedReply(PayloadEntity):
    """Acknowledgement returned after a reply is stored."""

    __error_prefix__: ClassVar[str] = "ADDED_REPLY"

    id: ReplyId
    content: str
    owner: UserId


class Reply(DomainModel):
    """Stored reply row."""

    id: ReplyId
    thread_id: ThreadId
    comment_id: CommentId
    owner: UserId
    date: datetime
    content: str
    is_delete: bool = False


def mask_reply_content(content: str, is_delete: bool) -> str:
    """Return the content a reader should see for a reply."""
    return DELETED_REPLY_PLACEHOLDER if is_delete else content
