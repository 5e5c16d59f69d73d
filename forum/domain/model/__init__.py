"""Domain model entities for the forum."""

from forum.domain.model.comment import (
    DELETED_COMMENT_PLACEHOLDER,
    AddedComment,
    Comment,
    NewComment,
    mask_comment_content,
)
from forum.domain.model.common import DomainModel, PayloadEntity
from forum.domain.model.detail import CommentDetail, ReplyDetail, ThreadDetail
from forum.domain.model.like import Like
from forum.domain.model.reply import (
    DELETED_REPLY_PLACEHOLDER,
    AddedReply,
    NewReply,
    Reply,
    mask_reply_content,
)
from forum.domain.model.thread import AddedThread, NewThread, Thread

__all__ = [
    "DomainModel",
    "PayloadEntity",
    # Threads
    "NewThread",
    "AddedThread",
    "Thread",
    # Comments
    "NewComment",
    "AddedComment",
    "Comment",
    "mask_comment_content",
    "DELETED_COMMENT_PLACEHOLDER",
    # Replies
    "NewReply",
    "AddedReply",
    "Reply",
    "mask_reply_content",
    "DELETED_REPLY_PLACEHOLDER",
    # Likes
    "Like",
    # Projections
    "ReplyDetail",
    "CommentDetail",
    "ThreadDetail",
]
