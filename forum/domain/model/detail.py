"""Read projections for the thread detail view.

These are assembled per request from stored rows and never persisted.
Content is already masked by the time a projection is built.
"""

from datetime import datetime

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId


class ReplyDetail(DomainModel):
    id: ReplyId
    owner: UserId
    date: datetime
    content: str


class CommentDetail(DomainModel):
    id: CommentId
    owner: UserId
    date: datetime
    content: str
    like_count: int = Field(default=0, ge=0)
    replies: list[ReplyDetail] = Field(default_factory=list)


class ThreadDetail(DomainModel):
    id: ThreadId
    title: str
    body: str
    date: datetime
    owner: UserId
    comments: list[CommentDetail] = Field(default_factory=list)
