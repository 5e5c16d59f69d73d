"""Like entity.

A like is a (comment, user) pair. Each user can like a comment at most once
(enforced by the storage primary key).
"""

from datetime import datetime

from forum.domain.model.common import DomainModel
from forum.domain.value import CommentId, UserId


class Like(DomainModel):
    """Stored like row."""

    comment_id: CommentId
    owner: UserId
    date: datetime
