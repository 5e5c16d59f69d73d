"""Thread entities.

A thread is the root of a discussion: a titled post that comments attach to.
"""

from datetime import datetime
from typing import ClassVar

from forum.domain.model.common import DomainModel, PayloadEntity
from forum.domain.value import ThreadId, UserId


class NewThread(PayloadEntity):
    """Client payload for creating a thread."""

    __error_prefix__: ClassVar[str] = "NEW_THREAD"

    title: str
    body: str


class AddedThread(PayloadEntity):
    """Acknowledgement returned after a thread is stored."""

    __error_prefix__: ClassVar[str] = "ADDED_THREAD"

    id: ThreadId
    title: str
    owner: UserId


class Thread(DomainModel):
    """Stored thread row."""

    id: ThreadId
    title: str
    body: str
    date: datetime
    owner: UserId
