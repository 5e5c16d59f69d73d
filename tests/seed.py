"""Row builders that write straight into the in-memory store."""

from datetime import datetime, timedelta, timezone

from forum.domain.model import Comment, Reply, Thread
from forum.persistence.repository.inmemory import InMemoryStore

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


def at(minutes: int) -> datetime:
    """Fixed timestamp ``minutes`` after BASE_TIME, for seeding rows in order."""
    return BASE_TIME + timedelta(minutes=minutes)


def fixed_id() -> str:
    """Id generator returning a constant suffix."""
    return "123"


def seed_thread(
    store: InMemoryStore,
    thread_id: str = "thread-123",
    owner: str = "user-123",
    minutes: int = 0,
) -> Thread:
    """Store a thread row directly."""
    thread = Thread(
        id=thread_id,
        title="sebuah thread",
        body="sebuah body thread",
        date=at(minutes),
        owner=owner,
    )
    store.threads[thread.id] = thread
    return thread


def seed_comment(
    store: InMemoryStore,
    comment_id: str = "comment-123",
    thread_id: str = "thread-123",
    owner: str = "user-123",
    minutes: int = 1,
    content: str = "sebuah comment",
    is_delete: bool = False,
) -> Comment:
    """Store a comment row directly."""
    comment = Comment(
        id=comment_id,
        thread_id=thread_id,
        owner=owner,
        date=at(minutes),
        content=content,
        is_delete=is_delete,
    )
    store.comments[comment.id] = comment
    return comment


def seed_reply(
    store: InMemoryStore,
    reply_id: str = "reply-123",
    comment_id: str = "comment-123",
    thread_id: str = "thread-123",
    owner: str = "user-123",
    minutes: int = 2,
    content: str = "sebuah balasan",
    is_delete: bool = False,
) -> Reply:
    """Store a reply row directly."""
    reply = Reply(
        id=reply_id,
        thread_id=thread_id,
        comment_id=comment_id,
        owner=owner,
        date=at(minutes),
        content=content,
        is_delete=is_delete,
    )
    store.replies[reply.id] = reply
    return reply
