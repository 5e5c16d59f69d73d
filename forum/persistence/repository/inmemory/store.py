"""Shared state for the in-memory repositories."""

from dataclasses import dataclass, field

from forum.domain.model import Comment, Like, Reply, Thread
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId


@dataclass
class InMemoryStore:
    """Tables held as insertion-ordered dicts.

    One store is shared by all in-memory repositories of a container so that
    existence checks in one repository see rows written through another.
    Tests may seed rows by writing to the dicts directly.
    """

    threads: dict[ThreadId, Thread] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    replies: dict[ReplyId, Reply] = field(default_factory=dict)
    likes: dict[tuple[CommentId, UserId], Like] = field(default_factory=dict)

    def clear(self) -> None:
        self.threads.clear()
        self.comments.clear()
        self.replies.clear()
        self.likes.clear()
