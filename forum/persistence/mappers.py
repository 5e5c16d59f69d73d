"""Mappers for converting database rows into domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from forum.domain.model import Comment, Reply, Thread
from forum.domain.value import CommentId, ReplyId, ThreadId, UserId


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict

    Returns:
        Thread domain model
    """
    return Thread(
        id=ThreadId(row["id"]),
        title=row["title"],
        body=row["body"],
        date=row["date"],
        owner=UserId(row["owner"]),
    )


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        thread_id=ThreadId(row["thread_id"]),
        owner=UserId(row["owner"]),
        date=row["date"],
        content=row["content"],
        is_delete=row.get("is_delete", False),
    )


def row_to_reply(row: Dict[str, Any]) -> Reply:
    """Convert database row to Reply domain model.

    Args:
        row: Database row as dict

    Returns:
        Reply domain model
    """
    return Reply(
        id=ReplyId(row["id"]),
        thread_id=ThreadId(row["thread_id"]),
        comment_id=CommentId(row["comment_id"]),
        owner=UserId(row["owner"]),
        date=row["date"],
        content=row["content"],
        is_delete=row.get("is_delete", False),
    )


