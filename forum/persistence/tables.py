"""SQLAlchemy table definitions for the forum.

They match the schema defined in Alembic migrations. Owners are opaque user
ids issued by the external identity service, so there is no users table.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", String(50), primary_key=True),
    Column("title", Text, nullable=False),
    Column("body", Text, nullable=False),
    Column("date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    Column("owner", String(50), nullable=False),
)

Index("idx_threads_owner", threads_table.c.owner)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", String(50), primary_key=True),
    Column(
        "thread_id",
        String(50),
        ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("owner", String(50), nullable=False),
    Column("date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    Column("content", Text, nullable=False),
    Column("is_delete", Boolean, nullable=False, server_default="false"),
)

Index("idx_comments_thread_date", comments_table.c.thread_id, comments_table.c.date)

# ============================================================================
# REPLIES TABLE
# ============================================================================
replies_table = Table(
    "replies",
    metadata,
    Column("id", String(50), primary_key=True),
    Column(
        "thread_id",
        String(50),
        ForeignKey("threads.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "comment_id",
        String(50),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("owner", String(50), nullable=False),
    Column("date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    Column("content", Text, nullable=False),
    Column("is_delete", Boolean, nullable=False, server_default="false"),
)

Index("idx_replies_thread_date", replies_table.c.thread_id, replies_table.c.date)
Index("idx_replies_comment_id", replies_table.c.comment_id)

# ============================================================================
# LIKES TABLE
# ============================================================================
likes_table = Table(
    "likes",
    metadata,
    Column(
        "comment_id",
        String(50),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("owner", String(50), nullable=False),
    Column("date", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"),
    # One like per user per comment
    PrimaryKeyConstraint("comment_id", "owner", name="pk_likes"),
)
