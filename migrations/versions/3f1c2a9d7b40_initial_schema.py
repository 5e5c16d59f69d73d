"""initial_schema

Create the forum schema:
- Threads
- Comments (soft-deleted via is_delete)
- Replies (soft-deleted via is_delete)
- Likes (one per user per comment)

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2026-10-18 10:12:04.518220

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "threads",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("body", sa.Text, nullable=False),
        sa.Column(
            "date",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("owner", sa.String(50), nullable=False),
    )
    op.create_index("idx_threads_owner", "threads", ["owner"])

    op.create_table(
        "comments",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column(
            "thread_id",
            sa.String(50),
            sa.ForeignKey("threads.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("owner", sa.String(50), nullable=False),
        sa.Column(
            "date",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column(
            "is_delete", sa.Boolean, nullable=False, server_default=sa.text("false")
        ),
    )
    op.create_index("idx_comments_thread_date", "comments", ["thread_id", "date"])

    op.create_table(
        "replies",
        sa.Column("id", sa.String(50), primary_key=True),
        sa.Column(
            "thread_id",
            sa.String(50),
            sa.ForeignKey("threads.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "comment_id",
            sa.String(50),
            sa.ForeignKey("comments.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("owner", sa.String(50), nullable=False),
        sa.Column(
            "date",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column(
            "is_delete", sa.Boolean, nullable=False, server_default=sa.text("false")
        ),
    )
    op.create_index("idx_replies_thread_date", "replies", ["thread_id", "date"])
    op.create_index("idx_replies_comment_id", "replies", ["comment_id"])

    op.create_table(
        "likes",
        sa.Column(
            "comment_id",
            sa.String(50),
            sa.ForeignKey("comments.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("owner", sa.String(50), nullable=False),
        sa.Column(
            "date",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("comment_id", "owner", name="pk_likes"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("likes")
    op.drop_index("idx_replies_comment_id", table_name="replies")
    op.drop_index("idx_replies_thread_date", table_name="replies")
    op.drop_table("replies")
    op.drop_index("idx_comments_thread_date", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_threads_owner", table_name="threads")
    op.drop_table("threads")
