"""initial_schema

Create the foundational schema for Toolhub:
- Users (profiles written by the identity provider)
- Tools (category and editorial default scores)
- Threads and comments (soft-deleted, with denormalized counters)
- Votes (one up/down vote per user per thread or comment)
- Structured reviews, aggregated scores and editorial scores

Revision ID: 3f1c2a9b7d40
Revises:
Create Date: 2026-10-18 10:12:44.512031

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2a9b7d40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ENUM_TYPES = {
    "content_status": ("active", "deleted"),
    "user_role": ("user", "admin"),
    "votable_type": ("thread", "comment"),
    "vote_type": ("upvote", "downvote"),
    "reviewer_type": ("user", "verified", "editorial", "editor"),
    "review_status": ("pending", "approved", "rejected"),
}


def _enum(name: str) -> postgresql.ENUM:
    return postgresql.ENUM(*ENUM_TYPES[name], name=name, create_type=False)


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.UUID(),
        server_default=sa.text("uuid_generate_v4()"),
        nullable=False,
    )


def _timestamp_column(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # Create ENUM types (idempotent)
    for name, values in ENUM_TYPES.items():
        labels = ", ".join(f"'{value}'" for value in values)
        op.execute(f"""
            DO $$ BEGIN
                CREATE TYPE {name} AS ENUM ({labels});
            EXCEPTION
                WHEN duplicate_object THEN null;
            END $$;
        """)

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        sa.Column(
            "role", _enum("user_role"), nullable=False, server_default="user"
        ),
        sa.Column(
            "email_verified", sa.Boolean(), nullable=False, server_default="false"
        ),
        _timestamp_column("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # TOOLS table
    # ========================================================================
    op.create_table(
        "tools",
        _id_column(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("category", sa.String(50), nullable=True),
        sa.Column(
            "default_scores",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        _timestamp_column("created_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_tools_category", "tools", ["category"])

    # ========================================================================
    # THREADS table
    # ========================================================================
    op.create_table(
        "threads",
        _id_column(),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("category", sa.String(50), nullable=True),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comment_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_pinned", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "status",
            _enum("content_status"),
            nullable=False,
            server_default="active",
        ),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            "upvotes >= 0 AND downvotes >= 0 AND comment_count >= 0",
            name="thread_counters_non_negative",
        ),
    )
    op.execute(
        "CREATE INDEX idx_threads_status_created_at "
        "ON threads (status, created_at DESC)"
    )
    op.create_index("idx_threads_author_id", "threads", ["author_id"])
    op.create_index("idx_threads_category", "threads", ["category"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _id_column(),
        sa.Column("thread_id", sa.UUID(), nullable=False),
        sa.Column("parent_comment_id", sa.UUID(), nullable=True),
        sa.Column("author_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("reply_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "status",
            _enum("content_status"),
            nullable=False,
            server_default="active",
        ),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["thread_id"], ["threads.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["parent_comment_id"], ["comments.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            "upvotes >= 0 AND downvotes >= 0 AND reply_count >= 0",
            name="comment_counters_non_negative",
        ),
    )
    op.create_index("idx_comments_thread_id", "comments", ["thread_id"])
    op.create_index(
        "idx_comments_parent_comment_id", "comments", ["parent_comment_id"]
    )
    op.create_index("idx_comments_author_id", "comments", ["author_id"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        _id_column(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("votable_type", _enum("votable_type"), nullable=False),
        sa.Column("votable_id", sa.UUID(), nullable=False),
        sa.Column("vote_type", _enum("vote_type"), nullable=False),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint(
            "user_id", "votable_type", "votable_id", name="unique_vote"
        ),
    )
    op.create_index("idx_votes_user_id", "votes", ["user_id"])
    op.create_index("idx_votes_votable", "votes", ["votable_type", "votable_id"])

    # ========================================================================
    # STRUCTURED_REVIEWS table
    # ========================================================================
    op.create_table(
        "structured_reviews",
        _id_column(),
        sa.Column("tool_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("category", sa.String(50), nullable=True),
        sa.Column("metric_scores", postgresql.JSONB(), nullable=False),
        sa.Column(
            "metric_comments",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'{}'::jsonb"),
        ),
        sa.Column("overall_rating", sa.Integer(), nullable=False),
        sa.Column("review_text", sa.Text(), nullable=True),
        sa.Column(
            "reviewer_type",
            _enum("reviewer_type"),
            nullable=False,
            server_default="user",
        ),
        sa.Column("is_verified", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "status",
            _enum("review_status"),
            nullable=False,
            server_default="pending",
        ),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["tool_id"], ["tools.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.CheckConstraint(
            "overall_rating BETWEEN 1 AND 10", name="overall_rating_range"
        ),
        sa.UniqueConstraint("user_id", "tool_id", name="unique_review_per_tool"),
    )
    op.create_index(
        "idx_structured_reviews_tool_status",
        "structured_reviews",
        ["tool_id", "status"],
    )

    # ========================================================================
    # AGGREGATED_SCORES table (derived, one row per tool)
    # ========================================================================
    op.create_table(
        "aggregated_scores",
        sa.Column("tool_id", sa.UUID(), nullable=False),
        sa.Column("category", sa.String(50), nullable=True),
        sa.Column("metric_scores", postgresql.JSONB(), nullable=False),
        sa.Column("overall_average", sa.Float(), nullable=False, server_default="0"),
        sa.Column("total_reviews", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("verified_reviews", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "editorial_reviews", sa.Integer(), nullable=False, server_default="0"
        ),
        sa.Column("confidence_score", sa.Float(), nullable=False, server_default="0"),
        _timestamp_column("last_calculated_at"),
        sa.PrimaryKeyConstraint("tool_id"),
        sa.ForeignKeyConstraint(["tool_id"], ["tools.id"], ondelete="CASCADE"),
    )

    # ========================================================================
    # EDITORIAL_SCORES table
    # ========================================================================
    op.create_table(
        "editorial_scores",
        _id_column(),
        sa.Column("tool_id", sa.UUID(), nullable=False),
        sa.Column("editor_id", sa.UUID(), nullable=False),
        sa.Column("metric_scores", postgresql.JSONB(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default="true"),
        _timestamp_column("created_at"),
        _timestamp_column("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["tool_id"], ["tools.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["editor_id"], ["users.id"], ondelete="CASCADE"),
    )
    # At most one active editorial score per tool
    op.create_index(
        "idx_editorial_scores_unique_active_tool",
        "editorial_scores",
        ["tool_id"],
        unique=True,
        postgresql_where=sa.text("is_active"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("editorial_scores")
    op.drop_table("aggregated_scores")
    op.drop_table("structured_reviews")
    op.drop_table("votes")
    op.drop_table("comments")
    op.drop_table("threads")
    op.drop_table("tools")
    op.drop_table("users")

    for name in reversed(list(ENUM_TYPES)):
        op.execute(f"DROP TYPE IF EXISTS {name}")

    # Extension left in place; it may be shared with other schemas
