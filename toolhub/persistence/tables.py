"""SQLAlchemy table definitions for Toolhub.

Tables are used with SQLAlchemy Core; rows are mapped to the pydantic domain
models by hand in ``mappers``. They match the schema defined in Alembic
migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

content_status = postgresql.ENUM(
    "active", "deleted", name="content_status", create_type=False
)

# ============================================================================
# USERS TABLE (profiles written by the identity provider)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=True),
    Column("image", Text, nullable=True),
    Column(
        "role",
        postgresql.ENUM("user", "admin", name="user_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column("email_verified", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# TOOLS TABLE (only the columns scoring reads)
# ============================================================================
tools_table = Table(
    "tools",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(200), nullable=False),
    Column("category", String(50), nullable=True),
    Column("default_scores", JSONB, nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_tools_category", tools_table.c.category)

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column("category", String(50), nullable=True),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column("is_pinned", Boolean, nullable=False, server_default="false"),
    Column("status", content_status, nullable=False, server_default="active"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "upvotes >= 0 AND downvotes >= 0 AND comment_count >= 0",
        name="thread_counters_non_negative",
    ),
)

Index(
    "idx_threads_status_created_at",
    threads_table.c.status,
    threads_table.c.created_at.desc(),
)
Index("idx_threads_author_id", threads_table.c.author_id)
Index("idx_threads_category", threads_table.c.category)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "thread_id", UUID, ForeignKey("threads.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "parent_comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("reply_count", Integer, nullable=False, server_default="0"),
    Column("status", content_status, nullable=False, server_default="active"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "upvotes >= 0 AND downvotes >= 0 AND reply_count >= 0",
        name="comment_counters_non_negative",
    ),
)

Index("idx_comments_thread_id", comments_table.c.thread_id)
Index("idx_comments_parent_comment_id", comments_table.c.parent_comment_id)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "votable_type",
        postgresql.ENUM("thread", "comment", name="votable_type", create_type=False),
        nullable=False,
    ),
    Column("votable_id", UUID, nullable=False),
    Column(
        "vote_type",
        postgresql.ENUM("upvote", "downvote", name="vote_type", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One vote per user per item
    UniqueConstraint("user_id", "votable_type", "votable_id", name="unique_vote"),
)

Index("idx_votes_user_id", votes_table.c.user_id)
Index("idx_votes_votable", votes_table.c.votable_type, votes_table.c.votable_id)

# ============================================================================
# STRUCTURED REVIEWS TABLE
# ============================================================================
structured_reviews_table = Table(
    "structured_reviews",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("tool_id", UUID, ForeignKey("tools.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("category", String(50), nullable=True),
    Column("metric_scores", JSONB, nullable=False),
    Column("metric_comments", JSONB, nullable=False, server_default="{}"),
    Column("overall_rating", Integer, nullable=False),
    Column("review_text", Text, nullable=True),
    Column(
        "reviewer_type",
        postgresql.ENUM(
            "user",
            "verified",
            "editorial",
            "editor",
            name="reviewer_type",
            create_type=False,
        ),
        nullable=False,
        server_default="user",
    ),
    Column("is_verified", Boolean, nullable=False, server_default="false"),
    Column(
        "status",
        postgresql.ENUM(
            "pending", "approved", "rejected", name="review_status", create_type=False
        ),
        nullable=False,
        server_default="pending",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("overall_rating BETWEEN 1 AND 10", name="overall_rating_range"),
    UniqueConstraint("user_id", "tool_id", name="unique_review_per_tool"),
)

Index(
    "idx_structured_reviews_tool_status",
    structured_reviews_table.c.tool_id,
    structured_reviews_table.c.status,
)

# ============================================================================
# AGGREGATED SCORES TABLE (derived, one row per tool)
# ============================================================================
aggregated_scores_table = Table(
    "aggregated_scores",
    metadata,
    Column(
        "tool_id", UUID, ForeignKey("tools.id", ondelete="CASCADE"), primary_key=True
    ),
    Column("category", String(50), nullable=True),
    Column("metric_scores", JSONB, nullable=False),
    Column("overall_average", Float, nullable=False, server_default="0"),
    Column("total_reviews", Integer, nullable=False, server_default="0"),
    Column("verified_reviews", Integer, nullable=False, server_default="0"),
    Column("editorial_reviews", Integer, nullable=False, server_default="0"),
    Column("confidence_score", Float, nullable=False, server_default="0"),
    Column(
        "last_calculated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

# ============================================================================
# EDITORIAL SCORES TABLE
# ============================================================================
editorial_scores_table = Table(
    "editorial_scores",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("tool_id", UUID, ForeignKey("tools.id", ondelete="CASCADE"), nullable=False),
    Column(
        "editor_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("metric_scores", JSONB, nullable=False),
    Column("notes", Text, nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Partial unique index: at most one active editorial score per tool
Index(
    "idx_editorial_scores_unique_active_tool",
    editorial_scores_table.c.tool_id,
    unique=True,
    postgresql_where=editorial_scores_table.c.is_active,
)
