"""SQLAlchemy table definitions for roster.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    ForeignKey,
    Index,
    MetaData,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", Text, nullable=False),
    Column("email", Text, nullable=False, unique=True),
    Column("phone", Text, nullable=False),
    Column("date_of_birth", Date, nullable=False),
    Column("profile_image", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_created_at", users_table.c.created_at)

# ============================================================================
# FOLLOWS TABLE (directed edges, one per ordered pair)
# ============================================================================
follows_table = Table(
    "follows",
    metadata,
    Column(
        "follower_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "following_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("follower_id <> following_id", name="ck_follows_no_self"),
)

# The primary key covers lookups by follower; followers-of needs its own index
Index("idx_follows_following_id", follows_table.c.following_id)
