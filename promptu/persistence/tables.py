"""SQLAlchemy table definitions for Promptu.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USERS TABLE (read model of the identity provider's accounts)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(255), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_created_at", users_table.c.created_at)

# ============================================================================
# ITEMS TABLE (content items with denormalized engagement counters)
# ============================================================================
items_table = Table(
    "items",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("slug", String(100), nullable=False, unique=True),
    Column("title", String(300), nullable=False),
    Column(
        "content_type",
        postgresql.ENUM(
            "system", "user", "developer", name="content_type", create_type=False
        ),
        nullable=False,
    ),
    # Categories are owned by the content service, so no foreign key here
    Column("category_id", UUID, nullable=True),
    Column(
        "author_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("upvote_count", Integer, nullable=False, server_default="0"),
    Column("view_count", Integer, nullable=False, server_default="0"),
    Column("copy_count", Integer, nullable=False, server_default="0"),
    Column("published", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvote_count >= 0", name="upvote_count_non_negative"),
    CheckConstraint("view_count >= 0", name="view_count_non_negative"),
    CheckConstraint("copy_count >= 0", name="copy_count_non_negative"),
)

Index("idx_items_created_at", items_table.c.created_at.desc())
Index("idx_items_author_id", items_table.c.author_id)
Index("idx_items_content_type", items_table.c.content_type)
Index("idx_items_category_id", items_table.c.category_id)

# ============================================================================
# VOTES TABLE (the vote ledger)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("item_id", UUID, ForeignKey("items.id", ondelete="CASCADE"), nullable=False),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "vote_type",
        Enum("upvote", name="vote_type", create_type=False),
        nullable=False,
        server_default="upvote",
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("item_id", "user_id", name="uq_votes_item_user"),
)

Index("idx_votes_user_id", votes_table.c.user_id)
