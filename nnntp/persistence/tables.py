"""SQLAlchemy table definitions for NNNTP.

Column names are part of the stored format. Changing one breaks existing
databases.
"""

from sqlalchemy import Column, Index, Integer, MetaData, String, Table, Text

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("username", String(255), nullable=False, unique=True),
    Column("password", String(255), nullable=False),  # bcrypt digest
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("group_name", String(255), nullable=False),
    Column("subject", Text, nullable=False),
    Column("body", Text, nullable=False),
    Column("author", String(255), nullable=False),
    Column("author_email", String(255), nullable=False),  # Copied at post time
    sqlite_autoincrement=True,  # Never reuse ids
)

Index("idx_posts_group_name", posts_table.c.group_name)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True),  # Orders comments, not on the wire
    Column("parent_id", Integer, nullable=False),  # No FK: see CommentPolicy
    Column("body", Text, nullable=False),
    Column("author", String(255), nullable=False),
    Column("author_email", String(255), nullable=False),  # Copied at comment time
    sqlite_autoincrement=True,
)

Index("idx_comments_parent_id", comments_table.c.parent_id)
