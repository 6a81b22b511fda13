"""SQLAlchemy table definitions for custom links.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import CheckConstraint, Column, Index, Integer, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(255), primary_key=True),  # Verified, lowercased identifier
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# LINKS TABLE
# ============================================================================
links_table = Table(
    "links",
    metadata,
    Column("key", String(2048), primary_key=True),  # Canonical key, e.g. '/foo'
    Column("target", Text, nullable=False),
    # No foreign key: owners may be transferred to users who haven't logged in yet
    Column("owner", String(255), nullable=False),
    Column("clicks", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("clicks >= 0", name="check_clicks_non_negative"),
)

Index("idx_links_owner", links_table.c.owner)
