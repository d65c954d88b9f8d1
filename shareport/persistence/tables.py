"""SQLAlchemy table definitions for shareport.

These definitions are used with SQLAlchemy Core; rows are mapped to the
immutable domain models by hand (see mappers.py). They match the schema
defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# GUEST LINKS TABLE
# ============================================================================
# NULL in a quota or lifetime column means "no bound" / "never expires".
guest_links_table = Table(
    "guest_links",
    metadata,
    Column("id", String(16), primary_key=True),
    Column("label", String(200), nullable=False, server_default=""),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column("url_expires", TIMESTAMP(timezone=True), nullable=False),
    Column("file_lifetime_days", Integer, nullable=True),
    Column("max_file_bytes", BigInteger, nullable=True),
    Column("max_file_uploads", Integer, nullable=True),
    CheckConstraint(
        "file_lifetime_days IS NULL OR file_lifetime_days > 0",
        name="file_lifetime_days_positive",
    ),
    CheckConstraint(
        "max_file_bytes IS NULL OR max_file_bytes > 0",
        name="max_file_bytes_positive",
    ),
    CheckConstraint(
        "max_file_uploads IS NULL OR max_file_uploads > 0",
        name="max_file_uploads_positive",
    ),
)

Index("idx_guest_links_created_at", guest_links_table.c.created_at.desc())
