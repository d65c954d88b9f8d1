"""create_guest_links

Create the guest links table. A NULL quota or lifetime column means the
link has no bound on it.

Revision ID: 3f1c2a9d7b40
Revises:
Create Date: 2025-11-04 10:12:45.318274

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
        "guest_links",
        sa.Column("id", sa.String(16), primary_key=True),
        sa.Column("label", sa.String(200), nullable=False, server_default=""),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("url_expires", postgresql.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("file_lifetime_days", sa.Integer, nullable=True),
        sa.Column("max_file_bytes", sa.BigInteger, nullable=True),
        sa.Column("max_file_uploads", sa.Integer, nullable=True),
        sa.CheckConstraint(
            "file_lifetime_days IS NULL OR file_lifetime_days > 0",
            name="file_lifetime_days_positive",
        ),
        sa.CheckConstraint(
            "max_file_bytes IS NULL OR max_file_bytes > 0",
            name="max_file_bytes_positive",
        ),
        sa.CheckConstraint(
            "max_file_uploads IS NULL OR max_file_uploads > 0",
            name="max_file_uploads_positive",
        ),
    )

    op.create_index(
        "idx_guest_links_created_at",
        "guest_links",
        [sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_guest_links_created_at", table_name="guest_links")
    op.drop_table("guest_links")
