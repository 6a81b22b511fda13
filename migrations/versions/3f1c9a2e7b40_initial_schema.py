"""initial_schema

Create the schema for custom links:
- Users (verified, lowercased identifiers)
- Links (canonical key, redirect target, owner, click count)

Revision ID: 3f1c9a2e7b40
Revises:
Create Date: 2026-10-19 10:12:05.418230

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c9a2e7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", sa.String(255), primary_key=True),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    )

    op.create_table(
        "links",
        sa.Column("key", sa.String(2048), primary_key=True),
        sa.Column("target", sa.Text, nullable=False),
        sa.Column("owner", sa.String(255), nullable=False),
        sa.Column("clicks", sa.Integer, nullable=False, server_default="0"),
        sa.Column(
            "created_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.CheckConstraint("clicks >= 0", name="check_clicks_non_negative"),
    )

    op.create_index("idx_links_owner", "links", ["owner"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_links_owner", table_name="links")
    op.drop_table("links")
    op.drop_table("users")
