"""add unique index on event title

Revision ID: c83e27a4f0b6
Revises: 5b1f0c2d9e41
Create Date: 2025-11-02 16:43:12.904511

"""

from collections.abc import Sequence

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "c83e27a4f0b6"
down_revision: str | None = "5b1f0c2d9e41"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    # Fails if duplicate titles already exist; clean those up before upgrading
    op.create_index(op.f("ix_events_title"), "events", ["title"], unique=True)


def downgrade() -> None:
    op.drop_index(op.f("ix_events_title"), table_name="events")
