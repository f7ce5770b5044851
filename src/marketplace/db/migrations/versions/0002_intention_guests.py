"""add guests to intentions

Revision ID: 0002_intention_guests
Revises: 0001_initial
Create Date: 2026-01-20
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0002_intention_guests"
down_revision: Union[str, None] = "0001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Existing rows pick up the server default
    op.add_column(
        "intentions",
        sa.Column("guests", sa.Integer(), server_default="1", nullable=False),
    )


def downgrade() -> None:
    with op.batch_alter_table("intentions") as batch_op:
        batch_op.drop_column("guests")
