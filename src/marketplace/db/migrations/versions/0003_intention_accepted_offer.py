"""record the accepted offer on closed intentions

Revision ID: 0003_intention_accepted_offer
Revises: 0002_intention_guests
Create Date: 2026-02-03
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0003_intention_accepted_offer"
down_revision: Union[str, None] = "0002_intention_guests"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Plain integer: SQLite can't ALTER in a foreign key, and offers already
    # reference intentions, so ownership is checked when closing instead.
    op.add_column(
        "intentions",
        sa.Column("accepted_offer_id", sa.Integer(), nullable=True),
    )


def downgrade() -> None:
    with op.batch_alter_table("intentions") as batch_op:
        batch_op.drop_column("accepted_offer_id")
