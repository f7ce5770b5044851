"""users, hotels, intentions, offers

Revision ID: 0001_initial
Revises:
Create Date: 2026-01-12
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "0001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
    )

    op.create_table(
        "hotels",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("min_price", sa.Integer(), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("rating", sa.Float(), server_default="4.0", nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("amenities", sa.Text(), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("phone", sa.String(30), nullable=True),
    )
    op.create_index("ix_hotels_city", "hotels", ["city"])

    op.create_table(
        "intentions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("city", sa.String(100), nullable=False),
        sa.Column("check_in", sa.Date(), nullable=False),
        sa.Column("check_out", sa.Date(), nullable=False),
        sa.Column("max_price", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(20), server_default="active", nullable=False),
        sa.CheckConstraint("status IN ('active', 'closed')", name="ck_intentions_status"),
    )
    op.create_index("ix_intentions_user_id", "intentions", ["user_id"])
    op.create_index("ix_intentions_city", "intentions", ["city"])

    op.create_table(
        "offers",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "intention_id", sa.Integer(), sa.ForeignKey("intentions.id"), nullable=False
        ),
        sa.Column("hotel_id", sa.Integer(), sa.ForeignKey("hotels.id"), nullable=False),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("extras", sa.Text(), server_default="", nullable=False),
        sa.Column("updates_count", sa.Integer(), server_default="0", nullable=False),
        sa.UniqueConstraint(
            "intention_id", "hotel_id", name="uq_offers_intention_id_hotel_id"
        ),
    )


def downgrade() -> None:
    op.drop_table("offers")
    op.drop_index("ix_intentions_city", table_name="intentions")
    op.drop_index("ix_intentions_user_id", table_name="intentions")
    op.drop_table("intentions")
    op.drop_index("ix_hotels_city", table_name="hotels")
    op.drop_table("hotels")
    op.drop_table("users")
