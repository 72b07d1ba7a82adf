"""create customer_car table

Revision ID: 004
Revises: 003
Create Date: 2025-05-24 14:00:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "004"
down_revision: Union[str, None] = "003"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "customer_car",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("car_id", sa.String(64), nullable=False),
        sa.Column("cust_id", sa.String(64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_by", sa.String(255), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_by", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_customer_car_car_id", "customer_car", ["car_id"], unique=False)
    op.create_index("ix_customer_car_cust_id", "customer_car", ["cust_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_customer_car_cust_id", table_name="customer_car")
    op.drop_index("ix_customer_car_car_id", table_name="customer_car")
    op.drop_table("customer_car")
