"""Create Locations table

Revision ID: 3f9c2a71d4e8
Revises:
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f9c2a71d4e8'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('Locations',
        sa.Column('ID', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('Name', sa.String(length=50), nullable=False, comment="Display name (e.g., 'Denver')"),
        sa.Column('Code', sa.String(length=5), nullable=False, comment="Short location code (e.g., 'DEN')"),
        sa.Column('Active', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('ID')
    )


def downgrade() -> None:
    op.drop_table('Locations')
