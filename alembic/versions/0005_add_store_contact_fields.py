"""add store contact fields

Revision ID: 0005
Revises: 0004
Create Date: 2025-08-21 18:05:24.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0005'
down_revision: Union[str, None] = '0004'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

def contact_columns():
    return [
        sa.Column('address', sa.String(), nullable=True),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('email', sa.String(), nullable=True),
        sa.Column('website', sa.String(), nullable=True),
        sa.Column('about_us', sa.Text(), nullable=True),
        sa.Column('social_links', sa.JSON(), nullable=True),
        sa.Column('business_hours', sa.JSON(), nullable=True),
    ]


def upgrade() -> None:
    for column in contact_columns():
        op.add_column('stores', column)


def downgrade() -> None:
    with op.batch_alter_table('stores') as batch_op:
        for column in reversed(contact_columns()):
            batch_op.drop_column(column.name)
