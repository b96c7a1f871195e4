"""create categories and stores

Revision ID: 0003
Revises: 0002
Create Date: 2025-08-17 19:02:40.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0003'
down_revision: Union[str, None] = '0002'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'categories',
        sa.Column('id', sa.String(length=15), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('created', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_categories_created', 'categories', ['created'])

    op.create_table(
        'stores',
        sa.Column('id', sa.String(length=15), primary_key=True),
        sa.Column('store_name', sa.String(), nullable=True),
        sa.Column('store_description', sa.Text(), nullable=True),
        sa.Column('currency', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=True, server_default=sa.true()),
        sa.Column('created', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_stores_created', 'stores', ['created'])


def downgrade() -> None:
    op.drop_index('ix_stores_created', table_name='stores')
    op.drop_table('stores')
    op.drop_index('ix_categories_created', table_name='categories')
    op.drop_table('categories')
