"""create products

Revision ID: 0001
Revises:
Create Date: 2025-08-17 17:47:26.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'products',
        sa.Column('id', sa.String(length=15), primary_key=True),
        sa.Column('title', sa.String(), nullable=False, server_default=''),
        sa.Column('slug', sa.String(), nullable=True),
        sa.Column('sku', sa.String(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('stock_quantity', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('reorder_level', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('cost', sa.Float(), nullable=True),
        sa.Column('profit', sa.Float(), nullable=True),
        sa.Column('price', sa.Float(), nullable=True),
        sa.Column('base_price', sa.Float(), nullable=True),
        sa.Column('old_price', sa.Float(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=True, server_default=sa.true()),
        sa.Column('created', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_products_created', 'products', ['created'])


def downgrade() -> None:
    op.drop_index('ix_products_created', table_name='products')
    op.drop_table('products')
