"""create carts

Revision ID: 0004
Revises: 0003
Create Date: 2025-08-20 17:49:15.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0004'
down_revision: Union[str, None] = '0003'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'carts',
        sa.Column('id', sa.String(length=15), primary_key=True),
        sa.Column('product_id', sa.String(length=15), sa.ForeignKey('products.id'), nullable=True),
        sa.Column('quantity', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('price', sa.Float(), nullable=True),
        sa.Column('in_stock', sa.Boolean(), nullable=True, server_default=sa.true()),
        sa.Column('created', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_carts_product_id', 'carts', ['product_id'])
    op.create_index('ix_carts_created', 'carts', ['created'])


def downgrade() -> None:
    op.drop_index('ix_carts_created', table_name='carts')
    op.drop_index('ix_carts_product_id', table_name='carts')
    op.drop_table('carts')
