"""create notifications

Revision ID: 0011
Revises: 0010
Create Date: 2025-09-03 17:12:40.000000

No unique constraint on (type, product): the low-stock hooks keep one
notification per product themselves.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0011'
down_revision: Union[str, None] = '0010'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'notifications',
        sa.Column('id', sa.String(length=15), primary_key=True),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('order_id', sa.String(length=15), sa.ForeignKey('orders.id'), nullable=True),
        sa.Column('product_id', sa.String(length=15), sa.ForeignKey('products.id'), nullable=True),
        sa.Column('created', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_notifications_type', 'notifications', ['type'])
    op.create_index('ix_notifications_order_id', 'notifications', ['order_id'])
    op.create_index('ix_notifications_product_id', 'notifications', ['product_id'])
    op.create_index('ix_notifications_created', 'notifications', ['created'])


def downgrade() -> None:
    op.drop_index('ix_notifications_created', table_name='notifications')
    op.drop_index('ix_notifications_product_id', table_name='notifications')
    op.drop_index('ix_notifications_order_id', table_name='notifications')
    op.drop_index('ix_notifications_type', table_name='notifications')
    op.drop_table('notifications')
