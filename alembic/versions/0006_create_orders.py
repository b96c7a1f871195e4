"""create orders and order items

Revision ID: 0006
Revises: 0005
Create Date: 2025-08-23 15:55:47.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0006'
down_revision: Union[str, None] = '0005'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'orders',
        sa.Column('id', sa.String(length=15), primary_key=True),
        sa.Column('order_number', sa.String(), nullable=True),
        sa.Column('status', sa.String(), nullable=False, server_default='pending'),
        sa.Column('payment_status', sa.String(), nullable=False, server_default='pending'),
        sa.Column('fulfillment_status', sa.String(), nullable=False, server_default='pending'),
        sa.Column('subtotal', sa.Float(), nullable=True),
        sa.Column('shipping', sa.Float(), nullable=True),
        sa.Column('total', sa.Float(), nullable=True),
        sa.Column('shipping_address', sa.JSON(), nullable=True),
        sa.Column('customer_info', sa.JSON(), nullable=True),
        sa.Column('estimated_delivery', sa.DateTime(timezone=True), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('internal_notes', sa.Text(), nullable=True),
        sa.Column('tracking_number', sa.String(), nullable=True),
        sa.Column('created', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_orders_order_number', 'orders', ['order_number'])
    op.create_index('ix_orders_status', 'orders', ['status'])
    op.create_index('ix_orders_created', 'orders', ['created'])

    op.create_table(
        'order_items',
        sa.Column('id', sa.String(length=15), primary_key=True),
        sa.Column('order_id', sa.String(length=15), sa.ForeignKey('orders.id'), nullable=False),
        sa.Column('product_id', sa.String(length=15), sa.ForeignKey('products.id'), nullable=True),
        sa.Column('product_name', sa.String(), nullable=True),
        sa.Column('product_image', sa.String(), nullable=True),
        sa.Column('quantity', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('price', sa.Float(), nullable=True),
        sa.Column('selected_variants', sa.JSON(), nullable=True),
        sa.Column('created', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_order_items_order_id', 'order_items', ['order_id'])
    op.create_index('ix_order_items_product_id', 'order_items', ['product_id'])
    op.create_index('ix_order_items_created', 'order_items', ['created'])


def downgrade() -> None:
    op.drop_index('ix_order_items_created', table_name='order_items')
    op.drop_index('ix_order_items_product_id', table_name='order_items')
    op.drop_index('ix_order_items_order_id', table_name='order_items')
    op.drop_table('order_items')
    op.drop_index('ix_orders_created', table_name='orders')
    op.drop_index('ix_orders_status', table_name='orders')
    op.drop_index('ix_orders_order_number', table_name='orders')
    op.drop_table('orders')
