"""add store checkout and appearance fields

Revision ID: 0007
Revises: 0006
Create Date: 2025-08-23 17:00:14.000000

Folds the store updates that added payment_method, hero_background,
is_cart_enabled and the multi-image category_images field.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0007'
down_revision: Union[str, None] = '0006'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column('stores', sa.Column('payment_method', sa.String(), nullable=True))
    op.add_column('stores', sa.Column('hero_background', sa.String(), nullable=True))
    op.add_column(
        'stores',
        sa.Column('is_cart_enabled', sa.Boolean(), nullable=True, server_default=sa.true()),
    )
    op.add_column('stores', sa.Column('category_images', sa.JSON(), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table('stores') as batch_op:
        batch_op.drop_column('category_images')
        batch_op.drop_column('is_cart_enabled')
        batch_op.drop_column('hero_background')
        batch_op.drop_column('payment_method')
