"""add product variants and cart variant selection

Revision ID: 0010
Revises: 0009
Create Date: 2025-09-02 18:28:06.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0010'
down_revision: Union[str, None] = '0009'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column('products', sa.Column('variants', sa.JSON(), nullable=True))

    op.add_column('carts', sa.Column('selected_variants', sa.JSON(), nullable=True))
    op.add_column('carts', sa.Column('variant_price', sa.Float(), nullable=True))
    op.add_column('carts', sa.Column('variant_sku', sa.String(), nullable=True))


def downgrade() -> None:
    with op.batch_alter_table('carts') as batch_op:
        batch_op.drop_column('variant_sku')
        batch_op.drop_column('variant_price')
        batch_op.drop_column('selected_variants')

    with op.batch_alter_table('products') as batch_op:
        batch_op.drop_column('variants')
