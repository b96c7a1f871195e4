"""unique index on products.slug

Revision ID: 0008
Revises: 0007
Create Date: 2025-08-27 19:59:15.000000

"""
from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = '0008'
down_revision: Union[str, None] = '0007'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_index('ix_products_slug', 'products', ['slug'], unique=True)


def downgrade() -> None:
    op.drop_index('ix_products_slug', table_name='products')
