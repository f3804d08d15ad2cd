"""Create properties and spaces tables

Revision ID: 3c1f9a2d7b40
Revises:
Create Date: 2025-09-02 18:12:04.118923

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3c1f9a2d7b40'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create properties table
    op.create_table('properties',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('address', sa.String(length=500), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('price', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    # Create indexes for properties
    op.create_index('idx_properties_type', 'properties', ['type'], unique=False)
    op.create_index('idx_properties_price', 'properties', ['price'], unique=False)

    # Create spaces table
    op.create_table('spaces',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('property_id', sa.Integer(), nullable=False),
        sa.Column('type', sa.String(length=50), nullable=False),
        sa.Column('size', sa.Float(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(['property_id'], ['properties.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id')
    )

    # Create indexes for spaces
    op.create_index('idx_spaces_type', 'spaces', ['type'], unique=False)
    op.create_index('idx_spaces_size', 'spaces', ['size'], unique=False)
    op.create_index('idx_spaces_property_id', 'spaces', ['property_id'], unique=False)


def downgrade() -> None:
    # Drop spaces first because of the foreign key
    op.drop_index('idx_spaces_property_id', table_name='spaces')
    op.drop_index('idx_spaces_size', table_name='spaces')
    op.drop_index('idx_spaces_type', table_name='spaces')
    op.drop_table('spaces')

    op.drop_index('idx_properties_price', table_name='properties')
    op.drop_index('idx_properties_type', table_name='properties')
    op.drop_table('properties')
