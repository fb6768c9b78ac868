"""Initial schema: categories, assets and depreciation schedule

Revision ID: 001_initial_schema
Revises:
Create Date: 2025-01-01 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create categories table
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('default_useful_life', sa.Integer(), nullable=True),
        sa.Column('default_property_class', sa.String(10), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_categories_id', 'categories', ['id'], unique=False)
    op.create_index('ix_categories_name', 'categories', ['name'], unique=True)

    # Create assets table
    op.create_table(
        'assets',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category_id', sa.Integer(), nullable=True),
        sa.Column('date_placed_in_service', sa.Date(), nullable=False),
        sa.Column('cost', sa.Float(), nullable=False),
        sa.Column('salvage_value', sa.Float(), nullable=False, server_default='0'),
        sa.Column('useful_life_years', sa.Integer(), nullable=False),
        sa.Column('property_class', sa.String(10), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('disposed_date', sa.Date(), nullable=True),
        sa.Column('disposed_value', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['category_id'], ['categories.id']),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_assets_id', 'assets', ['id'], unique=False)
    op.create_index('ix_assets_category_id', 'assets', ['category_id'], unique=False)
    op.create_index('ix_assets_date_placed_in_service', 'assets', ['date_placed_in_service'], unique=False)

    # Create depreciation_schedule table
    op.create_table(
        'depreciation_schedule',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('asset_id', sa.Integer(), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('beginning_book_value', sa.Float(), nullable=False),
        sa.Column('depreciation_expense', sa.Float(), nullable=False),
        sa.Column('accumulated_depreciation', sa.Float(), nullable=False),
        sa.Column('ending_book_value', sa.Float(), nullable=False),
        sa.ForeignKeyConstraint(['asset_id'], ['assets.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('asset_id', 'year', name='uq_schedule_asset_year')
    )
    op.create_index('ix_depreciation_schedule_id', 'depreciation_schedule', ['id'], unique=False)
    op.create_index('ix_depreciation_schedule_asset_id', 'depreciation_schedule', ['asset_id'], unique=False)
    op.create_index('ix_schedule_year', 'depreciation_schedule', ['year'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_schedule_year', table_name='depreciation_schedule')
    op.drop_index('ix_depreciation_schedule_asset_id', table_name='depreciation_schedule')
    op.drop_index('ix_depreciation_schedule_id', table_name='depreciation_schedule')
    op.drop_table('depreciation_schedule')

    op.drop_index('ix_assets_date_placed_in_service', table_name='assets')
    op.drop_index('ix_assets_category_id', table_name='assets')
    op.drop_index('ix_assets_id', table_name='assets')
    op.drop_table('assets')

    op.drop_index('ix_categories_name', table_name='categories')
    op.drop_index('ix_categories_id', table_name='categories')
    op.drop_table('categories')
