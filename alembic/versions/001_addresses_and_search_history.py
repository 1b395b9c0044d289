"""addresses and search_history tables

Revision ID: 001
Revises:
Create Date: 2026-10-18 09:00:00.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('addresses',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('address_text', sa.Text(), nullable=False),
        sa.Column('address_key', sa.Text(), nullable=False),
        sa.Column('city', sa.String(length=100), nullable=True),
        sa.Column('state', sa.String(length=100), nullable=True),
        sa.Column('country', sa.String(length=100), nullable=True),
        sa.Column('postal_code', sa.String(length=20), nullable=True),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.Column('search_count', sa.Integer(), server_default='1', nullable=False),
        sa.Column('last_searched_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'address_key', name='uq_addresses_user_address_key'),
    )
    op.create_index('ix_addresses_user_last_searched', 'addresses', ['user_id', 'last_searched_at'], unique=False)
    op.create_index('ix_addresses_city_state', 'addresses', ['city', 'state'], unique=False)

    op.create_table('search_history',
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('address_id', sa.Uuid(), nullable=False),
        sa.Column('search_query', sa.Text(), nullable=False),
        sa.Column('results_count', sa.Integer(), nullable=False),
        sa.Column('search_duration_ms', sa.Integer(), nullable=False),
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['address_id'], ['addresses.id'], name='fk_search_history_address_id', ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_search_history_user_created', 'search_history', ['user_id', 'created_at'], unique=False)
    op.create_index('ix_search_history_address_id', 'search_history', ['address_id'], unique=False)
    op.create_index('ix_search_history_created_at', 'search_history', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_search_history_created_at', table_name='search_history')
    op.drop_index('ix_search_history_address_id', table_name='search_history')
    op.drop_index('ix_search_history_user_created', table_name='search_history')
    op.drop_table('search_history')

    op.drop_index('ix_addresses_city_state', table_name='addresses')
    op.drop_index('ix_addresses_user_last_searched', table_name='addresses')
    op.drop_table('addresses')
