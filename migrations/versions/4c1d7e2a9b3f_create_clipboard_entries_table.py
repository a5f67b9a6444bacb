"""create_clipboard_entries_table

Revision ID: 4c1d7e2a9b3f
Revises:
Create Date: 2026-10-18 09:12:44.318502

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4c1d7e2a9b3f'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the clipboard_entries table with its JSON tag column."""
    op.create_table('clipboard_entries',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('title', sa.Text(), nullable=True),
        sa.Column('is_pinned', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('is_favorite', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('tags', sa.JSON(), server_default='[]', nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column('usage_count', sa.Integer(), server_default='0', nullable=False),
        sa.Column('last_used_at', sa.DateTime(), nullable=True),
        sa.CheckConstraint('usage_count >= 0', name='ck_clipboard_entries_usage_count'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(
        'ix_clipboard_entries_created_at', 'clipboard_entries', ['created_at'], unique=False
    )
    op.create_index(
        'ix_clipboard_entries_pinned_created',
        'clipboard_entries',
        ['is_pinned', 'created_at'],
        unique=False,
    )


def downgrade() -> None:
    """Drop the clipboard_entries table."""
    op.drop_index('ix_clipboard_entries_pinned_created', table_name='clipboard_entries')
    op.drop_index('ix_clipboard_entries_created_at', table_name='clipboard_entries')
    op.drop_table('clipboard_entries')
