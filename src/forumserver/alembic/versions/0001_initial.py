"""initial thread and message tables

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19
"""
from __future__ import annotations
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None

Id = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    op.create_table(
        'thread',
        sa.Column('id', Id, primary_key=True, autoincrement=True),
        sa.Column('container_id', Id, nullable=False),
        sa.Column('user_id', Id, nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_thread'),
    )
    op.create_index('ix_thread_container_id', 'thread', ['container_id'])
    op.create_index('ix_thread_deleted_at', 'thread', ['deleted_at'])

    op.create_table(
        'message',
        sa.Column('id', Id, primary_key=True, autoincrement=True),
        sa.Column('thread_id', Id, nullable=False),
        sa.Column('user_id', Id, nullable=False),
        sa.Column('text', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint('id', name='pk_message'),
        sa.ForeignKeyConstraint(['thread_id'], ['thread.id'], name='fk_message_thread_id_thread'),
    )
    op.create_index('ix_message_thread_id', 'message', ['thread_id'])
    op.create_index('ix_message_deleted_at', 'message', ['deleted_at'])


def downgrade() -> None:
    op.drop_index('ix_message_deleted_at', table_name='message')
    op.drop_index('ix_message_thread_id', table_name='message')
    op.drop_table('message')
    op.drop_index('ix_thread_deleted_at', table_name='thread')
    op.drop_index('ix_thread_container_id', table_name='thread')
    op.drop_table('thread')
