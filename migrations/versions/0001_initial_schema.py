"""Initial schema: fitness_activity, pics, attendee, rates, wechat_user

Revision ID: 0001_initial_schema
Revises:
Create Date: 2024-05-06 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create every entity table"""

    op.create_table('fitness_activity',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=64), nullable=True),
        sa.Column('description', sa.String(length=128), nullable=True),
        sa.Column('wechat_user_id', sa.String(length=128), nullable=True),
        sa.Column('nick_name', sa.String(length=128), nullable=True),
        sa.Column('avatar', sa.String(length=1024), nullable=True),
        sa.Column('project', sa.String(length=128), nullable=True),
        sa.Column('company_role', sa.String(length=255), nullable=True),
        sa.Column('sign_start_time', sa.DateTime(), nullable=True),
        sa.Column('sign_end_time', sa.DateTime(), nullable=True),
        sa.Column('activity_start_time', sa.DateTime(), nullable=True),
        sa.Column('activity_end_time', sa.DateTime(), nullable=True),
        sa.Column('attend_count', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_fitness_activity_id'), 'fitness_activity', ['id'], unique=False)

    op.create_table('pics',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('src', sa.String(length=1024), nullable=False),
        sa.Column('activity_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['activity_id'], ['fitness_activity.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_pics_id'), 'pics', ['id'], unique=False)

    op.create_table('attendee',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('activity_id', sa.Integer(), nullable=True),
        sa.Column('wechat_user_id', sa.String(length=128), nullable=False),
        sa.Column('nick_name', sa.String(length=128), nullable=True),
        sa.Column('avatar', sa.String(length=1024), nullable=True),
        sa.Column('status', sa.String(length=16), nullable=False),
        sa.Column('join_time', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['activity_id'], ['fitness_activity.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_attendee_id'), 'attendee', ['id'], unique=False)

    op.create_table('rates',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('activity_id', sa.Integer(), nullable=True),
        sa.Column('wechat_user_id', sa.String(length=128), nullable=True),
        sa.Column('nick_name', sa.String(length=128), nullable=True),
        sa.Column('rate', sa.Integer(), nullable=False),
        sa.Column('comments', sa.String(length=512), nullable=True),
        sa.Column('create_time', sa.DateTime(), nullable=True),
        sa.Column('update_time', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_rates_id'), 'rates', ['id'], unique=False)

    op.create_table('wechat_user',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('open_id', sa.String(length=128), nullable=False),
        sa.Column('nick_name', sa.String(length=128), nullable=True),
        sa.Column('avatar', sa.String(length=1024), nullable=True),
        sa.Column('mobile', sa.String(length=32), nullable=True),
        sa.Column('project', sa.String(length=128), nullable=True),
        sa.Column('seat', sa.String(length=64), nullable=True),
        sa.Column('bio', sa.String(length=512), nullable=True),
        sa.Column('skill', sa.String(length=255), nullable=True),
        sa.Column('sex', sa.Integer(), nullable=True),
        sa.Column('company_role', sa.String(length=255), nullable=True),
        sa.Column('is_admin', sa.Boolean(), nullable=False),
        sa.Column('is_banned', sa.Boolean(), nullable=False),
        sa.Column('create_time', sa.DateTime(), nullable=True),
        sa.Column('update_time', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('open_id', name='ux_wechat_user_open_id')
    )
    op.create_index(op.f('ix_wechat_user_id'), 'wechat_user', ['id'], unique=False)


def downgrade() -> None:
    """Drop every entity table"""

    op.drop_index(op.f('ix_wechat_user_id'), table_name='wechat_user')
    op.drop_table('wechat_user')
    op.drop_index(op.f('ix_rates_id'), table_name='rates')
    op.drop_table('rates')
    op.drop_index(op.f('ix_attendee_id'), table_name='attendee')
    op.drop_table('attendee')
    op.drop_index(op.f('ix_pics_id'), table_name='pics')
    op.drop_table('pics')
    op.drop_index(op.f('ix_fitness_activity_id'), table_name='fitness_activity')
    op.drop_table('fitness_activity')
