"""Initial schema: users, sessions, training and social tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id(name: str = 'id', **kwargs) -> sa.Column:
    return sa.Column(name, sqlmodel.sql.sqltypes.AutoString(length=36), nullable=False, **kwargs)


def _user_fk(name: str) -> sa.Column:
    return sa.Column(name, sqlmodel.sql.sqltypes.AutoString(length=36), sa.ForeignKey('users.id'), nullable=False)


def upgrade() -> None:
    """Create all tables."""
    op.create_table('users', _id(),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('hashed_password', sqlmodel.sql.sqltypes.AutoString(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table('refresh_tokens', _id(), _user_fk('user_id'),
        sa.Column('token_hash', sqlmodel.sql.sqltypes.AutoString(length=64), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('expires_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_refresh_tokens_user_id'), 'refresh_tokens', ['user_id'])
    op.create_index(op.f('ix_refresh_tokens_token_hash'), 'refresh_tokens', ['token_hash'], unique=True)
    op.create_index(op.f('ix_refresh_tokens_created_at'), 'refresh_tokens', ['created_at'])

    op.create_table('exercises', _id(), _user_fk('user_id'),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('is_base', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'name', name='uq_exercise_user_name'))
    op.create_index(op.f('ix_exercises_user_id'), 'exercises', ['user_id'])

    op.create_table('plans', _id(), _user_fk('user_id'),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('status', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False, server_default='draft'),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_plans_user_id'), 'plans', ['user_id'])
    op.create_index(op.f('ix_plans_updated_at'), 'plans', ['updated_at'])

    op.create_table('plan_versions', _id(),
        sa.Column('plan_id', sqlmodel.sql.sqltypes.AutoString(length=36), sa.ForeignKey('plans.id'), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('title', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('plan_id', 'version', name='uq_plan_version'))
    op.create_index(op.f('ix_plan_versions_plan_id'), 'plan_versions', ['plan_id'])

    op.create_table('plan_comments', _id(),
        sa.Column('plan_id', sqlmodel.sql.sqltypes.AutoString(length=36), sa.ForeignKey('plans.id'), nullable=False),
        _user_fk('coach_id'), _user_fk('athlete_id'),
        sa.Column('comment', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_plan_comments_plan_id'), 'plan_comments', ['plan_id'])
    op.create_index(op.f('ix_plan_comments_coach_id'), 'plan_comments', ['coach_id'])

    op.create_table('workouts', _id(), _user_fk('user_id'),
        sa.Column('exercise', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('performed_at', sa.DateTime(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_workouts_user_id'), 'workouts', ['user_id'])
    op.create_index(op.f('ix_workouts_exercise'), 'workouts', ['exercise'])
    op.create_index(op.f('ix_workouts_performed_at'), 'workouts', ['performed_at'])

    op.create_table('coach_links', _id(), _user_fk('coach_id'), _user_fk('athlete_id'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('coach_id', 'athlete_id', name='uq_coach_athlete'))
    op.create_index(op.f('ix_coach_links_coach_id'), 'coach_links', ['coach_id'])
    op.create_index(op.f('ix_coach_links_athlete_id'), 'coach_links', ['athlete_id'])

    op.create_table('user_profiles', _user_fk('user_id'),
        sa.Column('first_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False, server_default=''),
        sa.Column('last_name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False, server_default=''),
        sa.Column('contacts', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False, server_default=''),
        sa.Column('city', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False, server_default=''),
        sa.Column('weight_category', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False, server_default=''),
        sa.Column('current_weight', sa.Float(), nullable=False, server_default='0'),
        sa.Column('bio', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('user_id'))

    op.create_table('user_follows', _id(), _user_fk('follower_id'), _user_fk('followee_id'),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('follower_id', 'followee_id', name='uq_follower_followee'))
    op.create_index(op.f('ix_user_follows_follower_id'), 'user_follows', ['follower_id'])
    op.create_index(op.f('ix_user_follows_followee_id'), 'user_follows', ['followee_id'])


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table('user_follows')
    op.drop_table('user_profiles')
    op.drop_table('coach_links')
    op.drop_table('workouts')
    op.drop_table('plan_comments')
    op.drop_table('plan_versions')
    op.drop_table('plans')
    op.drop_table('exercises')
    op.drop_table('refresh_tokens')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
