"""Initial schema: users, habits, day logs, streaks

Revision ID: 3a7c1e9f0b21
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3a7c1e9f0b21'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('user',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=150), nullable=False),
        sa.Column('password_hash', sa.String(length=200), nullable=False),
        sa.Column('date_joined', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('username')
    )

    op.create_table('habit',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(length=10), nullable=False),
        sa.Column('points', sa.Integer(), nullable=False),
        sa.Column('missed_points', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('habit', schema=None) as batch_op:
        batch_op.create_index('ix_habit_user_id', ['user_id'], unique=False)

    op.create_table('day_log',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('total_score', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'date', name='_user_day_uc')
    )
    with op.batch_alter_table('day_log', schema=None) as batch_op:
        batch_op.create_index('ix_day_log_user_id', ['user_id'], unique=False)

    op.create_table('habit_entry',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('day_log_id', sa.Integer(), nullable=False),
        sa.Column('habit_id', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(['day_log_id'], ['day_log.id'], ),
        sa.ForeignKeyConstraint(['habit_id'], ['habit.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('day_log_id', 'habit_id', name='_day_habit_uc')
    )
    with op.batch_alter_table('habit_entry', schema=None) as batch_op:
        batch_op.create_index('ix_habit_entry_day_log_id', ['day_log_id'], unique=False)
        batch_op.create_index('ix_habit_entry_habit_id', ['habit_id'], unique=False)

    op.create_table('streak',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('type', sa.String(length=10), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('current_streak', sa.Integer(), nullable=False),
        sa.Column('highest_streak', sa.Integer(), nullable=False),
        sa.Column('last_broken_date', sa.Date(), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['user_id'], ['user.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    with op.batch_alter_table('streak', schema=None) as batch_op:
        batch_op.create_index('ix_streak_user_id', ['user_id'], unique=False)

    op.create_table('streak_log',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('streak_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False),
        sa.ForeignKeyConstraint(['streak_id'], ['streak.id'], ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('streak_id', 'date', name='_streak_date_uc')
    )
    with op.batch_alter_table('streak_log', schema=None) as batch_op:
        batch_op.create_index('ix_streak_log_streak_id', ['streak_id'], unique=False)


def downgrade():
    with op.batch_alter_table('streak_log', schema=None) as batch_op:
        batch_op.drop_index('ix_streak_log_streak_id')
    op.drop_table('streak_log')

    with op.batch_alter_table('streak', schema=None) as batch_op:
        batch_op.drop_index('ix_streak_user_id')
    op.drop_table('streak')

    with op.batch_alter_table('habit_entry', schema=None) as batch_op:
        batch_op.drop_index('ix_habit_entry_habit_id')
        batch_op.drop_index('ix_habit_entry_day_log_id')
    op.drop_table('habit_entry')

    with op.batch_alter_table('day_log', schema=None) as batch_op:
        batch_op.drop_index('ix_day_log_user_id')
    op.drop_table('day_log')

    with op.batch_alter_table('habit', schema=None) as batch_op:
        batch_op.drop_index('ix_habit_user_id')
    op.drop_table('habit')

    op.drop_table('user')
