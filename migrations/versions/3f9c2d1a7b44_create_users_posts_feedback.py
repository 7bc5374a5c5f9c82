"""Create users, posts and feedback tables

Revision ID: 3f9c2d1a7b44
Revises:
Create Date: 2026-10-17 10:12:31.402118

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f9c2d1a7b44'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('coins', sa.Integer(), server_default='0', nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint("role IN ('athlete','coach')", name='ck_users_role'),
        sa.CheckConstraint('coins >= 0', name='ck_users_coins_non_negative'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
        sa.UniqueConstraint('username'),
    )
    op.create_index(op.f('ix_users_role'), 'users', ['role'], unique=False)

    op.create_table(
        'posts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('athlete_id', sa.Integer(), nullable=False),
        sa.Column('video_url', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
        sa.ForeignKeyConstraint(['athlete_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_posts_athlete_id', 'posts', ['athlete_id'], unique=False)

    op.create_table(
        'feedback',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('post_id', sa.Integer(), nullable=False),
        sa.Column('coach_id', sa.Integer(), nullable=False),
        sa.Column('comment', sa.Text(), nullable=False),
        sa.Column('price_coins', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(length=20), server_default='pending', nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('now()'), nullable=False),
        sa.CheckConstraint('price_coins >= 0', name='ck_feedback_price_non_negative'),
        sa.CheckConstraint("status IN ('pending','accepted','rejected')", name='ck_feedback_status'),
        sa.ForeignKeyConstraint(['coach_id'], ['users.id']),
        sa.ForeignKeyConstraint(['post_id'], ['posts.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_feedback_post_id', 'feedback', ['post_id'], unique=False)
    op.create_index('idx_feedback_coach_id', 'feedback', ['coach_id'], unique=False)
    op.create_index(op.f('ix_feedback_status'), 'feedback', ['status'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_feedback_status'), table_name='feedback')
    op.drop_index('idx_feedback_coach_id', table_name='feedback')
    op.drop_index('idx_feedback_post_id', table_name='feedback')
    op.drop_table('feedback')
    op.drop_index('idx_posts_athlete_id', table_name='posts')
    op.drop_table('posts')
    op.drop_index(op.f('ix_users_role'), table_name='users')
    op.drop_table('users')
