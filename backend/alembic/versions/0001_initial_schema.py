"""Initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """Create users, projects, templates, build queue, billing and audit tables."""

    op.create_table(
        'users',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('open_id', sa.String(64), nullable=False),
        sa.Column('name', sa.Text),
        sa.Column('email', sa.String(320)),
        sa.Column('phone', sa.String(20)),
        sa.Column('avatar', sa.Text),
        sa.Column('login_method', sa.String(64)),
        sa.Column('role', sa.String(20), server_default='user', nullable=False),
        sa.Column('subscription_tier', sa.String(20), server_default='free', nullable=False),
        sa.Column('app_limit', sa.Integer, server_default='1', nullable=False),
        sa.Column('apps_created', sa.Integer, server_default='0', nullable=False),
        sa.Column('is_active', sa.Boolean, server_default=sa.true(), nullable=False),
        sa.Column('last_signed_in', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_users_open_id', 'users', ['open_id'], unique=True)

    op.create_table(
        'projects',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer, sa.ForeignKey('users.id'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('description', sa.Text),
        sa.Column('prompt', sa.Text),
        sa.Column('app_type', sa.String(20), server_default='hybrid', nullable=False),
        sa.Column('status', sa.String(20), server_default='pending', nullable=False),
        sa.Column('build_progress', sa.Integer, server_default='0', nullable=False),
        sa.Column('template_id', sa.Integer),
        sa.Column('app_icon', sa.Text),
        sa.Column('primary_color', sa.String(7), server_default='#6366f1'),
        sa.Column('secondary_color', sa.String(7), server_default='#8b5cf6'),
        sa.Column('features', sa.JSON),
        sa.Column('screenshots', sa.JSON),
        sa.Column('apk_url', sa.Text),
        sa.Column('ipa_url', sa.Text),
        sa.Column('pwa_url', sa.Text),
        sa.Column('web_url', sa.Text),
        sa.Column('source_code_url', sa.Text),
        sa.Column('landing_page_enabled', sa.Boolean, server_default=sa.true(), nullable=False),
        sa.Column('landing_page_views', sa.Integer, server_default='0', nullable=False),
        sa.Column('download_count', sa.Integer, server_default='0', nullable=False),
        sa.Column('version', sa.String(20), server_default='1.0.0'),
        sa.Column('package_name', sa.String(255)),
        sa.Column('build_number', sa.Integer, server_default='1'),
        sa.Column('completed_at', sa.DateTime(timezone=True)),
        *_timestamps(),
    )
    op.create_index('ix_projects_user_id', 'projects', ['user_id'])
    op.create_index('ix_projects_slug', 'projects', ['slug'], unique=True)
    op.create_index('ix_projects_status', 'projects', ['status'])

    op.create_table(
        'templates',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('description', sa.Text),
        sa.Column('category', sa.String(30), server_default='other', nullable=False),
        sa.Column('icon', sa.Text),
        sa.Column('preview_image', sa.Text),
        sa.Column('features', sa.JSON),
        sa.Column('default_prompt', sa.Text),
        sa.Column('primary_color', sa.String(7), server_default='#6366f1'),
        sa.Column('secondary_color', sa.String(7), server_default='#8b5cf6'),
        sa.Column('usage_count', sa.Integer, server_default='0', nullable=False),
        sa.Column('is_premium', sa.Boolean, server_default=sa.false(), nullable=False),
        sa.Column('is_active', sa.Boolean, server_default=sa.true(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_templates_slug', 'templates', ['slug'], unique=True)
    op.create_index('ix_templates_category', 'templates', ['category'])

    # No foreign key to projects: build history outlives deleted projects
    op.create_table(
        'build_queue',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('project_id', sa.Integer, nullable=False),
        sa.Column('user_id', sa.Integer, nullable=False),
        sa.Column('priority', sa.Integer, server_default='0', nullable=False),
        sa.Column('status', sa.String(20), server_default='queued', nullable=False),
        sa.Column('progress', sa.Integer, server_default='0', nullable=False),
        sa.Column('current_step', sa.String(255)),
        sa.Column('error_message', sa.Text),
        sa.Column('started_at', sa.DateTime(timezone=True)),
        sa.Column('completed_at', sa.DateTime(timezone=True)),
        sa.Column('estimated_time', sa.Integer),
        *_timestamps(),
    )
    op.create_index('ix_build_queue_project_id', 'build_queue', ['project_id'])
    op.create_index('ix_build_queue_user_id', 'build_queue', ['user_id'])
    op.create_index('ix_build_queue_status', 'build_queue', ['status'])
    op.create_index(
        'ix_build_queue_status_priority_created',
        'build_queue',
        ['status', 'priority', 'created_at'],
    )

    op.create_table(
        'subscriptions',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer, sa.ForeignKey('users.id'), nullable=False),
        sa.Column('tier', sa.String(20), server_default='free', nullable=False),
        sa.Column('price_inr', sa.Integer, server_default='0', nullable=False),
        sa.Column('price_usd', sa.Integer, server_default='0', nullable=False),
        sa.Column('currency', sa.String(3), server_default='INR', nullable=False),
        sa.Column('status', sa.String(20), server_default='pending', nullable=False),
        sa.Column('payment_method', sa.String(50)),
        sa.Column('payment_id', sa.String(255)),
        sa.Column('start_date', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('end_date', sa.DateTime(timezone=True)),
        sa.Column('auto_renew', sa.Boolean, server_default=sa.true(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_subscriptions_user_id', 'subscriptions', ['user_id'])

    op.create_table(
        'activity_logs',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer),
        sa.Column('action', sa.String(100), nullable=False),
        sa.Column('entity_type', sa.String(50)),
        sa.Column('entity_id', sa.Integer),
        sa.Column('details', sa.JSON),
        sa.Column('ip_address', sa.String(45)),
        sa.Column('user_agent', sa.Text),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index('ix_activity_logs_user_id', 'activity_logs', ['user_id'])
    op.create_index('ix_activity_logs_created_at', 'activity_logs', ['created_at'])

    op.create_table(
        'pricing_plans',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('tier', sa.String(20), nullable=False, unique=True),
        sa.Column('name_en', sa.String(100), nullable=False),
        sa.Column('name_hi', sa.String(100)),
        sa.Column('description_en', sa.Text),
        sa.Column('description_hi', sa.Text),
        sa.Column('price_inr', sa.Integer, server_default='0', nullable=False),
        sa.Column('price_usd', sa.Integer, server_default='0', nullable=False),
        sa.Column('app_limit', sa.Integer, server_default='1', nullable=False),
        sa.Column('features', sa.JSON),
        sa.Column('is_popular', sa.Boolean, server_default=sa.false(), nullable=False),
        sa.Column('is_active', sa.Boolean, server_default=sa.true(), nullable=False),
        *_timestamps(),
    )


def downgrade() -> None:
    """Drop all tables in reverse dependency order."""
    op.drop_table('pricing_plans')
    op.drop_index('ix_activity_logs_created_at', table_name='activity_logs')
    op.drop_index('ix_activity_logs_user_id', table_name='activity_logs')
    op.drop_table('activity_logs')
    op.drop_index('ix_subscriptions_user_id', table_name='subscriptions')
    op.drop_table('subscriptions')
    op.drop_table('build_queue')
    op.drop_table('templates')
    op.drop_table('projects')
    op.drop_index('ix_users_open_id', table_name='users')
    op.drop_table('users')
