"""create users and newsletter tables

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('hashed_password', sa.String(length=255), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('email'),
    )

    op.create_table(
        'newsletter_campaigns',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('audience_description', sa.Text(), nullable=True),
        sa.Column('sender_name', sa.String(length=255), nullable=True),
        sa.Column('sender_email', sa.String(length=255), nullable=True),
        sa.Column('default_language', sa.String(length=50), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_newsletter_campaigns_user_id', 'newsletter_campaigns', ['user_id'])

    op.create_table(
        'newsletter_issues',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('campaign_id', sa.String(length=36), nullable=False),
        sa.Column('user_id', sa.String(length=36), nullable=False),
        sa.Column('issue_number', sa.Integer(), nullable=True),
        sa.Column('subject_line', sa.String(length=255), nullable=False),
        sa.Column('preheader_text', sa.String(length=255), nullable=True),
        sa.Column('status', sa.String(length=50), nullable=True),
        sa.Column('scheduled_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('sent_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['campaign_id'], ['newsletter_campaigns.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_newsletter_issues_campaign_id', 'newsletter_issues', ['campaign_id'])
    op.create_index('ix_newsletter_issues_user_id', 'newsletter_issues', ['user_id'])

    op.create_table(
        'newsletter_blocks',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('issue_id', sa.String(length=36), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('block_type', sa.String(length=50), nullable=True),
        sa.Column('heading', sa.Text(), nullable=True),
        sa.Column('body', sa.Text(), nullable=True),
        sa.Column('cta_label', sa.String(length=255), nullable=True),
        sa.Column('cta_url', sa.Text(), nullable=True),
        sa.Column('image_url', sa.Text(), nullable=True),
        sa.Column('meta_json', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['issue_id'], ['newsletter_issues.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_newsletter_blocks_issue_id', 'newsletter_blocks', ['issue_id'])


def downgrade():
    op.drop_index('ix_newsletter_blocks_issue_id', table_name='newsletter_blocks')
    op.drop_table('newsletter_blocks')

    op.drop_index('ix_newsletter_issues_user_id', table_name='newsletter_issues')
    op.drop_index('ix_newsletter_issues_campaign_id', table_name='newsletter_issues')
    op.drop_table('newsletter_issues')

    op.drop_index('ix_newsletter_campaigns_user_id', table_name='newsletter_campaigns')
    op.drop_table('newsletter_campaigns')

    op.drop_table('users')
