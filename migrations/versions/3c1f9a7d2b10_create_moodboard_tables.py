"""Create product catalog, moodboard and CMS tables

Revision ID: 3c1f9a7d2b10
Revises:
Create Date: 2026-10-19 10:02:11.204518
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3c1f9a7d2b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'product',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('brand', sa.String(length=120), nullable=True),
        sa.Column('category', sa.String(length=120), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('images', sa.JSON(), nullable=True),
        sa.Column('image_type', sa.String(length=50), nullable=True),
        sa.Column('lifestyle_images', sa.JSON(), nullable=True),
        sa.Column('orientation', sa.String(length=20), nullable=True),
        sa.Column('aspect_ratio', sa.String(length=20), nullable=True),
        sa.Column('has_variants', sa.Boolean(), nullable=True),
        sa.Column('tags', sa.JSON(), nullable=True),
        sa.Column('featured', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'product_variant',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('product_id', sa.String(length=36), nullable=False),
        sa.Column('finish_name', sa.String(length=120), nullable=False),
        sa.Column('images', sa.JSON(), nullable=True),
        sa.Column('orientation', sa.String(length=20), nullable=True),
        sa.Column('aspect_ratio', sa.String(length=20), nullable=True),
        sa.Column('is_default', sa.Boolean(), nullable=True),
        sa.Column('position', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['product_id'], ['product.id']),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'moodboard',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('share_token', sa.String(length=22), nullable=False),
        sa.Column('user_name', sa.String(length=255), nullable=False),
        sa.Column('user_email', sa.String(length=255), nullable=False),
        sa.Column('user_type', sa.String(length=50), nullable=True),
        sa.Column('client_name', sa.String(length=255), nullable=True),
        sa.Column('project_name', sa.String(length=255), nullable=True),
        sa.Column('project_location', sa.String(length=255), nullable=True),
        sa.Column('project_details', sa.Text(), nullable=True),
        sa.Column('send_to_designer', sa.Boolean(), nullable=True),
        sa.Column('designer_email', sa.String(length=255), nullable=True),
        sa.Column('designer_name', sa.String(length=255), nullable=True),
        sa.Column('property_type', sa.String(length=100), nullable=True),
        sa.Column('property_size', sa.String(length=100), nullable=True),
        sa.Column('project_timeline', sa.String(length=100), nullable=True),
        sa.Column('budget_range', sa.String(length=100), nullable=True),
        sa.Column('primary_interests', sa.JSON(), nullable=True),
        sa.Column('product_data', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('aura_processed', sa.Boolean(), nullable=True),
        sa.Column('aura_processed_at', sa.DateTime(), nullable=True),
        sa.Column('crm_status', sa.String(length=50), nullable=True),
        sa.Column('crm_notes', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_moodboard_share_token', 'moodboard', ['share_token'], unique=True)

    op.create_table(
        'cms_stat',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('label', sa.String(length=120), nullable=False),
        sa.Column('value', sa.String(length=50), nullable=False),
        sa.Column('description', sa.String(length=255), nullable=True),
        sa.Column('icon', sa.String(length=50), nullable=True),
        sa.Column('active', sa.Boolean(), nullable=True),
        sa.Column('sort_order', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'cms_testimonial',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('role', sa.String(length=120), nullable=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('rating', sa.Integer(), nullable=True),
        sa.Column('active', sa.Boolean(), nullable=True),
        sa.Column('sort_order', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'cms_brand',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('logo_url', sa.String(length=255), nullable=True),
        sa.Column('active', sa.Boolean(), nullable=True),
        sa.Column('sort_order', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id')
    )


def downgrade():
    op.drop_table('cms_brand')
    op.drop_table('cms_testimonial')
    op.drop_table('cms_stat')
    op.drop_index('ix_moodboard_share_token', table_name='moodboard')
    op.drop_table('moodboard')
    op.drop_table('product_variant')
    op.drop_table('product')
