"""create favorite_translations table

Revision ID: 20261018_1010_create_favorite_translations
Revises: 20261018_1000_create_translations
Create Date: 2026-10-18 10:10:00
"""
from alembic import op
import sqlalchemy as sa

revision = '20261018_1010_create_favorite_translations'
down_revision = '20261018_1000_create_translations'
branch_labels = None
depends_on = None

def upgrade() -> None:
    op.create_table(
        'favorite_translations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column(
            'translation_id',
            sa.Integer(),
            sa.ForeignKey('translations.id', ondelete='CASCADE'),
            nullable=False,
        ),
        sa.Column('user_id', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint('translation_id', 'user_id', name='uq_favorite_translation_user'),
    )
    op.create_index('ix_favorite_translations_translation_id', 'favorite_translations', ['translation_id'])
    op.create_index('ix_favorite_translations_user_id', 'favorite_translations', ['user_id'])

def downgrade() -> None:
    op.drop_index('ix_favorite_translations_user_id', table_name='favorite_translations')
    op.drop_index('ix_favorite_translations_translation_id', table_name='favorite_translations')
    op.drop_table('favorite_translations')
