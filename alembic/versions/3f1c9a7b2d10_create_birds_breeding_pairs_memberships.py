"""create birds, breeding_pairs and memberships

Revision ID: 3f1c9a7b2d10
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c9a7b2d10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'memberships',
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('role', sa.String(length=7), nullable=False),
        sa.PrimaryKeyConstraint('user_id', 'tenant_id', name='pk_memberships'),
    )

    op.create_table(
        'birds',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('visual_id_type', sa.String(length=20), nullable=False),
        sa.Column('visual_id_color', sa.String(length=64), nullable=False),
        sa.Column('visual_id_number', sa.String(length=64), nullable=False),
        sa.Column('breed_primary', sa.String(length=255), nullable=False),
        sa.Column('breed_secondary', sa.String(length=255), nullable=True),
        sa.Column('sex', sa.String(length=10), nullable=False, server_default='unknown'),
        sa.Column('hatch_date', sa.Date(), nullable=True),
        sa.Column('sire_id', sa.Uuid(), nullable=True),
        sa.Column('dam_id', sa.Uuid(), nullable=True),
        sa.Column('status', sa.String(length=10), nullable=False, server_default='alive'),
        sa.Column('status_date', sa.Date(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id', name='pk_birds'),
        sa.ForeignKeyConstraint(['sire_id'], ['birds.id'], name='fk_birds_sire_id_birds'),
        sa.ForeignKeyConstraint(['dam_id'], ['birds.id'], name='fk_birds_dam_id_birds'),
    )
    op.create_index('ix_birds_tenant_id', 'birds', ['tenant_id'], unique=False)
    op.create_index('ix_birds_tenant_sire', 'birds', ['tenant_id', 'sire_id'], unique=False)
    op.create_index('ix_birds_tenant_dam', 'birds', ['tenant_id', 'dam_id'], unique=False)

    op.create_table(
        'breeding_pairs',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('sire_id', sa.Uuid(), nullable=False),
        sa.Column('dam_id', sa.Uuid(), nullable=False),
        sa.Column('start_date', sa.Date(), nullable=False),
        sa.Column('end_date', sa.Date(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False, server_default='1'),
        sa.PrimaryKeyConstraint('id', name='pk_breeding_pairs'),
        sa.ForeignKeyConstraint(['sire_id'], ['birds.id'], name='fk_breeding_pairs_sire_id_birds'),
        sa.ForeignKeyConstraint(['dam_id'], ['birds.id'], name='fk_breeding_pairs_dam_id_birds'),
    )
    op.create_index('ix_breeding_pairs_tenant_id', 'breeding_pairs', ['tenant_id'], unique=False)
    op.create_index('ix_breeding_pairs_sire_id', 'breeding_pairs', ['sire_id'], unique=False)
    op.create_index('ix_breeding_pairs_dam_id', 'breeding_pairs', ['dam_id'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_breeding_pairs_dam_id', table_name='breeding_pairs')
    op.drop_index('ix_breeding_pairs_sire_id', table_name='breeding_pairs')
    op.drop_index('ix_breeding_pairs_tenant_id', table_name='breeding_pairs')
    op.drop_table('breeding_pairs')
    op.drop_index('ix_birds_tenant_dam', table_name='birds')
    op.drop_index('ix_birds_tenant_sire', table_name='birds')
    op.drop_index('ix_birds_tenant_id', table_name='birds')
    op.drop_table('birds')
    op.drop_table('memberships')
