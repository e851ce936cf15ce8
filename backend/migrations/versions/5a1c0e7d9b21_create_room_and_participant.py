"""create room and participant tables

Revision ID: 5a1c0e7d9b21
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5a1c0e7d9b21'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'room',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('status', sa.String(length=16), nullable=False, server_default='waiting'),
        sa.Column('wake_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_table(
        'participant',
        sa.Column('id', sa.String(length=36), nullable=False),
        sa.Column('room_id', sa.String(length=36), nullable=False),
        sa.Column('nickname', sa.String(length=64), nullable=False),
        sa.Column('woke_up_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('rank', sa.Integer(), nullable=True),
        sa.Column('comment', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['room_id'], ['room.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('room_id', 'rank', name='uq_participant_room_rank'),
    )
    with op.batch_alter_table('participant') as batch_op:
        batch_op.create_index(batch_op.f('ix_participant_room_id'), ['room_id'], unique=False)


def downgrade():
    with op.batch_alter_table('participant') as batch_op:
        batch_op.drop_index(batch_op.f('ix_participant_room_id'))
    op.drop_table('participant')
    op.drop_table('room')
