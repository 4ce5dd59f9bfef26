"""create teams and question_logs

Revision ID: 3c9a51d0e7b2
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c9a51d0e7b2'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    existing_tables = set(insp.get_table_names())

    # Existing deployments may already hold both tables
    if 'teams' not in existing_tables:
        op.create_table(
            'teams',
            sa.Column('name', sa.String(length=128), nullable=False),
            sa.Column('score', sa.Integer(), nullable=False, server_default='1200'),
            sa.PrimaryKeyConstraint('name'),
        )
    if 'question_logs' not in existing_tables:
        op.create_table(
            'question_logs',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('question', sa.String(length=64), nullable=True),
            sa.Column('team', sa.String(length=128), nullable=False),
            sa.Column('points', sa.Integer(), nullable=False),
            sa.Column('round_label', sa.String(length=64), nullable=True),
            sa.Column('time', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=True),
            sa.ForeignKeyConstraint(['team'], ['teams.name'], ondelete='CASCADE'),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index(op.f('ix_question_logs_team'), 'question_logs', ['team'], unique=False)


def downgrade():
    op.drop_index(op.f('ix_question_logs_team'), table_name='question_logs')
    op.drop_table('question_logs')
    op.drop_table('teams')
