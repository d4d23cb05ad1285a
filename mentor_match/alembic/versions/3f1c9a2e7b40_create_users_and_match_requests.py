"""create_users_and_match_requests

Revision ID: 3f1c9a2e7b40
Revises:
Create Date: 2026-10-19 10:12:31.402118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '3f1c9a2e7b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    userrole_enum = sa.Enum('mentor', 'mentee', name='userrole')
    matchstatus_enum = sa.Enum(
        'pending', 'accepted', 'rejected', 'cancelled', name='matchstatus'
    )

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('password_hash', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=False),
        sa.Column('role', userrole_enum, nullable=False),
        sa.Column('bio', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('profile_image', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('skills', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_role'), 'users', ['role'], unique=False)
    op.create_index(op.f('ix_users_created_at'), 'users', ['created_at'], unique=False)

    op.create_table(
        'match_requests',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('mentor_id', sa.Integer(), nullable=False),
        sa.Column('mentee_id', sa.Integer(), nullable=False),
        sa.Column('status', matchstatus_enum, nullable=False),
        sa.Column('message', sqlmodel.sql.sqltypes.AutoString(length=500), nullable=False),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['mentor_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['mentee_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_match_requests_mentor_id'), 'match_requests', ['mentor_id'], unique=False)
    op.create_index(op.f('ix_match_requests_mentee_id'), 'match_requests', ['mentee_id'], unique=False)
    op.create_index(op.f('ix_match_requests_status'), 'match_requests', ['status'], unique=False)
    op.create_index(op.f('ix_match_requests_created_at'), 'match_requests', ['created_at'], unique=False)
    # At most one pending request per (mentee, mentor) pair.
    op.create_index(
        'uq_match_requests_pending_pair',
        'match_requests',
        ['mentee_id', 'mentor_id'],
        unique=True,
        sqlite_where=sa.text("status = 'pending'"),
        postgresql_where=sa.text("status = 'pending'"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('uq_match_requests_pending_pair', table_name='match_requests')
    op.drop_index(op.f('ix_match_requests_created_at'), table_name='match_requests')
    op.drop_index(op.f('ix_match_requests_status'), table_name='match_requests')
    op.drop_index(op.f('ix_match_requests_mentee_id'), table_name='match_requests')
    op.drop_index(op.f('ix_match_requests_mentor_id'), table_name='match_requests')
    op.drop_table('match_requests')
    op.drop_index(op.f('ix_users_created_at'), table_name='users')
    op.drop_index(op.f('ix_users_role'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')

    sa.Enum(name='matchstatus').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='userrole').drop(op.get_bind(), checkfirst=True)
