"""initial schema

Revision ID: 3c1d9a7e5b20
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '3c1d9a7e5b20'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('users',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('full_name', sa.String(length=100), nullable=False),
    sa.Column('email', sa.String(length=255), nullable=False),
    sa.Column('password_hash', sa.String(length=255), nullable=False),
    sa.Column('role', sa.String(length=20), nullable=False),
    sa.Column('bio', sa.Text(), nullable=True),
    sa.Column('location', sa.String(length=150), nullable=True),
    sa.Column('profile_picture', sa.String(length=255), nullable=True),
    sa.Column('ready_to_teach', sa.Boolean(), nullable=False),
    sa.Column('is_active', sa.Boolean(), nullable=False),
    sa.Column('blocked_by_admin', sa.Boolean(), nullable=False, server_default=sa.false()),
    sa.Column('email_verified', sa.Boolean(), nullable=False),
    sa.Column('email_verification_token', sa.String(length=128), nullable=True),
    sa.Column('email_verification_expires', sa.TIMESTAMP(), nullable=True),
    sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
    sa.Column('updated_at', sa.TIMESTAMP(), nullable=True),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_users_id', 'users', ['id'], unique=False)
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_email_verification_token', 'users', ['email_verification_token'], unique=True)

    op.create_table('skills',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('name', sa.String(length=100), nullable=False),
    sa.Column('is_predefined', sa.Boolean(), nullable=False),
    sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_skills_id', 'skills', ['id'], unique=False)
    op.create_index('ix_skills_name', 'skills', ['name'], unique=True)

    op.create_table('user_skills',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('user_id', sa.Integer(), nullable=False),
    sa.Column('skill_id', sa.Integer(), nullable=False),
    sa.Column('level', sa.String(length=20), nullable=False),
    sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.func.now(), nullable=True),
    sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
    sa.ForeignKeyConstraint(['skill_id'], ['skills.id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('id'),
    sa.UniqueConstraint('user_id', 'skill_id', name='uq_user_skills_user_skill')
    )
    op.create_index('ix_user_skills_id', 'user_skills', ['id'], unique=False)
    op.create_index('ix_user_skills_user_id', 'user_skills', ['user_id'], unique=False)
    op.create_index('ix_user_skills_skill_id', 'user_skills', ['skill_id'], unique=False)

    op.create_table('requests',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('learner_id', sa.Integer(), nullable=False),
    sa.Column('skill_name', sa.String(length=100), nullable=False),
    sa.Column('topic', sa.String(length=200), nullable=True),
    sa.Column('description', sa.Text(), nullable=True),
    sa.Column('status', sa.String(length=20), nullable=False, server_default='OPEN'),
    sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.func.now(), nullable=False),
    sa.ForeignKeyConstraint(['learner_id'], ['users.id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_requests_id', 'requests', ['id'], unique=False)
    op.create_index('ix_requests_learner_id', 'requests', ['learner_id'], unique=False)
    op.create_index('ix_requests_skill_name', 'requests', ['skill_name'], unique=False)
    op.create_index('ix_requests_status', 'requests', ['status'], unique=False)

    op.create_table('accepted_requests',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('request_id', sa.Integer(), nullable=False),
    sa.Column('acceptor_id', sa.Integer(), nullable=False),
    sa.Column('accepted_at', sa.TIMESTAMP(), server_default=sa.func.now(), nullable=False),
    sa.Column('status', sa.String(length=20), nullable=False, server_default='PENDING'),
    sa.Column('schedule_date', sa.TIMESTAMP(), nullable=True),
    sa.Column('meeting_type', sa.String(length=20), nullable=True),
    sa.Column('meeting_link', sa.String(length=500), nullable=True),
    sa.ForeignKeyConstraint(['request_id'], ['requests.id'], ondelete='CASCADE'),
    sa.ForeignKeyConstraint(['acceptor_id'], ['users.id'], ondelete='CASCADE'),
    sa.PrimaryKeyConstraint('id'),
    sa.UniqueConstraint('request_id', 'acceptor_id', name='uq_accepted_requests_request_acceptor')
    )
    op.create_index('ix_accepted_requests_id', 'accepted_requests', ['id'], unique=False)
    op.create_index('ix_accepted_requests_request_id', 'accepted_requests', ['request_id'], unique=False)
    op.create_index('ix_accepted_requests_acceptor_id', 'accepted_requests', ['acceptor_id'], unique=False)
    op.create_index('ix_accepted_requests_status', 'accepted_requests', ['status'], unique=False)

    # request_id / tutor_id are loose references, no foreign keys
    op.create_table('sessions',
    sa.Column('id', sa.Integer(), nullable=False),
    sa.Column('request_id', sa.Integer(), nullable=False),
    sa.Column('tutor_id', sa.Integer(), nullable=False),
    sa.Column('scheduled_at', sa.TIMESTAMP(), nullable=True),
    sa.Column('status', sa.String(length=20), nullable=False, server_default='PENDING'),
    sa.Column('created_at', sa.TIMESTAMP(), server_default=sa.func.now(), nullable=False),
    sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_sessions_id', 'sessions', ['id'], unique=False)
    op.create_index('ix_sessions_request_id', 'sessions', ['request_id'], unique=False)
    op.create_index('ix_sessions_tutor_id', 'sessions', ['tutor_id'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_sessions_tutor_id', table_name='sessions')
    op.drop_index('ix_sessions_request_id', table_name='sessions')
    op.drop_index('ix_sessions_id', table_name='sessions')
    op.drop_table('sessions')

    op.drop_index('ix_accepted_requests_status', table_name='accepted_requests')
    op.drop_index('ix_accepted_requests_acceptor_id', table_name='accepted_requests')
    op.drop_index('ix_accepted_requests_request_id', table_name='accepted_requests')
    op.drop_index('ix_accepted_requests_id', table_name='accepted_requests')
    op.drop_table('accepted_requests')

    op.drop_index('ix_requests_status', table_name='requests')
    op.drop_index('ix_requests_skill_name', table_name='requests')
    op.drop_index('ix_requests_learner_id', table_name='requests')
    op.drop_index('ix_requests_id', table_name='requests')
    op.drop_table('requests')

    op.drop_index('ix_user_skills_skill_id', table_name='user_skills')
    op.drop_index('ix_user_skills_user_id', table_name='user_skills')
    op.drop_index('ix_user_skills_id', table_name='user_skills')
    op.drop_table('user_skills')

    op.drop_index('ix_skills_name', table_name='skills')
    op.drop_index('ix_skills_id', table_name='skills')
    op.drop_table('skills')

    op.drop_index('ix_users_email_verification_token', table_name='users')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_id', table_name='users')
    op.drop_table('users')
