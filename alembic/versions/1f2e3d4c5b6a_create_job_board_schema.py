"""Create job board schema

Revision ID: 1f2e3d4c5b6a
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '1f2e3d4c5b6a'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

LOOKUP_TABLES = ['statuses', 'job_types', 'industries', 'resource_types', 'currencies']


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
        sa.Column('modified_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=True),
    ]


def upgrade() -> None:
    """Upgrade schema - lookups, admins, users, companies, sources, jobs, resources."""
    salaryfrequency_enum = postgresql.ENUM('monthly', 'annually', name='salaryfrequency', create_type=False)
    userrole_enum = postgresql.ENUM('user', 'admin', name='userrole', create_type=False)
    adminrole_enum = postgresql.ENUM('admin', 'super_admin', 'member', name='adminrole', create_type=False)

    conn = op.get_bind()
    for enum in (salaryfrequency_enum, userrole_enum, adminrole_enum):
        enum.create(conn, checkfirst=True)

    # Lookup tables
    for table in LOOKUP_TABLES:
        extra = [sa.Column('symbol', sa.String(), nullable=True)] if table == 'currencies' else []
        op.create_table(table,
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('name', sa.String(), nullable=False),
            sa.Column('code', sa.String(), nullable=False),
            *extra,
            *_timestamps(),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f(f'ix_{table}_id'), table, ['id'], unique=False)
        op.create_index(op.f(f'ix_{table}_code'), table, ['code'], unique=True)

    op.create_table('admins',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('hashed_password', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=True),
        sa.Column('role', adminrole_enum, nullable=False),
        sa.Column('status_id', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.Column('last_login_at', sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(['status_id'], ['statuses.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_admins_id'), 'admins', ['id'], unique=False)
    op.create_index(op.f('ix_admins_email'), 'admins', ['email'], unique=True)

    op.create_table('users',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('country', sa.String(), nullable=True),
        sa.Column('role', userrole_enum, nullable=False),
        sa.Column('status_id', sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['status_id'], ['statuses.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_status_id'), 'users', ['status_id'], unique=False)
    op.create_index(op.f('ix_users_created_at'), 'users', ['created_at'], unique=False)

    op.create_table('companies',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('short_description', sa.String(), nullable=True),
        sa.Column('long_description', sa.Text(), nullable=True),
        sa.Column('website_url', sa.String(), nullable=True),
        sa.Column('logo_url', sa.String(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('country', sa.String(), nullable=True),
        sa.Column('metadata', postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column('contact', postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column('tags', postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column('rank', sa.Integer(), nullable=True),
        sa.Column('is_premium', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('status_id', sa.Integer(), nullable=True),
        sa.Column('created_by_id', postgresql.UUID(as_uuid=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['status_id'], ['statuses.id'], ),
        sa.ForeignKeyConstraint(['created_by_id'], ['admins.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_companies_id'), 'companies', ['id'], unique=False)
    op.create_index(op.f('ix_companies_name'), 'companies', ['name'], unique=False)
    op.create_index(op.f('ix_companies_location'), 'companies', ['location'], unique=False)
    op.create_index(op.f('ix_companies_status_id'), 'companies', ['status_id'], unique=False)

    op.create_table('jobs_sources',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('code', sa.String(), nullable=False),
        sa.Column('base_url', sa.String(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('website_url', sa.String(), nullable=True),
        sa.Column('logo_url', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_jobs_sources_id'), 'jobs_sources', ['id'], unique=False)
    op.create_index(op.f('ix_jobs_sources_code'), 'jobs_sources', ['code'], unique=True)
    op.create_index(op.f('ix_jobs_sources_is_active'), 'jobs_sources', ['is_active'], unique=False)

    op.create_table('jobs',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('company_id', postgresql.UUID(as_uuid=True), nullable=True),
        sa.Column('job_type_id', sa.Integer(), nullable=True),
        sa.Column('industry_id', sa.Integer(), nullable=True),
        sa.Column('currency_id', sa.Integer(), nullable=True),
        sa.Column('status_id', sa.Integer(), nullable=True),
        sa.Column('source_id', sa.Integer(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('country', sa.String(), nullable=True),
        sa.Column('salary_min', sa.Float(), nullable=True),
        sa.Column('salary_max', sa.Float(), nullable=True),
        sa.Column('salary_frequency', salaryfrequency_enum, nullable=True),
        sa.Column('apply_url', sa.String(), nullable=True),
        sa.Column('metadata', postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column('tags', postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column('rank', sa.Integer(), nullable=True),
        sa.Column('is_premium', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('created_by_id', postgresql.UUID(as_uuid=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['company_id'], ['companies.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['job_type_id'], ['job_types.id'], ),
        sa.ForeignKeyConstraint(['industry_id'], ['industries.id'], ),
        sa.ForeignKeyConstraint(['currency_id'], ['currencies.id'], ),
        sa.ForeignKeyConstraint(['status_id'], ['statuses.id'], ),
        sa.ForeignKeyConstraint(['source_id'], ['jobs_sources.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['created_by_id'], ['admins.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_jobs_id'), 'jobs', ['id'], unique=False)
    op.create_index(op.f('ix_jobs_title'), 'jobs', ['title'], unique=False)
    op.create_index(op.f('ix_jobs_company_id'), 'jobs', ['company_id'], unique=False)
    op.create_index(op.f('ix_jobs_job_type_id'), 'jobs', ['job_type_id'], unique=False)
    op.create_index(op.f('ix_jobs_industry_id'), 'jobs', ['industry_id'], unique=False)
    op.create_index(op.f('ix_jobs_status_id'), 'jobs', ['status_id'], unique=False)
    op.create_index(op.f('ix_jobs_location'), 'jobs', ['location'], unique=False)
    op.create_index(op.f('ix_jobs_modified_at'), 'jobs', ['modified_at'], unique=False)

    op.create_table('resources',
        sa.Column('id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('url', sa.String(), nullable=False),
        sa.Column('resource_type_id', sa.Integer(), nullable=True),
        sa.Column('status_id', sa.Integer(), nullable=True),
        sa.Column('metadata', postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column('tags', postgresql.JSONB(astext_type=sa.Text()), nullable=True),
        sa.Column('rank', sa.Integer(), nullable=True),
        sa.Column('is_premium', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('created_by_id', postgresql.UUID(as_uuid=True), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['resource_type_id'], ['resource_types.id'], ),
        sa.ForeignKeyConstraint(['status_id'], ['statuses.id'], ),
        sa.ForeignKeyConstraint(['created_by_id'], ['admins.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_resources_id'), 'resources', ['id'], unique=False)
    op.create_index(op.f('ix_resources_title'), 'resources', ['title'], unique=False)
    op.create_index(op.f('ix_resources_resource_type_id'), 'resources', ['resource_type_id'], unique=False)
    op.create_index(op.f('ix_resources_status_id'), 'resources', ['status_id'], unique=False)
    op.create_index(op.f('ix_resources_created_at'), 'resources', ['created_at'], unique=False)


def downgrade() -> None:
    """Downgrade schema - drop everything created above."""
    for table in ['resources', 'jobs', 'jobs_sources', 'companies', 'users', 'admins', *reversed(LOOKUP_TABLES)]:
        op.drop_table(table)

    conn = op.get_bind()
    for name in ('salaryfrequency', 'userrole', 'adminrole'):
        postgresql.ENUM(name=name).drop(conn, checkfirst=True)
