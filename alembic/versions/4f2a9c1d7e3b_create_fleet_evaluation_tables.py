"""create_fleet_evaluation_tables

Revision ID: 4f2a9c1d7e3b
Revises:
Create Date: 2026-10-19 10:12:41.204318

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '4f2a9c1d7e3b'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    role_name_enum = sa.Enum('admin', 'operador', 'visualizador', name='role_name_enum')
    driver_modality_enum = sa.Enum('pj', 'clt', 'agregado', name='driver_modality_enum')
    transport_status_enum = sa.Enum('pendente', 'em_transito', 'entregue', 'cancelado', name='transport_status_enum')
    severity_enum = sa.Enum('sem_ocorrencia', 'leve', 'medio', 'grave', name='severity_enum')

    op.create_table('user_role',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('role_name', role_name_enum, nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('role_name'),
    )

    op.create_table('user',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('full_name', sa.String(100), nullable=True),
        sa.Column('password_hash', sa.String(60), nullable=False),
        sa.Column('role_id', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('last_login_at', sa.DateTime(), nullable=True),
        sa.ForeignKeyConstraint(['role_id'], ['user_role.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_user_email', 'user', ['email'], unique=True)

    op.create_table('driver',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('cpf', sa.String(14), nullable=False),
        sa.Column('phone', sa.String(20), nullable=False),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('city', sa.String(100), nullable=True),
        sa.Column('state', sa.String(2), nullable=True),
        sa.Column('modality', driver_modality_enum, nullable=False),
        sa.Column('cnh_type', sa.String(5), nullable=False),
        sa.Column('is_apto', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_driver_cpf', 'driver', ['cpf'], unique=True)

    op.create_table('transport',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('request_number', sa.String(20), nullable=False),
        sa.Column('vehicle_chassi', sa.String(50), nullable=False),
        sa.Column('driver_id', sa.Integer(), nullable=True),
        sa.Column('status', transport_status_enum, nullable=False, server_default='pendente'),
        sa.Column('delivery_date', sa.Date(), nullable=True),
        sa.Column('delivered_at', sa.DateTime(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['driver_id'], ['driver.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_transport_request_number', 'transport', ['request_number'], unique=True)
    op.create_index('ix_transport_driver_id', 'transport', ['driver_id'])
    op.create_index('ix_transport_status', 'transport', ['status'])

    op.create_table('request_counter',
        sa.Column('id', sa.String(50), nullable=False),
        sa.Column('last_number', sa.Integer(), nullable=False, server_default='0'),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table('evaluation_criteria',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('weight', sa.Numeric(5, 2), nullable=False),
        sa.Column('penalty_leve', sa.Numeric(5, 2), nullable=False, server_default='10'),
        sa.Column('penalty_medio', sa.Numeric(5, 2), nullable=False, server_default='50'),
        sa.Column('penalty_grave', sa.Numeric(5, 2), nullable=False, server_default='100'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('name'),
    )
    op.create_index('ix_evaluation_criteria_is_active', 'evaluation_criteria', ['is_active'])

    op.create_table('driver_evaluation',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('transport_id', sa.Integer(), nullable=False),
        sa.Column('driver_id', sa.Integer(), nullable=False),
        sa.Column('evaluator_id', sa.Integer(), nullable=True),
        sa.Column('had_incident', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('incident_description', sa.Text(), nullable=True),
        sa.Column('average_score', sa.Numeric(5, 2), nullable=False),
        sa.Column('weighted_score', sa.Numeric(5, 2), nullable=False),
        sa.Column('computed_weighted_score', sa.Numeric(5, 2), nullable=False),
        sa.Column('is_manual_override', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['transport_id'], ['transport.id']),
        sa.ForeignKeyConstraint(['driver_id'], ['driver.id']),
        sa.ForeignKeyConstraint(['evaluator_id'], ['user.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('transport_id'),
    )
    op.create_index('ix_driver_evaluation_driver_id', 'driver_evaluation', ['driver_id'])

    op.create_table('driver_evaluation_score',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('evaluation_id', sa.Integer(), nullable=False),
        sa.Column('criterion_id', sa.Integer(), nullable=False),
        sa.Column('severity', severity_enum, nullable=True),
        sa.Column('score', sa.Numeric(5, 2), nullable=False),
        sa.Column('weight', sa.Numeric(5, 2), nullable=False),
        sa.Column('criterion_name', sa.String(255), nullable=False),
        sa.ForeignKeyConstraint(['evaluation_id'], ['driver_evaluation.id']),
        sa.ForeignKeyConstraint(['criterion_id'], ['evaluation_criteria.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_driver_evaluation_score_evaluation_id', 'driver_evaluation_score', ['evaluation_id'])
    op.create_index('ix_driver_evaluation_score_criterion_id', 'driver_evaluation_score', ['criterion_id'])


def downgrade():
    op.drop_index('ix_driver_evaluation_score_criterion_id', table_name='driver_evaluation_score')
    op.drop_index('ix_driver_evaluation_score_evaluation_id', table_name='driver_evaluation_score')
    op.drop_table('driver_evaluation_score')

    op.drop_index('ix_driver_evaluation_driver_id', table_name='driver_evaluation')
    op.drop_table('driver_evaluation')

    op.drop_index('ix_evaluation_criteria_is_active', table_name='evaluation_criteria')
    op.drop_table('evaluation_criteria')

    op.drop_table('request_counter')

    op.drop_index('ix_transport_status', table_name='transport')
    op.drop_index('ix_transport_driver_id', table_name='transport')
    op.drop_index('ix_transport_request_number', table_name='transport')
    op.drop_table('transport')

    op.drop_index('ix_driver_cpf', table_name='driver')
    op.drop_table('driver')

    op.drop_index('ix_user_email', table_name='user')
    op.drop_table('user')

    op.drop_table('user_role')

    # no-op on MySQL, needed where enums are standalone types
    for name in ('severity_enum', 'transport_status_enum', 'driver_modality_enum', 'role_name_enum'):
        sa.Enum(name=name).drop(op.get_bind(), checkfirst=True)
