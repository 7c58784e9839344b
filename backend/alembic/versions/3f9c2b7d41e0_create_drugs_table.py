"""create_drugs_table

Revision ID: 3f9c2b7d41e0
Revises:
Create Date: 2026-10-18 10:00:00.000000
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


revision: str = '3f9c2b7d41e0'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('drugs',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=False),
        sa.Column('code', sa.String(50), nullable=False),
        sa.Column('generic_name', sa.String(500), nullable=False),
        sa.Column('brand_name', sa.String(300), nullable=False),
        sa.Column('company', sa.String(300)),
        sa.Column('launch_date', sa.Date, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_drugs_company', 'drugs', ['company'])
    op.create_index('ix_drugs_launch_date', 'drugs', [sa.text('launch_date DESC')])
    op.create_index('ix_drugs_code', 'drugs', ['code'], unique=True)


def downgrade() -> None:
    op.drop_index('ix_drugs_code', table_name='drugs')
    op.drop_index('ix_drugs_launch_date', table_name='drugs')
    op.drop_index('ix_drugs_company', table_name='drugs')
    op.drop_table('drugs')
