"""create sheet_rows table

Revision ID: 3f1c2a9d7b10
Revises:
Create Date: 2026-10-19 09:12:40.118532

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '3f1c2a9d7b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    # 创建sheet_rows表（sql 行存储后端）
    op.create_table('sheet_rows',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('sheet', sa.String(length=128), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False),
        sa.Column('cells', sa.JSON(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_sheet_rows_id'), 'sheet_rows', ['id'], unique=False)
    op.create_index(op.f('ix_sheet_rows_sheet'), 'sheet_rows', ['sheet'], unique=False)


def downgrade():
    # 删除sheet_rows表
    op.drop_index(op.f('ix_sheet_rows_sheet'), table_name='sheet_rows')
    op.drop_index(op.f('ix_sheet_rows_id'), table_name='sheet_rows')
    op.drop_table('sheet_rows')
