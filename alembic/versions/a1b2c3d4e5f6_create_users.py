"""create_users

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-16 10:00:00.000000

사용자 테이블 생성: 계정, 프로필, 포인트.
Create the users table: account, profile and point columns.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID


# revision identifiers, used by Alembic.
revision: str = 'a1b2c3d4e5f6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # users — 사용자 계정 (email is the global login identifier)
    op.create_table(
        'users',
        sa.Column('id', UUID(as_uuid=True), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('nickname', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('image_url', sa.String(1024), nullable=True),
        sa.Column('point', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('accu_point', sa.Integer(), server_default=sa.text('0'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # 랭킹 정렬 인덱스 — Ranking order index
    op.create_index('ix_users_ranking', 'users', ['accu_point', 'created_at'])


def downgrade() -> None:
    op.drop_index('ix_users_ranking', table_name='users')
    op.drop_table('users')
