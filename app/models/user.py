"""사용자 SQLAlchemy ORM 모델 정의.

User SQLAlchemy ORM model definition.
The ranking list is not a table of its own: it is derived from the
point columns of this model at read time (see RankRepository).

Tables:
    - users: 사용자 계정 및 포인트 (User accounts with point balances)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, Text, DateTime, Integer, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class User(Base):
    """사용자 모델 — 계정, 프로필, 포인트 정보.

    User model — Account, profile and point information.
    Email is globally unique and is the login identifier.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        email: 로그인 이메일 (Login email, unique)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        nickname: 별명 (Display nickname)
        description: 자기소개 (Profile description, optional)
        image_url: 프로필 이미지 URL (Profile image URL, optional)
        point: 현재 포인트 잔액 (Current point balance)
        accu_point: 누적 포인트 (Accumulated lifetime points, ranking key)
        created_at: 가입 일시 UTC (Registration timestamp, ranking tiebreak)
        updated_at: 수정 일시 UTC (Last update timestamp)
    """

    __tablename__ = "users"

    # 사용자 고유 식별자 — User unique identifier (UUID v4, auto-generated)
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 로그인 이메일 — 전역 고유 (globally unique)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # 비밀번호 해시 — 평문 저장 금지 (never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    nickname: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    # 포인트 — 현재 잔액과 누적 합계 (current balance and lifetime total)
    point: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    accu_point: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        # 랭킹 정렬 인덱스 — Ranking order index
        Index("ix_users_ranking", "accu_point", "created_at"),
    )
