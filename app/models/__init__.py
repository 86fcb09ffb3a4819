"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the SQLAlchemy
metadata, which Alembic and the test schema setup rely on.

Modules:
    user: 사용자 및 포인트 (Users and their point balances)
"""

from app.models.user import User

__all__ = ["User"]
