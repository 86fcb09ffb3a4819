"""테스트 인프라 — 임시 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Temporary SQLite DB, session, and httpx client fixtures.
Each test gets a fresh database file (aiosqlite, NullPool) so every
session owns its own connection and commits/rollbacks behave as they do
against the real server. Schema is created from the ORM metadata.
"""

import os

# 앱 설정 임포트 전에 테스트 환경 변수 지정 — Must run before app.config is imported
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from collections.abc import AsyncGenerator  # noqa: E402
from datetime import datetime, timezone  # noqa: E402

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import func, select  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool  # noqa: E402

from app.database import Base, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models import *  # noqa: F401,F403,E402 — register all models with metadata
from app.models.user import User  # noqa: E402
from app.utils.jwt import create_access_token  # noqa: E402
from app.utils.password import hash_password  # noqa: E402

DEFAULT_PASSWORD = "password123!"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진 — 테스트마다 새 DB 파일과 스키마."""
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """서비스 테스트용 세션 — Session handed to services under test."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — 요청마다 테스트 DB 세션을 제공합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼: 테스트용 데이터 생성 및 조회
# ---------------------------------------------------------------------------
async def make_user(
    session_factory,
    email: str,
    nickname: str,
    password: str = DEFAULT_PASSWORD,
    password_hash: str | None = None,
    **fields,
) -> User:
    """별도 세션에서 사용자를 생성하고 커밋합니다 (detached 객체 반환)."""
    async with session_factory() as session:
        user = User(
            email=email,
            nickname=nickname,
            password_hash=password_hash or hash_password(password),
            **fields,
        )
        session.add(user)
        await session.commit()
        await session.refresh(user)
        return user


async def fetch_user(session_factory, user_id) -> User | None:
    """새 세션으로 현재 DB 상태의 사용자를 조회합니다."""
    async with session_factory() as session:
        return await session.get(User, user_id)


async def count_users(session_factory) -> int:
    async with session_factory() as session:
        return (await session.execute(select(func.count()).select_from(User))).scalar_one()


@pytest_asyncio.fixture
async def alice(session_factory) -> User:
    return await make_user(
        session_factory,
        "alice@test.com",
        "alice",
        description="hello",
        image_url="https://img.test/alice.png",
        point=30,
        accu_point=120,
    )


@pytest_asyncio.fixture
async def bob(session_factory) -> User:
    return await make_user(session_factory, "bob@test.com", "bob", point=5, accu_point=40)


def make_token(user: User) -> str:
    """테스트용 세션 토큰을 생성합니다."""
    return create_access_token({
        "sub": str(user.id),
        "email": user.email,
        "name": user.nickname,
        "description": user.description,
    })


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def utc(*args: int) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)
