"""트랜잭션 스코프 테스트 — 커밋, 롤백, 오류 변환.

Transaction scope tests — commit on success, rollback on every failure,
domain errors passed through, other errors replaced by the fallback.
"""

import pytest

from app.models.user import User
from app.utils.exceptions import InternalServerError, NotFoundError
from app.utils.transaction import transaction
from tests.conftest import count_users


def new_user(email: str) -> User:
    return User(email=email, nickname="tx", password_hash="x")


class TestTransaction:

    async def test_commits_on_success(self, db, session_factory):
        async with transaction(db, InternalServerError()):
            db.add(new_user("ok@test.com"))
            await db.flush()

        assert await count_users(session_factory) == 1

    async def test_domain_error_rolls_back_and_passes_through(self, db, session_factory):
        with pytest.raises(NotFoundError) as exc_info:
            async with transaction(db, InternalServerError("fallback")):
                db.add(new_user("gone@test.com"))
                await db.flush()
                raise NotFoundError("missing")

        assert exc_info.value.detail == "missing"
        assert await count_users(session_factory) == 0

    async def test_unexpected_error_becomes_fallback(self, db, session_factory):
        fallback = InternalServerError("fallback")

        with pytest.raises(InternalServerError) as exc_info:
            async with transaction(db, fallback):
                db.add(new_user("boom@test.com"))
                await db.flush()
                raise RuntimeError("boom")

        assert exc_info.value is fallback
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert await count_users(session_factory) == 0

    async def test_commit_failure_is_rolled_back(self, db, session_factory):
        """커밋 시점의 제약 조건 위반도 fallback으로 변환."""
        async with transaction(db, InternalServerError()):
            db.add(new_user("dup@test.com"))

        with pytest.raises(InternalServerError):
            async with transaction(db, InternalServerError()):
                db.add(new_user("dup@test.com"))

        assert await count_users(session_factory) == 1

    async def test_session_usable_after_rollback(self, db, session_factory):
        with pytest.raises(InternalServerError):
            async with transaction(db, InternalServerError()):
                raise ValueError("bad")

        async with transaction(db, InternalServerError()):
            db.add(new_user("after@test.com"))

        assert await count_users(session_factory) == 1
