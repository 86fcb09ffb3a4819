"""요청 단위 트랜잭션 스코프 유틸리티 모듈.

Request-scoped transaction utility module.
Wraps a unit of service work on an AsyncSession: commit on success,
rollback on every failure path, then re-raise.

Error policy:
    - HTTPException 하위 예외(도메인 오류)는 롤백 후 그대로 다시 발생
      (Domain errors are re-raised unchanged after rollback)
    - 그 외 모든 예외는 롤백 후 작업별 대체 오류로 변환
      (Anything else is replaced by the operation's fallback error)

Usage:
    async with transaction(db, InternalServerError("...")):
        user = await user_repository.get_by_id(db, user_id)
        ...
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


@asynccontextmanager
async def transaction(
    db: AsyncSession,
    fallback: HTTPException,
) -> AsyncIterator[AsyncSession]:
    """세션에서 하나의 트랜잭션을 실행합니다.

    Run the enclosed block as one transaction on ``db``.
    The commit itself is inside the guarded region, so a failing COMMIT
    is rolled back and mapped to ``fallback`` like any other failure.

    Args:
        db: 요청 단위 비동기 세션 (Request-scoped async session)
        fallback: 예상하지 못한 예외를 대체할 오류 (Error raised for unexpected failures)

    Yields:
        AsyncSession: 같은 세션 (The same session, for convenience)

    Raises:
        HTTPException: 도메인 오류 또는 fallback (Domain error or the fallback)
    """
    try:
        yield db
        await db.commit()
    except HTTPException as exc:
        await db.rollback()
        logger.warning("transaction rolled back: %s %s", exc.status_code, exc.detail)
        raise
    except Exception as exc:
        await db.rollback()
        logger.exception("transaction failed, rolled back: %s", type(exc).__name__)
        raise fallback from exc
