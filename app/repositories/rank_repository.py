"""랭킹 레포지토리 — 누적 포인트 기준 랭킹 조회 쿼리.

Rank Repository — Ranking queries over the users table.
The ranking is a derived view: rows are recomputed from User state on
every read and ordered by accumulated points (desc), then by registration
time (asc). Pages are fetched with a keyset cursor ``(point, date)``
taken from the last entry of the previous page.
"""

from datetime import datetime
from typing import Any, Sequence

from sqlalchemy import RowMapping, Select, and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.models.user import User


class RankRepository:
    """랭킹 목록 조회를 담당하는 레포지토리.

    Repository producing ranking pages. Each row carries the SQL RANK()
    of the user, so tied users share the same rank number.
    """

    def _ranked_query(self) -> Select:
        """순위 컬럼이 포함된 기본 랭킹 쿼리 — Base ranking query with a rank column."""
        ranked = select(
            User.id,
            User.nickname,
            User.image_url,
            User.accu_point,
            User.created_at,
            func.rank().over(order_by=User.accu_point.desc()).label("rank"),
        ).subquery("ranked")

        return select(ranked).order_by(
            ranked.c.accu_point.desc(),
            ranked.c.created_at.asc(),
            ranked.c.id.asc(),
        )

    async def first_rank_list(
        self,
        db: AsyncSession,
        limit: int | None = None,
    ) -> Sequence[RowMapping]:
        """랭킹 첫 페이지를 조회합니다.

        Retrieve the first ranking page.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            limit: 페이지 크기, None이면 RANK_PAGE_SIZE (Page size)

        Returns:
            Sequence[RowMapping]: rank, id, nickname, image_url, accu_point, created_at
        """
        query: Select = self._ranked_query().limit(limit or settings.RANK_PAGE_SIZE)
        result = await db.execute(query)
        return result.mappings().all()

    async def get_rank_list(
        self,
        db: AsyncSession,
        point: int,
        date: datetime,
        limit: int | None = None,
    ) -> Sequence[RowMapping]:
        """커서 다음 랭킹 페이지를 조회합니다.

        Retrieve the ranking page that follows the cursor ``(point, date)``:
        rows with fewer points, or equal points and a later registration.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            point: 이전 페이지 마지막 항목의 누적 포인트 (Last seen accu_point)
            date: 이전 페이지 마지막 항목의 가입 일시 (Last seen created_at)
            limit: 페이지 크기 (Page size)
        """
        query: Select = self._ranked_query()
        ranked: Any = query.selected_columns
        query = query.where(
            or_(
                ranked.accu_point < point,
                and_(ranked.accu_point == point, ranked.created_at > date),
            )
        ).limit(limit or settings.RANK_PAGE_SIZE)
        result = await db.execute(query)
        return result.mappings().all()


# 싱글턴 인스턴스 — Singleton instance
rank_repository: RankRepository = RankRepository()
