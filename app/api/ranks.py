"""랭킹 라우터 — 누적 포인트 랭킹 목록 조회.

Rank Router — Paginated accumulated-point ranking list.
"""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import CurrentUserId
from app.database import get_db
from app.schemas.rank import RankListResponse
from app.services.rank_service import rank_service

router: APIRouter = APIRouter()


@router.get("", response_model=RankListResponse)
async def get_rank_list(
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
    point: Annotated[int, Query(description="0=첫 페이지, -1=끝, 그 외=커서 누적 포인트")] = 0,
    date: Annotated[datetime | None, Query(description="커서 가입 일시 (cursor created_at)")] = None,
) -> RankListResponse:
    """랭킹 목록 조회.

    Get one ranking page. Pass the ``accu_point`` and ``created_at`` of the
    last entry received as ``point`` and ``date`` to fetch the next page,
    and ``point=-1`` once the client has reached the end.
    """
    return await rank_service.get_rank_list(db, user_id, point, date)
