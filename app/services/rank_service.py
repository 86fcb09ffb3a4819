"""랭킹 서비스 — 누적 포인트 랭킹 목록 조회 비즈니스 로직.

Rank Service — Business logic for the paginated point ranking list.
"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.rank_repository import RankRepository, rank_repository
from app.repositories.user_repository import UserRepository, user_repository
from app.schemas.rank import RANK_LIST_END_MESSAGE, RankEntry, RankListResponse
from app.utils.exceptions import BadRequestError, InternalServerError, UnauthorizedError
from app.utils.transaction import transaction

# 페이지 요청 point 값 — Page request sentinels for ``point``
FIRST_PAGE: int = 0
END_OF_LIST: int = -1


class RankService:
    """랭킹 목록 비즈니스 로직을 처리하는 서비스.

    Service handling the ranking list.

    Attributes:
        users: 사용자 레포지토리 (Requester existence check)
        ranks: 랭킹 레포지토리 (Ranking queries)
    """

    def __init__(self, users: UserRepository, ranks: RankRepository) -> None:
        self.users: UserRepository = users
        self.ranks: RankRepository = ranks

    async def get_rank_list(
        self,
        db: AsyncSession,
        user_id: UUID,
        point: int,
        date: datetime | None = None,
    ) -> RankListResponse:
        """랭킹 목록 한 페이지를 조회합니다.

        Retrieve one ranking page, dispatching on ``point``:
            - 0: 첫 페이지 (first page)
            - -1: 더 이상 페이지 없음, 완료 문구 반환
                  (no further pages, returns the completion marker)
            - 그 외: ``(point, date)`` 커서 다음 페이지
                     (page after the ``(point, date)`` cursor)

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 요청자 ID (Requester UUID)
            point: 커서 누적 포인트 또는 센티널 (Cursor point or sentinel)
            date: 커서 가입 일시 (Cursor timestamp, required for cursor pages)

        Returns:
            RankListResponse: 랭킹 목록 또는 완료 문구 (Entries or completion marker)

        Raises:
            UnauthorizedError: 요청자가 존재하지 않을 때 (Requester absent)
            BadRequestError: 커서 페이지인데 date가 없을 때 (Cursor page without date)
            InternalServerError: 그 외 실패 (Any other failure)
        """
        async with transaction(db, InternalServerError("전체 랭킹 리스트 불러오기에 실패했습니다.")):
            user: User | None = await self.users.get_by_id(db, user_id)
            if user is None:
                raise UnauthorizedError("잘못된 또는 만료된 토큰입니다.")

            rank_list: list[RankEntry] | str
            if point == FIRST_PAGE:
                rows = await self.ranks.first_rank_list(db)
                rank_list = [self._to_entry(row) for row in rows]
            elif point == END_OF_LIST:
                rank_list = RANK_LIST_END_MESSAGE
            else:
                if date is None:
                    raise BadRequestError("다음 랭킹을 불러오려면 date 값이 필요합니다.")
                # 타임존 없는 커서는 UTC로 간주 — Naive cursors are taken as UTC
                if date.tzinfo is None:
                    date = date.replace(tzinfo=timezone.utc)
                rows = await self.ranks.get_rank_list(db, point, date)
                rank_list = [self._to_entry(row) for row in rows]

        return RankListResponse(
            message="전체 랭킹 리스트 불러오기에 성공했습니다.",
            rank_list=rank_list,
        )

    @staticmethod
    def _to_entry(row) -> RankEntry:
        return RankEntry(
            rank=row["rank"],
            id=str(row["id"]),
            nickname=row["nickname"],
            image_url=row["image_url"],
            accu_point=row["accu_point"],
            created_at=row["created_at"],
        )


# 싱글턴 인스턴스 — Singleton instance
rank_service: RankService = RankService(user_repository, rank_repository)
