"""랭킹 관련 Pydantic 응답 스키마 정의.

Ranking Pydantic response schema definitions.
"""

from datetime import datetime

from pydantic import BaseModel

# 마지막 페이지 이후 요청 시 목록 대신 반환되는 완료 문구
# Completion marker returned instead of a list once the client has read every page
RANK_LIST_END_MESSAGE: str = "전체 불러오기가 끝났습니다."


class RankEntry(BaseModel):
    """랭킹 항목 스키마.

    Ranking entry schema. ``accu_point`` and ``created_at`` of the last
    entry form the cursor for the next page request.

    Attributes:
        rank: 순위, 동점자는 같은 순위 (Rank, ties share a rank)
        id: 사용자 UUID (User identifier)
        nickname: 별명 (Nickname)
        image_url: 프로필 이미지 URL (Profile image URL)
        accu_point: 누적 포인트 (Accumulated points)
        created_at: 가입 일시 (Registration timestamp)
    """

    rank: int
    id: str
    nickname: str
    image_url: str | None
    accu_point: int
    created_at: datetime


class RankListResponse(BaseModel):
    """랭킹 목록 응답 스키마.

    Ranking list response. ``rank_list`` is the page of entries, or the
    RANK_LIST_END_MESSAGE string when the client signalled the end.
    """

    message: str
    rank_list: list[RankEntry] | str
