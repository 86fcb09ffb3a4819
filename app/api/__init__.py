"""API 라우터 패키지 — 모든 엔드포인트 통합.

API Router package — Aggregates every endpoint into a single router for
inclusion in the FastAPI application.

Included routers:
    - users: 회원가입, 로그인, 내 정보, 포인트, 사용자 수
             (Registration, login, profile, points, user count)
    - ranks: 랭킹 목록 (Ranking list)
"""

from fastapi import APIRouter

from app.api.ranks import router as ranks_router
from app.api.users import router as users_router

api_router: APIRouter = APIRouter()

api_router.include_router(users_router, prefix="/users", tags=["Users"])
api_router.include_router(ranks_router, prefix="/ranks", tags=["Ranks"])
