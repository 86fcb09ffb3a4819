"""사용자 라우터 — 회원가입, 로그인, 포인트/사용자 수, 내 정보 관리.

User Router — Registration, login, point and user count lookups, and
management of the current user's profile.
Follows 3-layer architecture: Router → Service → Repository.
Transactions are owned by the service layer, so routes never commit.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import CurrentUserId
from app.database import get_db
from app.schemas.user import (
    LoginCheckResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    UserCountResponse,
    UserInfoResponse,
    UserInfoUpdate,
    UserPointResponse,
)
from app.services.user_auth_service import user_auth_service

router: APIRouter = APIRouter()


@router.post("/register", response_model=MessageResponse, status_code=201)
async def register(
    data: RegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """회원가입 — Register a new user."""
    return await user_auth_service.create_user(
        db, data.email, data.password, data.nickname, data.image_url
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> LoginResponse:
    """로그인 — 세션 토큰 발급.

    Login endpoint. Returns a signed session token.
    """
    return await user_auth_service.get_user(db, data.email, data.password)


@router.get("/login-check", response_model=LoginCheckResponse)
async def login_check(
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
) -> LoginCheckResponse:
    """로그인 체크 — 토큰의 사용자가 유효한지 확인.

    Confirm the session token still belongs to an existing user.
    """
    return await user_auth_service.login_check(db, user_id)


@router.get("/point", response_model=UserPointResponse)
async def get_my_point(
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
) -> UserPointResponse:
    """내 현재 포인트와 누적 포인트 조회."""
    return await user_auth_service.get_user_point(db, user_id)


@router.get("/count", response_model=UserCountResponse)
async def get_user_count(
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
) -> UserCountResponse:
    """전체 사용자 수 조회."""
    return await user_auth_service.get_user_count(db, user_id)


@router.get("/me", response_model=UserInfoResponse)
async def get_my_info(
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
) -> UserInfoResponse:
    """내 정보 조회 — Get the current user's profile."""
    return await user_auth_service.get_user_info(db, user_id)


@router.put("/me", response_model=MessageResponse)
async def update_my_info(
    data: UserInfoUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
) -> MessageResponse:
    """내 정보 수정 — 별명, 자기소개, 프로필 이미지.

    Update the current user's profile. Only fields sent in the body are
    written.

    Args:
        data: 수정 데이터 (Update data)
        db: 비동기 데이터베이스 세션 (Async database session)
        user_id: 인증된 사용자 ID (Authenticated user id)

    Returns:
        MessageResponse: 처리 결과 (Confirmation)
    """
    to_update: dict = data.model_dump(exclude_unset=True, exclude={"image_url"})
    return await user_auth_service.set_user_info(db, user_id, to_update, data.image_url)


@router.delete("/me", response_model=MessageResponse)
async def delete_my_info(
    db: Annotated[AsyncSession, Depends(get_db)],
    user_id: CurrentUserId,
) -> MessageResponse:
    """회원 탈퇴 — Delete the current user's account."""
    return await user_auth_service.del_user_info(db, user_id)
