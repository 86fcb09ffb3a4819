"""사용자 인증 서비스 — 회원가입, 로그인, 프로필 조회/수정/삭제 비즈니스 로직.

User Auth Service — Business logic for registration, login, and profile
read/update/delete, plus point and user-count lookups.

Every operation runs in exactly one transaction on the request session
(``transaction``): lookup, validate, one read or write, then commit. Domain
errors pass through unchanged after rollback; unexpected failures become
the operation's fallback error.
"""

from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.user_repository import UserRepository, user_repository
from app.schemas.user import (
    LoginCheckResponse,
    LoginResponse,
    MessageResponse,
    UserCountResponse,
    UserInfo,
    UserInfoResponse,
    UserPoint,
    UserPointResponse,
)
from app.utils.exceptions import (
    BadRequestError,
    ConflictError,
    InternalServerError,
    NotFoundError,
    UnauthorizedError,
)
from app.utils.jwt import create_access_token
from app.utils.password import hash_password, verify_password
from app.utils.transaction import transaction

# 공통 오류 메시지 — Shared error messages
USER_NOT_FOUND: str = "요청한 사용자의 정보를 찾을 수 없습니다."
INVALID_TOKEN: str = "잘못된 또는 만료된 토큰입니다."


class UserAuthService:
    """사용자 인증 및 프로필 비즈니스 로직을 처리하는 서비스.

    Service handling authentication and profile business logic.

    Attributes:
        users: 사용자 레포지토리 (User data-access dependency)
    """

    def __init__(self, users: UserRepository) -> None:
        self.users: UserRepository = users

    def _build_jwt_payload(self, user: User) -> dict[str, str | None]:
        """세션 토큰 페이로드를 생성합니다 — Build the session token payload."""
        return {
            "sub": str(user.id),
            "email": user.email,
            "name": user.nickname,
            "description": user.description,
        }

    async def create_user(
        self,
        db: AsyncSession,
        email: str,
        password: str,
        nickname: str,
        image_url: str | None = None,
    ) -> MessageResponse:
        """회원가입을 처리합니다.

        Register a new user. The email must not be registered yet; the
        password is stored only as a bcrypt hash.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 로그인 이메일 (Login email)
            password: 평문 비밀번호 (Plain text password)
            nickname: 별명 (Nickname)
            image_url: 프로필 이미지 URL (Profile image URL, optional)

        Returns:
            MessageResponse: 처리 결과 (Confirmation)

        Raises:
            ConflictError: 이미 사용 중인 이메일 (Email already registered)
            BadRequestError: 그 외 모든 실패 (Any other failure)
        """
        async with transaction(db, BadRequestError("회원가입에 실패했습니다.")):
            # 이메일 중복 확인 — Check email uniqueness
            existing: User | None = await self.users.find_by_email(db, email)
            if existing is not None:
                raise ConflictError("이 이메일은 현재 사용중입니다. 다른 이메일을 입력해 주세요.")

            await self.users.create(db, {
                "email": email,
                "password_hash": hash_password(password),
                "nickname": nickname,
                "image_url": image_url,
            })

        return MessageResponse(message="회원가입에 성공했습니다.")

    async def get_user(
        self,
        db: AsyncSession,
        email: str,
        password: str,
    ) -> LoginResponse:
        """로그인을 처리하고 세션 토큰을 발급합니다.

        Verify credentials and issue a signed session token.

        Raises:
            NotFoundError: 가입되지 않은 이메일 (Unknown email)
            UnauthorizedError: 비밀번호 불일치 또는 그 외 실패
                               (Password mismatch, or any other failure)
        """
        async with transaction(db, UnauthorizedError("로그인에 실패하셨습니다.")):
            user: User | None = await self.users.find_by_email(db, email)
            if user is None:
                raise NotFoundError("해당 이메일은 가입 내역이 없습니다. 다시 한 번 확인해 주세요.")

            if not verify_password(password, user.password_hash):
                raise UnauthorizedError("비밀번호가 일치하지 않습니다. 다시 한 번 확인해 주세요.")

            token: str = create_access_token(self._build_jwt_payload(user))

        return LoginResponse(message="로그인에 성공했습니다.", token=token)

    async def login_check(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> LoginCheckResponse:
        """토큰의 사용자가 실제로 존재하는지 확인합니다.

        Confirm that the token's user still exists.

        Raises:
            NotFoundError: 사용자가 없을 때 (User absent)
        """
        async with transaction(db, InternalServerError("로그인 확인에 실패했습니다.")):
            user: User | None = await self.users.get_by_id(db, user_id)
            if user is None:
                raise NotFoundError(USER_NOT_FOUND)

        return LoginCheckResponse(
            message="정상적인 유저입니다.",
            user_id=str(user.id),
            email=user.email,
            nickname=user.nickname,
            image_url=user.image_url,
        )

    async def get_user_point(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> UserPointResponse:
        """사용자의 현재 포인트와 누적 포인트를 조회합니다.

        Retrieve current and accumulated points of the requester.

        Raises:
            UnauthorizedError: 요청자가 존재하지 않을 때 (Requester absent)
            InternalServerError: 그 외 실패 (Any other failure)
        """
        async with transaction(db, InternalServerError("유저 포인트 내역 불러오기에 실패했습니다.")):
            user: User | None = await self.users.get_by_id(db, user_id)
            if user is None:
                raise UnauthorizedError(INVALID_TOKEN)

            row = await self.users.get_point(db, user_id)

        return UserPointResponse(
            message="유저 포인트 내역 불러오기에 성공했습니다.",
            user_point=UserPoint(
                id=str(row.id),
                nickname=row.nickname,
                image_url=row.image_url,
                point=row.point,
                accu_point=row.accu_point,
            ),
        )

    async def get_user_count(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> UserCountResponse:
        """전체 사용자 수를 조회합니다.

        Retrieve the total number of users. The requester lookup is only
        an authentication check.

        Raises:
            UnauthorizedError: 요청자가 존재하지 않을 때 (Requester absent)
            InternalServerError: 그 외 실패 (Any other failure)
        """
        async with transaction(db, InternalServerError("전체 유저 수 불러오기에 실패했습니다.")):
            user: User | None = await self.users.get_by_id(db, user_id)
            if user is None:
                raise UnauthorizedError(INVALID_TOKEN)

            user_count: int = await self.users.count(db)

        return UserCountResponse(
            message="전체 유저 수 불러오기에 성공하셨습니다.",
            user_count=user_count,
        )

    async def get_user_info(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> UserInfoResponse:
        """사용자 프로필 정보를 조회합니다 — Retrieve a user's profile.

        Raises:
            NotFoundError: 사용자가 없을 때 (User absent)
        """
        async with transaction(db, InternalServerError("유저 정보 불러오기에 실패했습니다.")):
            user: User | None = await self.users.get_by_id(db, user_id)
            if user is None:
                raise NotFoundError(USER_NOT_FOUND)

        return UserInfoResponse(
            message="유저 정보 불러오기에 성공하셨습니다.",
            user_info=UserInfo(
                id=str(user.id),
                email=user.email,
                nickname=user.nickname,
                description=user.description,
                image_url=user.image_url,
            ),
        )

    async def set_user_info(
        self,
        db: AsyncSession,
        user_id: UUID,
        to_update: dict[str, Any],
        image_url: str | None = None,
    ) -> MessageResponse:
        """사용자 프로필(별명, 자기소개, 이미지)을 수정합니다.

        Update profile fields. Each field is written by its own UPDATE, in
        order, inside one transaction: if any write fails none of them is
        kept. ``image_url`` is written alongside every field update, or on
        its own when ``to_update`` is empty.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 사용자 ID (User UUID)
            to_update: {필드: 새 값} — nickname, description
                       ({field: new value} for nickname/description)
            image_url: 새 프로필 이미지 URL (New profile image URL, optional)

        Raises:
            NotFoundError: 사용자가 없을 때 (User absent)
            InternalServerError: 쓰기 실패 (Write failure)
        """
        async with transaction(db, InternalServerError("유저 정보 수정하기에 실패했습니다.")):
            user: User | None = await self.users.get_by_id(db, user_id)
            if user is None:
                raise NotFoundError(USER_NOT_FOUND)

            for field, value in to_update.items():
                await self.users.update_field(db, user_id, field, value, image_url)

            if not to_update and image_url is not None:
                await self.users.update_image(db, user_id, image_url)

        return MessageResponse(message="유저 정보 수정하기에 성공하셨습니다.")

    async def del_user_info(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> MessageResponse:
        """사용자 계정을 삭제합니다 — Delete a user account.

        Raises:
            NotFoundError: 사용자가 없을 때 (User absent)
            InternalServerError: 삭제 실패 (Write failure)
        """
        async with transaction(db, InternalServerError("유저 정보 삭제하기에 실패했습니다.")):
            user: User | None = await self.users.get_by_id(db, user_id)
            if user is None:
                raise NotFoundError(USER_NOT_FOUND)

            await self.users.delete(db, user_id)

        return MessageResponse(message="유저 정보 삭제하기에 성공하셨습니다.")


# 싱글턴 인스턴스 — Singleton instance
user_auth_service: UserAuthService = UserAuthService(user_repository)
