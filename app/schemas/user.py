"""사용자 인증/프로필 관련 Pydantic 요청/응답 스키마 정의.

User authentication and profile Pydantic request/response schema definitions.
Every response carries ``status_code`` and a user-facing ``message`` next
to its payload, matching what the web client expects.
"""

from pydantic import BaseModel, Field, field_validator


class MessageResponse(BaseModel):
    """처리 결과 메시지 응답 스키마.

    Confirmation response schema shared by all user operations.

    Attributes:
        status_code: 처리 상태 코드 (Operation status code, 200 on success)
        message: 사용자 표시용 메시지 (User-facing message)
    """

    status_code: int = 200
    message: str


class RegisterRequest(BaseModel):
    """회원가입 요청 스키마.

    Registration request schema.

    Attributes:
        email: 로그인 이메일 (Login email, must be unused)
        password: 비밀번호 (Plain text, bcrypt-hashed on server)
        nickname: 별명 (Display nickname)
        image_url: 프로필 이미지 URL (Profile image URL, optional)
    """

    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1)  # 평문 — 서버에서 bcrypt 해싱 (Plain text, hashed server-side)
    nickname: str = Field(min_length=1, max_length=100)
    image_url: str | None = None


class LoginRequest(BaseModel):
    """로그인 요청 스키마 — Login request schema."""

    email: str
    password: str


class LoginResponse(MessageResponse):
    """로그인 성공 응답 — 서명된 세션 토큰 포함.

    Login response including the signed session token.
    """

    token: str


class LoginCheckResponse(MessageResponse):
    """로그인 체크 응답 스키마 — Login check response schema."""

    user_id: str
    email: str
    nickname: str
    image_url: str | None


class UserPoint(BaseModel):
    """사용자 포인트 정보.

    User point information.

    Attributes:
        id: 사용자 UUID (User identifier)
        nickname: 별명 (Nickname)
        image_url: 프로필 이미지 URL (Profile image URL)
        point: 현재 포인트 잔액 (Current point balance)
        accu_point: 누적 포인트 (Accumulated points)
    """

    id: str
    nickname: str
    image_url: str | None
    point: int
    accu_point: int


class UserPointResponse(MessageResponse):
    user_point: UserPoint


class UserCountResponse(MessageResponse):
    user_count: int


class UserInfo(BaseModel):
    """사용자 프로필 정보 — User profile information."""

    id: str
    email: str
    nickname: str
    description: str | None
    image_url: str | None


class UserInfoResponse(MessageResponse):
    user_info: UserInfo


class UserInfoUpdate(BaseModel):
    """프로필 수정 요청 스키마 (부분 업데이트).

    Profile update request schema (partial update).
    Only fields present in the request body are written; ``image_url``
    is applied together with the field updates.

    Attributes:
        nickname: 새 별명 (New nickname)
        description: 새 자기소개 (New description)
        image_url: 새 프로필 이미지 URL (New profile image URL)
    """

    nickname: str | None = Field(default=None, min_length=1, max_length=100)
    description: str | None = None
    image_url: str | None = None

    @field_validator("nickname")
    @classmethod
    def _nickname_not_null(cls, value: str | None) -> str | None:
        # 별명은 생략할 수는 있어도 비울 수는 없음 (nickname may be omitted, not nulled)
        if value is None:
            raise ValueError("nickname cannot be null")
        return value
