"""FastAPI 의존성 주입 모듈 — 세션 토큰 인증.

FastAPI dependency injection module — Session token authentication.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. HTTPBearer가 토큰을 추출 (HTTPBearer extracts the token)
    3. decode_token()이 JWT를 검증하고 페이로드를 반환
       (decode_token verifies JWT and returns payload)
    4. 페이로드의 "sub" 필드를 사용자 UUID로 반환
       (The "sub" claim is returned as the user UUID)

사용자 존재 여부는 여기서 확인하지 않습니다. 서비스마다 없는 사용자에 대해
다른 오류(NotFound/Unauthorized)를 반환하기 때문입니다.
User existence is left to the services, which answer an absent user with
different error kinds.
"""

from typing import Annotated
from uuid import UUID

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.utils.exceptions import UnauthorizedError
from app.utils.jwt import decode_token

# HTTP Bearer 토큰 추출기 — auto_error=False: 헤더 누락도 401로 통일
# (Missing header is answered with the same 401 as a bad token)
security: HTTPBearer = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> UUID:
    """세션 토큰에서 현재 사용자 ID를 추출합니다.

    Decode the bearer token and return the user id it asserts.

    Args:
        credentials: HTTP Bearer 토큰 자격 증명 (Bearer token credentials from header)

    Returns:
        UUID: 토큰의 사용자 ID (User id from the token)

    Raises:
        UnauthorizedError: 토큰 누락, 만료 또는 위조 (Missing, expired or invalid token)
    """
    if credentials is None:
        raise UnauthorizedError("로그인이 필요합니다.")

    try:
        payload: dict = decode_token(credentials.credentials)
        if payload.get("type") != "access":
            raise UnauthorizedError("잘못된 또는 만료된 토큰입니다.")
        return UUID(payload["sub"])
    except UnauthorizedError:
        raise
    except (jwt.InvalidTokenError, KeyError, ValueError, TypeError, AttributeError):
        raise UnauthorizedError("잘못된 또는 만료된 토큰입니다.")


# 편의 타입 별칭 — Convenience alias for route signatures
CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]
