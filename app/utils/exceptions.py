"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses for the error kinds the
services surface. FastAPI's HTTPException handler turns each one into its
status code, so services never deal with status numbers directly.

Usage:
    from app.utils.exceptions import NotFoundError, ConflictError
    raise NotFoundError("요청한 사용자의 정보를 찾을 수 없습니다.")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a referenced user does not exist.

    Args:
        detail: 오류 메시지 (Error message)
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ConflictError(HTTPException):
    """409 Conflict 예외 — 고유값 중복 시 사용.

    409 Conflict exception.
    Raised when registration would violate email uniqueness.

    Args:
        detail: 오류 메시지 (Error message)
    """

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    401 Unauthorized exception.
    Raised when the session token is missing, invalid or expired, when the
    token's user no longer exists, or when a password check fails.

    Args:
        detail: 오류 메시지 (Error message)
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when a registration cannot be completed.
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class InternalServerError(HTTPException):
    """500 Internal Server Error 예외 — 예상하지 못한 DB 실패 시 사용.

    500 exception used as the fallback for unexpected database failures.
    """

    def __init__(self, detail: str = "Internal server error") -> None:
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
