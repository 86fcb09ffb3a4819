"""사용자 레포지토리 — 사용자 CRUD 및 포인트 조회 쿼리.

User Repository — CRUD and point queries for users.
Extends BaseRepository with email lookup, single-field profile updates,
point lookup and the total user count.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import Row, Select, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import User
from app.repositories.base import BaseRepository

# 프로필 수정으로 변경 가능한 필드 — Profile fields a user may change
UPDATABLE_FIELDS: frozenset[str] = frozenset({"nickname", "description"})


class UserRepository(BaseRepository[User]):
    """사용자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the users table.
    """

    def __init__(self) -> None:
        super().__init__(User)

    async def find_by_email(
        self,
        db: AsyncSession,
        email: str,
    ) -> User | None:
        """이메일로 사용자를 조회합니다.

        Retrieve a user by login email.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 로그인 이메일 (Login email)

        Returns:
            User | None: 사용자 또는 None (User or None)
        """
        return await self.get_one_by(db, {"email": email})

    async def update_field(
        self,
        db: AsyncSession,
        user_id: UUID,
        field: str,
        value: Any,
        image_url: str | None = None,
    ) -> int:
        """사용자 프로필 필드 하나를 수정합니다.

        Update one profile field with its own UPDATE statement.
        When ``image_url`` is given it is written in the same statement.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 사용자 ID (User UUID)
            field: 수정할 필드 이름 (nickname 또는 description)
                   (Field to change, one of UPDATABLE_FIELDS)
            value: 새 값 (New value)
            image_url: 프로필 이미지 URL (Profile image URL, optional)

        Returns:
            int: 수정된 행 수 (Number of rows updated)

        Raises:
            ValueError: 수정 불가능한 필드 (Field is not updatable)
        """
        if field not in UPDATABLE_FIELDS:
            raise ValueError(f"field '{field}' cannot be updated")

        values: dict[str, Any] = {field: value}
        if image_url is not None:
            values["image_url"] = image_url

        result = await db.execute(
            update(User).where(User.id == user_id).values(**values)
        )
        return result.rowcount

    async def update_image(
        self,
        db: AsyncSession,
        user_id: UUID,
        image_url: str,
    ) -> int:
        """프로필 이미지 URL만 수정합니다 — Update only the profile image URL."""
        result = await db.execute(
            update(User).where(User.id == user_id).values(image_url=image_url)
        )
        return result.rowcount

    async def get_point(
        self,
        db: AsyncSession,
        user_id: UUID,
    ) -> Row | None:
        """사용자의 현재 포인트와 누적 포인트를 조회합니다.

        Retrieve the point columns of a user.

        Returns:
            Row | None: (id, nickname, image_url, point, accu_point) 또는 None
        """
        query: Select = select(
            User.id, User.nickname, User.image_url, User.point, User.accu_point
        ).where(User.id == user_id)
        result = await db.execute(query)
        return result.one_or_none()


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
