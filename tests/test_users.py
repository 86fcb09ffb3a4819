"""사용자 API 테스트 — 회원가입, 로그인, 로그인 체크, 포인트, 사용자 수, 내 정보.

User API tests — Registration, login, login check, points, user count,
and profile read/update/delete, including the error kind chosen for an
absent user by each endpoint.
"""

import uuid

from httpx import AsyncClient
from sqlalchemy import select

from app.models.user import User
from app.utils.jwt import create_access_token, decode_token
from app.utils.password import verify_password
from tests.conftest import (
    DEFAULT_PASSWORD,
    auth_header,
    count_users,
    fetch_user,
    make_token,
)

URL = "/api/v1/users"


def ghost_token() -> str:
    """존재하지 않는 사용자의 유효한 토큰."""
    return create_access_token({"sub": str(uuid.uuid4()), "email": "ghost@test.com", "name": "ghost"})


# ===== Register =====

class TestRegister:
    """회원가입 테스트."""

    async def test_register_success(self, client: AsyncClient, session_factory):
        """새 이메일로 회원가입 시 사용자 1명 생성, 비밀번호는 해시로 저장."""
        res = await client.post(f"{URL}/register", json={
            "email": "new@test.com",
            "password": "secret-pw",
            "nickname": "newbie",
            "image_url": "https://img.test/new.png",
        })
        assert res.status_code == 201
        assert res.json() == {"status_code": 200, "message": "회원가입에 성공했습니다."}

        assert await count_users(session_factory) == 1
        async with session_factory() as session:
            user = (await session.execute(select(User))).scalar_one()
        assert user.email == "new@test.com"
        assert user.nickname == "newbie"
        assert user.image_url == "https://img.test/new.png"
        assert user.password_hash != "secret-pw"
        assert verify_password("secret-pw", user.password_hash)
        assert user.point == 0
        assert user.accu_point == 0

    async def test_register_duplicate_email(self, client: AsyncClient, session_factory, alice):
        """이미 가입된 이메일은 409, 추가 쓰기 없음."""
        res = await client.post(f"{URL}/register", json={
            "email": "alice@test.com",
            "password": "whatever",
            "nickname": "alice2",
        })
        assert res.status_code == 409
        assert res.json()["detail"] == "이 이메일은 현재 사용중입니다. 다른 이메일을 입력해 주세요."
        assert await count_users(session_factory) == 1

    async def test_register_missing_nickname(self, client: AsyncClient):
        """필수 필드 누락 시 422."""
        res = await client.post(f"{URL}/register", json={
            "email": "x@test.com",
            "password": "pw",
        })
        assert res.status_code == 422


# ===== Login =====

class TestLogin:
    """로그인 테스트."""

    async def test_login_success(self, client: AsyncClient, alice):
        """올바른 자격 증명 — 토큰 페이로드가 사용자와 일치."""
        res = await client.post(f"{URL}/login", json={
            "email": "alice@test.com",
            "password": DEFAULT_PASSWORD,
        })
        assert res.status_code == 200
        data = res.json()
        assert data["message"] == "로그인에 성공했습니다."

        payload = decode_token(data["token"])
        assert payload["sub"] == str(alice.id)
        assert payload["email"] == "alice@test.com"
        assert payload["name"] == "alice"
        assert payload["description"] == "hello"
        assert payload["type"] == "access"

    async def test_login_wrong_password(self, client: AsyncClient, alice):
        """잘못된 비밀번호로 로그인 시 401."""
        res = await client.post(f"{URL}/login", json={
            "email": "alice@test.com",
            "password": "wrong_password",
        })
        assert res.status_code == 401
        assert res.json()["detail"] == "비밀번호가 일치하지 않습니다. 다시 한 번 확인해 주세요."

    async def test_login_unknown_email(self, client: AsyncClient, alice):
        """가입되지 않은 이메일로 로그인 시 404."""
        res = await client.post(f"{URL}/login", json={
            "email": "nobody@test.com",
            "password": DEFAULT_PASSWORD,
        })
        assert res.status_code == 404

    async def test_login_token_usable(self, client: AsyncClient, alice):
        """발급된 토큰으로 인증 API 접근 가능."""
        login_res = await client.post(f"{URL}/login", json={
            "email": "alice@test.com",
            "password": DEFAULT_PASSWORD,
        })
        token = login_res.json()["token"]

        res = await client.get(f"{URL}/login-check", headers=auth_header(token))
        assert res.status_code == 200
        assert res.json()["user_id"] == str(alice.id)


# ===== Login check =====

class TestLoginCheck:
    """로그인 체크 테스트."""

    async def test_login_check_success(self, client: AsyncClient, alice):
        res = await client.get(f"{URL}/login-check", headers=auth_header(make_token(alice)))
        assert res.status_code == 200
        data = res.json()
        assert data["message"] == "정상적인 유저입니다."
        assert data["email"] == "alice@test.com"
        assert data["nickname"] == "alice"
        assert data["image_url"] == "https://img.test/alice.png"

    async def test_login_check_without_token(self, client: AsyncClient):
        """토큰 없이 요청 시 401."""
        res = await client.get(f"{URL}/login-check")
        assert res.status_code == 401

    async def test_login_check_invalid_token(self, client: AsyncClient):
        """위조된 토큰으로 요청 시 401."""
        res = await client.get(f"{URL}/login-check", headers=auth_header("invalid.token.here"))
        assert res.status_code == 401

    async def test_login_check_absent_user(self, client: AsyncClient):
        """존재하지 않는 사용자의 토큰은 404."""
        res = await client.get(f"{URL}/login-check", headers=auth_header(ghost_token()))
        assert res.status_code == 404


# ===== Point / Count =====

class TestUserPoint:
    """포인트 조회 테스트."""

    async def test_get_point(self, client: AsyncClient, alice):
        res = await client.get(f"{URL}/point", headers=auth_header(make_token(alice)))
        assert res.status_code == 200
        point = res.json()["user_point"]
        assert point["id"] == str(alice.id)
        assert point["point"] == 30
        assert point["accu_point"] == 120

    async def test_get_point_absent_user(self, client: AsyncClient):
        """포인트 조회는 없는 사용자에 대해 401."""
        res = await client.get(f"{URL}/point", headers=auth_header(ghost_token()))
        assert res.status_code == 401


class TestUserCount:
    """전체 사용자 수 조회 테스트."""

    async def test_get_count(self, client: AsyncClient, alice, bob):
        res = await client.get(f"{URL}/count", headers=auth_header(make_token(bob)))
        assert res.status_code == 200
        assert res.json()["user_count"] == 2

    async def test_get_count_absent_user(self, client: AsyncClient, alice):
        res = await client.get(f"{URL}/count", headers=auth_header(ghost_token()))
        assert res.status_code == 401


# ===== Profile =====

class TestUserInfo:
    """내 정보 조회/수정/삭제 테스트."""

    async def test_get_info(self, client: AsyncClient, alice):
        res = await client.get(f"{URL}/me", headers=auth_header(make_token(alice)))
        assert res.status_code == 200
        info = res.json()["user_info"]
        assert info == {
            "id": str(alice.id),
            "email": "alice@test.com",
            "nickname": "alice",
            "description": "hello",
            "image_url": "https://img.test/alice.png",
        }

    async def test_get_info_absent_user(self, client: AsyncClient):
        res = await client.get(f"{URL}/me", headers=auth_header(ghost_token()))
        assert res.status_code == 404

    async def test_update_info(self, client: AsyncClient, session_factory, alice):
        """별명, 자기소개, 이미지 동시 수정."""
        res = await client.put(f"{URL}/me", json={
            "nickname": "alice-renamed",
            "description": "bye",
            "image_url": "https://img.test/new.png",
        }, headers=auth_header(make_token(alice)))
        assert res.status_code == 200
        assert res.json()["message"] == "유저 정보 수정하기에 성공하셨습니다."

        user = await fetch_user(session_factory, alice.id)
        assert user.nickname == "alice-renamed"
        assert user.description == "bye"
        assert user.image_url == "https://img.test/new.png"

    async def test_update_partial_keeps_other_fields(self, client: AsyncClient, session_factory, alice):
        """보내지 않은 필드는 유지."""
        res = await client.put(f"{URL}/me", json={"description": "only this"},
                               headers=auth_header(make_token(alice)))
        assert res.status_code == 200

        user = await fetch_user(session_factory, alice.id)
        assert user.nickname == "alice"
        assert user.description == "only this"
        assert user.image_url == "https://img.test/alice.png"

    async def test_update_null_nickname_rejected(self, client: AsyncClient, alice):
        res = await client.put(f"{URL}/me", json={"nickname": None},
                               headers=auth_header(make_token(alice)))
        assert res.status_code == 422

    async def test_update_absent_user(self, client: AsyncClient):
        res = await client.put(f"{URL}/me", json={"nickname": "x"},
                               headers=auth_header(ghost_token()))
        assert res.status_code == 404

    async def test_delete_info(self, client: AsyncClient, session_factory, alice, bob):
        token = make_token(alice)
        res = await client.delete(f"{URL}/me", headers=auth_header(token))
        assert res.status_code == 200
        assert res.json()["message"] == "유저 정보 삭제하기에 성공하셨습니다."

        assert await fetch_user(session_factory, alice.id) is None
        assert await count_users(session_factory) == 1

        # 삭제 후 같은 토큰으로 재요청 시 404
        res = await client.delete(f"{URL}/me", headers=auth_header(token))
        assert res.status_code == 404
