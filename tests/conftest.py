"""
공통 테스트 설정

실행 방법:
    pip install -e ".[dev]"
    pytest -v

DB에는 접속하지 않는다. get_connection 의존성은 가짜 커넥션으로 대체하고
라우터 테스트에서는 crud 함수를 AsyncMock으로 patch 한다.
"""
import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-for-jwt-signing-0123456789")
os.environ.setdefault("PASSWORD_PEPPER", "test-pepper")

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from main import app
from utils.auth import create_access_token
from utils.database import get_connection


@pytest.fixture
def fake_conn():
    """라우터로 전달되는 커넥션 (crud가 patch 되므로 실제로 쓰이지 않음)"""
    return AsyncMock(name="conn")


@pytest.fixture
def client(fake_conn):
    """테스트용 FastAPI 클라이언트"""
    async def override_get_connection():
        yield fake_conn

    app.dependency_overrides[get_connection] = override_get_connection
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def user_headers():
    """일반 사용자(u1) 인증 헤더"""
    token = create_access_token("u1", is_admin=False)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_headers():
    """관리자 인증 헤더"""
    token = create_access_token("admin", is_admin=True)
    return {"Authorization": f"Bearer {token}"}
