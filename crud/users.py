"""
사용자(users) / 지원(applications) 데이터 접근 함수.
"""
import logging

import asyncpg
from fastapi import HTTPException, status

from utils.auth import DUMMY_HASH, hash_password, verify_password
from utils.query import build_set_clause

logger = logging.getLogger(__name__)

USER_COLUMN_MAP = {
    "firstName": "first_name",
    "lastName": "last_name",
    "isAdmin": "is_admin",
}

USER_COLUMNS = """username,
                  first_name AS "firstName",
                  last_name AS "lastName",
                  email,
                  is_admin AS "isAdmin"
"""


def _not_found(username: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"No user: {username}"
    )


async def authenticate(conn: asyncpg.Connection, username: str, password: str) -> dict:
    """username/password 확인 후 사용자 반환 (실패 시 401)"""
    row = await conn.fetchrow(
        f"SELECT {USER_COLUMNS}, password FROM users WHERE username = $1",
        username,
    )

    # 타이밍 공격 방지: 유저 존재 여부와 관계없이 항상 해시 비교 수행
    hashed_password = row["password"] if row else DUMMY_HASH
    is_password_correct = verify_password(password, hashed_password)

    if row is None or not is_password_correct:
        logger.warning("Failed login attempt for %s", username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username/password",
        )

    user = dict(row)
    del user["password"]
    return user


async def register(conn: asyncpg.Connection, data: dict) -> dict:
    """회원 생성. data: {username, password, firstName, lastName, email, isAdmin}"""
    try:
        row = await conn.fetchrow(
            f"""INSERT INTO users (username, password, first_name, last_name, email, is_admin)
                VALUES ($1, $2, $3, $4, $5, $6)
                RETURNING {USER_COLUMNS}""",
            data["username"],
            hash_password(data["password"]),
            data["firstName"],
            data["lastName"],
            data["email"],
            data.get("isAdmin", False),
        )
    except asyncpg.UniqueViolationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Duplicate username: {data['username']}"
        )

    logger.info("User registered: %s", data["username"])
    return dict(row)


async def find_all(conn: asyncpg.Connection) -> list[dict]:
    rows = await conn.fetch(f"SELECT {USER_COLUMNS} FROM users ORDER BY username")
    return [dict(row) for row in rows]


async def get(conn: asyncpg.Connection, username: str) -> dict:
    """사용자 상세 + 지원한 채용공고 ID 목록"""
    row = await conn.fetchrow(
        f"SELECT {USER_COLUMNS} FROM users WHERE username = $1",
        username,
    )
    if row is None:
        raise _not_found(username)

    application_rows = await conn.fetch(
        "SELECT job_id FROM applications WHERE username = $1 ORDER BY job_id",
        username,
    )

    user = dict(row)
    user["jobs"] = [a["job_id"] for a in application_rows]
    return user


async def update(conn: asyncpg.Connection, username: str, data: dict) -> dict:
    """
    부분 수정 (firstName, lastName, password, email, isAdmin)
    password가 포함되면 해시해서 저장한다.
    """
    data = dict(data)
    if "password" in data:
        data["password"] = hash_password(data["password"])

    set_clause, values = build_set_clause(data, USER_COLUMN_MAP)
    username_idx = len(values) + 1

    row = await conn.fetchrow(
        f"""UPDATE users
            SET {set_clause}
            WHERE username = ${username_idx}
            RETURNING {USER_COLUMNS}""",
        *values, username,
    )
    if row is None:
        raise _not_found(username)
    return dict(row)


async def remove(conn: asyncpg.Connection, username: str) -> None:
    row = await conn.fetchrow(
        "DELETE FROM users WHERE username = $1 RETURNING username",
        username,
    )
    if row is None:
        raise _not_found(username)
    logger.info("User deleted: %s", username)


async def apply_to_job(conn: asyncpg.Connection, username: str, job_id: int) -> None:
    """채용공고 지원 (사용자/공고 존재 확인, 중복 지원 불가)"""
    user = await conn.fetchrow("SELECT username FROM users WHERE username = $1", username)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Username: {username} does not exist."
        )

    job = await conn.fetchrow("SELECT id FROM jobs WHERE id = $1", job_id)
    if job is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Job ID: {job_id} does not exist."
        )

    try:
        await conn.execute(
            "INSERT INTO applications (username, job_id) VALUES ($1, $2)",
            username, job_id,
        )
    except asyncpg.UniqueViolationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"User: {username} has already applied to job ID: {job_id}"
        )
