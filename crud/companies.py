"""
회사(companies) 테이블 데이터 접근 함수.

모든 함수는 asyncpg 커넥션을 첫 인자로 받고 $N 위치 파라미터 SQL을 실행한다.
"""
import logging

import asyncpg
from fastapi import HTTPException, status

from utils.query import build_company_filter, build_set_clause

logger = logging.getLogger(__name__)

COMPANY_COLUMN_MAP = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

# db/models/company.py 의 UNIQUE 제약 이름
NAME_CONSTRAINT = "uq_companies_name"

COMPANY_COLUMNS = """handle,
                     name,
                     description,
                     num_employees AS "numEmployees",
                     logo_url AS "logoUrl"
"""


def _not_found(handle: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"No company: {handle}"
    )


def _duplicate_name(name: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"Duplicate company name: {name}"
    )


async def create(conn: asyncpg.Connection, data: dict) -> dict:
    """회사 생성. data: {handle, name, description, numEmployees, logoUrl}"""
    try:
        row = await conn.fetchrow(
            f"""INSERT INTO companies (handle, name, description, num_employees, logo_url)
                VALUES ($1, $2, $3, $4, $5)
                RETURNING {COMPANY_COLUMNS}""",
            data["handle"],
            data["name"],
            data.get("description"),
            data.get("numEmployees"),
            data.get("logoUrl"),
        )
    except asyncpg.UniqueViolationError as e:
        if e.constraint_name == NAME_CONSTRAINT:
            raise _duplicate_name(data["name"])
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Duplicate company: {data['handle']}"
        )

    logger.info("Company created: %s", data["handle"])
    return dict(row)


async def find_all(
        conn: asyncpg.Connection,
        name: str | None = None,
        min_employees: int | None = None,
        max_employees: int | None = None,
) -> list[dict]:
    """회사 목록 (이름순), 선택적 필터: name, min_employees, max_employees"""
    where_clause, values = build_company_filter(name, min_employees, max_employees)

    query = f"SELECT {COMPANY_COLUMNS} FROM companies"
    if where_clause:
        query += f" {where_clause}"
    query += " ORDER BY name"

    rows = await conn.fetch(query, *values)
    return [dict(row) for row in rows]


async def get(conn: asyncpg.Connection, handle: str) -> dict:
    """회사 상세 + 소속 채용공고 목록"""
    row = await conn.fetchrow(
        f"SELECT {COMPANY_COLUMNS} FROM companies WHERE handle = $1",
        handle,
    )
    if row is None:
        raise _not_found(handle)

    job_rows = await conn.fetch(
        """SELECT id, title, salary, equity
           FROM jobs
           WHERE company_handle = $1
           ORDER BY id""",
        handle,
    )

    company = dict(row)
    company["jobs"] = [dict(job) for job in job_rows]
    return company


async def update(conn: asyncpg.Connection, handle: str, data: dict) -> dict:
    """
    부분 수정. data에 들어있는 필드만 변경한다.
    (name, description, numEmployees, logoUrl)
    """
    set_clause, values = build_set_clause(data, COMPANY_COLUMN_MAP)
    handle_idx = len(values) + 1

    try:
        row = await conn.fetchrow(
            f"""UPDATE companies
                SET {set_clause}
                WHERE handle = ${handle_idx}
                RETURNING {COMPANY_COLUMNS}""",
            *values, handle,
        )
    except asyncpg.UniqueViolationError:
        # handle은 수정 불가이므로 name 중복뿐
        raise _duplicate_name(data.get("name"))

    if row is None:
        raise _not_found(handle)
    return dict(row)


async def remove(conn: asyncpg.Connection, handle: str) -> None:
    row = await conn.fetchrow(
        "DELETE FROM companies WHERE handle = $1 RETURNING handle",
        handle,
    )
    if row is None:
        raise _not_found(handle)
    logger.info("Company deleted: %s", handle)
