"""
채용공고(jobs) 테이블 데이터 접근 함수.
"""
import logging

import asyncpg
from fastapi import HTTPException, status

from utils.query import build_job_filter, build_set_clause

logger = logging.getLogger(__name__)

JOB_COLUMNS = """id,
                 title,
                 salary,
                 equity,
                 company_handle AS "companyHandle"
"""

JOB_LIST_QUERY = """SELECT j.id,
                           j.title,
                           j.salary,
                           j.equity,
                           j.company_handle AS "companyHandle",
                           c.name AS "companyName"
                    FROM jobs j
                        LEFT JOIN companies c ON j.company_handle = c.handle"""


def _not_found(job_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"No job: {job_id}"
    )


async def create(conn: asyncpg.Connection, data: dict) -> dict:
    """채용공고 생성. data: {title, salary, equity, companyHandle}"""
    try:
        row = await conn.fetchrow(
            f"""INSERT INTO jobs (title, salary, equity, company_handle)
                VALUES ($1, $2, $3, $4)
                RETURNING {JOB_COLUMNS}""",
            data["title"],
            data.get("salary"),
            data.get("equity"),
            data["companyHandle"],
        )
    except asyncpg.ForeignKeyViolationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"No company: {data['companyHandle']}"
        )

    logger.info("Job created: %s (%s)", row["id"], data["companyHandle"])
    return dict(row)


async def find_all(
        conn: asyncpg.Connection,
        title: str | None = None,
        min_salary: int | None = None,
        has_equity: bool | None = None,
) -> list[dict]:
    """
    채용공고 전체 목록 (제목순)
    - title: 제목 부분 일치 (대소문자 무시)
    - min_salary: 최소 연봉
    - has_equity: True면 equity > 0 인 공고만
    """
    where_clause, values = build_job_filter(title, min_salary, has_equity)

    query = JOB_LIST_QUERY
    if where_clause:
        query += f" {where_clause}"
    query += " ORDER BY j.title"

    rows = await conn.fetch(query, *values)
    return [dict(row) for row in rows]


async def get(conn: asyncpg.Connection, job_id: int) -> dict:
    row = await conn.fetchrow(f"{JOB_LIST_QUERY} WHERE j.id = $1", job_id)
    if row is None:
        raise _not_found(job_id)
    return dict(row)


async def update(conn: asyncpg.Connection, job_id: int, data: dict) -> dict:
    """부분 수정 (title, salary, equity)"""
    set_clause, values = build_set_clause(data)
    id_idx = len(values) + 1

    row = await conn.fetchrow(
        f"""UPDATE jobs
            SET {set_clause}
            WHERE id = ${id_idx}
            RETURNING {JOB_COLUMNS}""",
        *values, job_id,
    )
    if row is None:
        raise _not_found(job_id)
    return dict(row)


async def remove(conn: asyncpg.Connection, job_id: int) -> None:
    row = await conn.fetchrow("DELETE FROM jobs WHERE id = $1 RETURNING id", job_id)
    if row is None:
        raise _not_found(job_id)
    logger.info("Job deleted: %s", job_id)
