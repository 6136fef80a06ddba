"""테스트 데이터 생성 스크립트

사용법:
    python scripts/init_db.py --reset
    python scripts/seed.py

테스트 계정:
    - username: admin / password: admin1234 (관리자)
    - username: testuser / password: test1234
"""
import asyncio
import logging
import sys
from decimal import Decimal
from pathlib import Path

import asyncpg

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

import crud.companies as companies_crud
import crud.jobs as jobs_crud
import crud.users as users_crud
from config import settings

logger = logging.getLogger(__name__)

TEST_COMPANIES = [
    {
        "handle": "anderson-arias-morrow",
        "name": "Anderson, Arias and Morrow",
        "numEmployees": 245,
        "description": "Somebody program how I. Face give away discussion view act inside.",
        "logoUrl": "https://example.com/logos/anderson-arias-morrow.png",
    },
    {
        "handle": "bauer-gallagher",
        "name": "Bauer-Gallagher",
        "numEmployees": 862,
        "description": "Difficult ready trip question produce produce someone.",
        "logoUrl": None,
    },
    {
        "handle": "watson-davis",
        "name": "Watson-Davis",
        "numEmployees": 819,
        "description": "Year join loss.",
        "logoUrl": None,
    },
]

TEST_JOBS = [
    {"title": "Conservator, furniture", "salary": 110000, "equity": 0, "companyHandle": "watson-davis"},
    {"title": "Information officer", "salary": 200000, "equity": None, "companyHandle": "bauer-gallagher"},
    {"title": "Consulting civil engineer", "salary": 60000, "equity": Decimal("0.05"), "companyHandle": "anderson-arias-morrow"},
    {"title": "Engineer, broadcasting", "salary": 95000, "equity": Decimal("0.01"), "companyHandle": "watson-davis"},
]

# 테스트 계정 (평문 비밀번호)
TEST_USERS = [
    {
        "username": "admin",
        "password": "admin1234",
        "firstName": "Admin",
        "lastName": "User",
        "email": "admin@example.com",
        "isAdmin": True,
    },
    {
        "username": "testuser",
        "password": "test1234",
        "firstName": "Test",
        "lastName": "User",
        "email": "test@example.com",
        "isAdmin": False,
    },
]


async def seed() -> None:
    """모든 테스트 데이터 생성"""
    conn = await asyncpg.connect(settings.database_url)
    try:
        async with conn.transaction():
            for company in TEST_COMPANIES:
                await companies_crud.create(conn, company)

            job_ids = []
            for job in TEST_JOBS:
                new_job = await jobs_crud.create(conn, job)
                job_ids.append(new_job["id"])

            for user in TEST_USERS:
                await users_crud.register(conn, user)

            await users_crud.apply_to_job(conn, "testuser", job_ids[0])
    finally:
        await conn.close()

    logger.info("Seeded %d companies, %d jobs, %d users",
                len(TEST_COMPANIES), len(TEST_JOBS), len(TEST_USERS))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())
