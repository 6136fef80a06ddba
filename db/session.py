from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from config import settings


def sqlalchemy_url(database_url: str) -> str:
    """asyncpg DSN(postgresql://)을 SQLAlchemy 비동기 URL로 변환"""
    scheme, sep, rest = database_url.partition("://")
    if scheme in ("postgres", "postgresql"):
        scheme = "postgresql+asyncpg"
    return f"{scheme}{sep}{rest}"


def create_engine() -> AsyncEngine:
    return create_async_engine(sqlalchemy_url(settings.database_url))
