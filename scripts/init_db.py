"""테이블 생성 스크립트

사용법:
    python scripts/init_db.py          # 없는 테이블만 생성
    python scripts/init_db.py --reset  # 전부 삭제 후 재생성
"""
import argparse
import asyncio
import logging
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from db.session import create_engine
from db.tables import metadata

logger = logging.getLogger(__name__)


async def init_db(reset: bool = False) -> None:
    engine = create_engine()
    try:
        async with engine.begin() as conn:
            if reset:
                await conn.run_sync(metadata.drop_all)
                logger.info("Dropped tables: %s", ", ".join(metadata.tables))
            await conn.run_sync(metadata.create_all)
            logger.info("Created tables: %s", ", ".join(metadata.tables))
    finally:
        await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(description="Create job board tables")
    parser.add_argument("--reset", action="store_true", help="drop all tables first")
    args = parser.parse_args()
    asyncio.run(init_db(reset=args.reset))
