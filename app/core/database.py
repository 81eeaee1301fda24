# app/core/database.py

"""
애플리케이션의 데이터베이스 연결 및 세션 관리를 담당하는 모듈입니다.

- 설정값으로부터 비동기 엔진과 세션 공장을 가진 `Database` 객체를 명시적으로 생성합니다.
  (전역 엔진을 임포트 시점에 만들지 않고, main.py의 lifespan에서 생성하여 app.state에 보관합니다.)
- 요청 단위의 비동기 세션을 제공하는 컨텍스트 관리자를 제공합니다.
- 애플리케이션 시작 시 테이블을 생성하는 함수를 포함합니다 (개발용).
"""

import logging
from typing import Any, AsyncGenerator, Dict
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.orm import sessionmaker

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import Settings

# =============================================================================
# 모든 도메인 모델 임포트
# =============================================================================
# SQLModel.metadata.create_all()이 모든 테이블을 인식하도록 모델을 임포트합니다.
from app.domains.models import *  # noqa: F401, F403

logger = logging.getLogger(__name__)


def build_engine_options(
    database_url: str,
    *,
    echo: bool = False,
    pool_size: int = 10,
    max_overflow: int = 20,
    pool_recycle: int = 3600,
) -> Dict[str, Any]:
    """
    create_async_engine()에 전달할 키워드 인자를 만듭니다.
    SQLite는 커넥션 풀 크기 옵션을 받지 않으므로 서버형 DB에만 풀 설정을 적용합니다.
    """
    options: Dict[str, Any] = {"echo": echo, "future": True}
    if make_url(database_url).get_backend_name() == "sqlite":
        return options

    options.update(
        pool_pre_ping=True,          # 끊어진 연결을 사용 전에 감지
        pool_recycle=pool_recycle,   # 일정 시간마다 연결 재활용
        pool_size=pool_size,
        max_overflow=max_overflow,
    )
    return options


class Database:
    """
    레코드 저장소(Record Store)의 클라이언트입니다.
    엔진과 세션 공장을 소유하며, 프로세스 수명 동안 한 번 생성되고 종료 시 dispose 됩니다.
    """

    def __init__(self, database_url: str, **engine_options: Any):
        self.engine: AsyncEngine = create_async_engine(
            database_url, **build_engine_options(database_url, **engine_options)
        )
        # 비동기 세션을 생성하는 '세션 공장'
        self.session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.DATABASE_URL.get_secret_value(),  # SecretStr 값에 접근
            echo=settings.DEBUG_MODE,
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_recycle=settings.DB_POOL_RECYCLE,
        )

    async def create_tables(self) -> None:
        """
        모든 SQLModel 테이블을 생성합니다. 기존 테이블은 삭제하지 않습니다.
        """
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database tables created (or already present)")

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        요청 하나에 대응하는 세션을 제공합니다.
        예외가 발생하면 롤백 후 다시 던지고, 어떤 경우에도 세션을 닫아 연결을 반납합니다.
        """
        async with self.session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def ping(self) -> bool:
        """DB에 `SELECT 1`을 실행하여 연결 가능 여부를 반환합니다."""
        async with self.engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            return result.scalar_one() == 1

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database connection pool disposed")
