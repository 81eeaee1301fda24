# tests/conftest.py

import os
from typing import AsyncGenerator

# app.core.config의 Settings는 임포트 시점에 DATABASE_URL을 요구하므로 앱 임포트 전에 설정합니다.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest_asyncio  # noqa: E402
from httpx import AsyncClient, ASGITransport  # noqa: E402

from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

# app.main을 임포트하여 FastAPI 앱 인스턴스에 접근합니다.
from app.main import app as main_app  # noqa: E402
from app.core import dependencies as deps  # noqa: E402

# --- 모든 모델 임포트 ---
#  SQLModel.metadata.create_all()이 모든 테이블을 인식하도록 합니다.
from app.domains.models import *  # noqa: E402, F401, F403


# --- 테스트용 데이터베이스 설정 ---
# 운영 DB와 분리된 메모리 SQLite를 사용합니다. StaticPool로 모든 세션이 같은 연결을 공유합니다.
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """
    테스트 함수마다 새 메모리 DB를 만들고 모든 테이블을 생성합니다.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
def session_factory(test_engine: AsyncEngine) -> sessionmaker:
    """테스트용 세션 팩토리 (AsyncSession)."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory: sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    """
    API를 거치지 않고 DB 상태를 직접 확인하거나 준비할 때 사용하는 세션입니다.
    """
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(session_factory: sessionmaker) -> AsyncGenerator[AsyncClient, None]:
    """
    get_db_session 의존성을 테스트 DB 세션으로 오버라이드한 AsyncClient를 반환합니다.
    요청마다 새 세션을 열어 운영 환경과 같은 요청 단위 세션을 흉내냅니다.
    """
    async def override_get_session():
        async with session_factory() as session:
            yield session

    original_overrides = main_app.dependency_overrides.copy()
    main_app.dependency_overrides[deps.get_db_session] = override_get_session

    try:
        transport = ASGITransport(app=main_app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        # 테스트가 끝난 후 원래 의존성 상태로 되돌립니다.
        main_app.dependency_overrides.clear()
        main_app.dependency_overrides.update(original_overrides)
