# app/main.py

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession
from fastapi import FastAPI, Depends, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

# 핵심 설정 및 데이터베이스 모듈 임포트
from app.core.config import settings
from app.core.database import Database
from app.core.dependencies import get_db_session
from app.core.error_handlers import register_error_handlers
from app.core.logging_config import setup_logging
from app import API_PREFIX

# 도메인 라우터 임포트
from app.domains.employee.routers import router as employee_router

logger = logging.getLogger(__name__)


# -- 애플리케이션 수명 주기 이벤트 핸들러 --
# 저장소 클라이언트(Database)는 여기서 명시적으로 생성되어 app.state에 주입되고,
# 프로세스 종료 시 연결 풀이 정리됩니다.
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI 애플리케이션의 수명 주기(로깅, 데이터베이스)를 처리합니다.
    """
    setup_logging(settings.LOG_LEVEL)
    logger.info("Starting %s (%s)", settings.APP_NAME, settings.APP_ENV)

    db = Database.from_settings(settings)
    if settings.DB_CREATE_TABLES:
        await db.create_tables()
    app.state.db = db

    yield  # 애플리케이션 실행

    logger.info("Shutting down %s", settings.APP_NAME)
    await db.dispose()


# -- FastAPI 애플리케이션 인스턴스 생성 --
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    docs_url="/docs",       # Swagger UI (Interactive API documentation)
    redoc_url="/redoc",     # ReDoc (Alternative API documentation)
    lifespan=lifespan
)

# -- CORS 미들웨어 설정 --
# 프로덕션에서는 CORS_ORIGINS를 실제 프론트엔드 도메인으로 제한해야 합니다.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# -- 전역 예외 처리기 --
register_error_handlers(app)

# -- 도메인 라우터 포함 --
app.include_router(employee_router, prefix=API_PREFIX)


# -- 루트 엔드포인트 --
@app.get("/", summary="API Root", response_description="Welcome message and documentation link.")
async def read_root():
    """
    API의 시작점을 알리고 문서 링크를 제공합니다.
    """
    return {"message": f"Welcome to {settings.APP_NAME}. Visit /docs for interactive API documentation."}


# -- 헬스 체크 엔드포인트 --
# 배포 환경에서 서비스와 데이터베이스의 정상 작동 여부를 모니터링하는 데 사용합니다.
@app.get("/health-check", summary="Health Check", response_description="Status of the application and database connection.")
async def health_check(session: AsyncSession = Depends(get_db_session)):
    """
    데이터베이스에 `SELECT 1`을 실행하여 연결 상태를 확인합니다.
    연결할 수 없으면 503을 반환합니다.
    """
    try:
        result = await session.execute(text("SELECT 1"))
        if result.scalar_one_or_none() == 1:
            return {"status": "ok", "database_connection": "successful"}
    except (SQLAlchemyError, ConnectionError) as e:
        logger.error("Health check failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database connection error during health check"
        )
    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Database health check failed: No result from test query"
    )


# -- Uvicorn 서버 직접 실행 (개발용) --
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
