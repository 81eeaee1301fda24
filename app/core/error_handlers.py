# app/core/error_handlers.py

"""
전역 예외 처리기를 등록하는 모듈입니다.

- RequestValidationError (본문 파싱 실패, 타입 불일치, 잘못된 쿼리) → 400
- DB 연결 불가 (OperationalError, InterfaceError, DisconnectionError, 풀 타임아웃, 드라이버 ConnectionError) → 503
- 그 밖의 SQLAlchemyError → 500

재시도나 보상 로직 없이 호출자에게 그대로 알립니다.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import (
    DisconnectionError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)

logger = logging.getLogger(__name__)

# 저장소에 접근할 수 없음을 의미하는 예외들
STORE_UNAVAILABLE_ERRORS = (
    OperationalError,
    InterfaceError,
    DisconnectionError,
    PoolTimeoutError,
    ConnectionError,
)


def register_error_handlers(app: FastAPI) -> None:
    """애플리케이션에 모든 전역 예외 처리기를 등록합니다."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Malformed input on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    async def store_unavailable_handler(request: Request, exc: Exception):
        logger.error("Database unavailable on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": "Database unavailable"},
        )

    for exc_class in STORE_UNAVAILABLE_ERRORS:
        app.add_exception_handler(exc_class, store_unavailable_handler)

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database error on %s: %s", request.url.path, exc, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Database operation failed"},
        )
