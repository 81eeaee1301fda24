# app/core/config.py

from typing import List
from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# 프로젝트의 루트 디렉토리 경로를 계산합니다.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class Settings(BaseSettings):
    """
    애플리케이션의 모든 설정을 정의하는 Pydantic BaseSettings 모델입니다.
    환경 변수 및 .env 파일에서 값을 자동으로 로드합니다.
    """

    # --- Pydantic Settings 설정 ---
    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, '.env'),  # 프로젝트 루트의 .env 파일을 명시적으로 지정
        env_file_encoding='utf-8',
        extra='ignore',                      # 모델에 없는 변수는 무시
        case_sensitive=True
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Employee API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "직원(Employee) 리소스에 대한 CRUD REST API"
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    DEBUG_MODE: bool = Field(False, description="Echo SQL statements issued by the engine")
    LOG_LEVEL: str = Field("INFO", description="Root logger level name")

    # --- 데이터베이스 설정 ---
    DATABASE_URL: SecretStr = Field(..., description="Async SQLAlchemy database URL (postgresql+asyncpg, sqlite+aiosqlite)")
    DB_POOL_SIZE: int = Field(10, description="Persistent connections kept in the pool")
    DB_MAX_OVERFLOW: int = Field(20, description="Extra connections allowed above the pool size")
    DB_POOL_RECYCLE: int = Field(3600, description="Seconds before a pooled connection is recycled")
    DB_CREATE_TABLES: bool = Field(True, description="Create missing tables at application startup")

    # --- CORS 설정 ---
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")


settings = Settings()
