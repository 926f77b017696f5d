# app/core/config.py

from typing import Any, Optional
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
        env_file_encoding='utf-8',           # .env 파일 인코딩
        extra='ignore',                      # .env 파일에 정의되었지만 모델에 없는 변수는 무시
        case_sensitive=True                  # 환경 변수 이름 대소문자 구분
    )

    # --- 애플리케이션 기본 설정 ---
    APP_NAME: str = "Brewery Orders API"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "Beer inventory and beer order management API"
    # 애플리케이션 환경 (예: "development", "production", "testing")
    APP_ENV: str = Field("development", description="Application environment (e.g., development, production, testing)")
    # 디버그 모드 활성화 여부
    DEBUG_MODE: bool = Field(False, description="Enable debug mode for detailed logging and SQL echo")

    # --- 데이터베이스 설정 ---
    # 운영 환경에서는 postgresql+asyncpg://... 형태의 URL을 .env에 지정합니다.
    DATABASE_URL: SecretStr = Field(
        SecretStr("sqlite+aiosqlite:///./brewery.db"),
        description="Async database connection URL"
    )
    # 시작 시 테이블 자동 생성 여부 (운영 환경에서는 Alembic 사용)
    CREATE_TABLES_ON_STARTUP: bool = Field(True, description="Run create_all on application startup")

    # --- 로깅 설정 ---
    LOG_LEVEL: str = Field("INFO", description="Root logger level (DEBUG, INFO, WARNING, ...)")
    LOG_FILE: Optional[str] = Field(None, description="Optional log file path")

    # --- 페이지네이션 설정 ---
    DEFAULT_PAGE_SIZE: int = Field(25, description="Default page size for order listing")
    MAX_PAGE_SIZE: int = Field(200, description="Upper bound applied to any requested page size")

    # Post-initialization validation (Pydantic v2 BaseSettings)
    def model_post_init(self, __context: Any) -> None:  # noqa: ANN001
        # 디버그 모드에서는 로그 레벨을 DEBUG로 낮춥니다.
        if self.DEBUG_MODE and self.LOG_LEVEL.upper() == "INFO":
            self.LOG_LEVEL = "DEBUG"


settings = Settings()
