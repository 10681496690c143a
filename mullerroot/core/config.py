# mullerroot/core/config.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 환경 설정."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # =========================================================
    # 1. 프로젝트 기본 정보
    # =========================================================
    PROJECT_NAME: str = Field(
        default="Muller Root Finder", description="Swagger UI 등에 표시될 프로젝트 이름"
    )
    API_V1_STR: str = Field(default="/api/v1", description="API 버전 Prefix")

    APP_ENV: Literal["local", "dev", "test", "prod"] = Field(
        default="local",
        description="애플리케이션 실행 환경 (local/dev/test/prod)",
    )

    # =========================================================
    # 2. 솔버 입력 한계값 / 기본값
    # =========================================================
    MAX_ITERATIONS: int = Field(
        default=1_000_000,
        ge=3,
        description="허용되는 최대 반복 횟수 (히스토리 메모리 상한)",
    )
    MAX_TOLERANCE_DIGITS: int = Field(
        default=40,
        ge=1,
        description="허용되는 최대 허용오차 자릿수",
    )
    DEFAULT_ITERATIONS: int = Field(
        default=20, ge=3, description="CLI/API 기본 반복 횟수"
    )
    DEFAULT_TOLERANCE_DIGITS: int = Field(
        default=15, ge=1, description="CLI/API 기본 허용오차 자릿수"
    )

    # =========================================================
    # 3. 로깅
    # =========================================================
    LOG_LEVEL: str = Field(default="INFO", description="콘솔 로그 레벨")
    LOG_DIR: str = Field(
        default=".logs", description="로그 파일 디렉터리 (상대/절대 경로 모두 허용)"
    )
    LOG_TO_FILE: bool = Field(default=True, description="파일 로그 sink 사용 여부")

    @model_validator(mode="after")
    def _defaults_within_limits(self) -> "Settings":
        """기본값이 한계값을 넘지 않도록 검증"""
        if self.DEFAULT_ITERATIONS > self.MAX_ITERATIONS:
            raise ValueError("DEFAULT_ITERATIONS must not exceed MAX_ITERATIONS")
        if self.DEFAULT_TOLERANCE_DIGITS > self.MAX_TOLERANCE_DIGITS:
            raise ValueError(
                "DEFAULT_TOLERANCE_DIGITS must not exceed MAX_TOLERANCE_DIGITS"
            )
        return self

    # =========================================================
    # 4. Path 편의 프로퍼티
    # =========================================================
    @property
    def log_dir_path(self) -> Path:
        """로그 디렉터리 절대 경로 (Path 객체)."""
        return Path(self.LOG_DIR).resolve()


@lru_cache
def get_settings() -> Settings:
    """FastAPI Depends용 싱글톤 Settings 인스턴스."""
    return Settings()


# 전역 설정 객체
settings = get_settings()
