# mullerroot/main.py
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, Dict

from fastapi import FastAPI
from loguru import logger

# Config & Logger
from mullerroot.core.config import settings
from mullerroot.core.errors import register_exception_handlers
from mullerroot.core.logger import setup_logging

# Routers
from mullerroot.api.v1.api import api_router


# ==============================================================================
# 1. Lifespan (수명 주기 관리)
# ==============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    서버 시작/종료 시 실행될 로직
    """
    # [Startup]
    setup_logging()
    env = getattr(settings, "APP_ENV", "local")
    logger.info(f"🚀 Muller Root Finder Starting... (Env: {env})")

    yield

    # [Shutdown]
    logger.info("🛑 Muller Root Finder Shutting Down...")


# ==============================================================================
# 2. FastAPI App 초기화
# ==============================================================================
app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    lifespan=lifespan,
)

register_exception_handlers(app)

# ==============================================================================
# 3. Router Registration
# ==============================================================================
app.include_router(api_router, prefix=settings.API_V1_STR)


# ==============================================================================
# 4. Root Endpoint
# ==============================================================================
@app.get("/", include_in_schema=False)
def root() -> Dict[str, Any]:
    """서버 상태 확인용 루트 엔드포인트"""
    return {
        "message": "Welcome to Muller Root Finder API",
        "docs_url": "/docs",
        "solver_url": f"{settings.API_V1_STR}/solver/muller",
        "status": "running",
    }


@app.get("/health", include_in_schema=False)
def health_check():
    """로드밸런서용 단순 헬스 체크"""
    return {"status": "ok"}
