# -*- coding: utf-8 -*-
"""
JPA Shop Service - Main Application

FastAPI 애플리케이션 진입점
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from jpashop.application.common.dependencies import DatabaseSession, SettingsDep
from jpashop.application.common.dto import ResponseDTO
from jpashop.application.common.exceptions import ApplicationError
from jpashop.settings.config import settings
from jpashop.settings.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    애플리케이션 생명주기 관리

    시작 시: 로깅 설정, 데이터베이스 연결 확인
    종료 시: 리소스 정리
    """
    from jpashop.adapters.database.connection import close_db, engine, init_db

    setup_logging(settings)

    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version} (env={settings.env})")

    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
        logger.info("Database connection established")
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        raise

    if settings.is_development:
        await init_db()
        logger.info("Database tables ensured (development)")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")
    await close_db()
    logger.info("Database connection closed")


# FastAPI 애플리케이션 생성
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="회원, 상품, 주문을 관리하는 쇼핑몰 서비스",
    docs_url="/docs" if not settings.is_production else None,
    redoc_url="/redoc" if not settings.is_production else None,
    openapi_url="/openapi.json" if not settings.is_production else None,
    lifespan=lifespan,
)

# CORS 미들웨어 추가
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)


# ==================== Root Endpoint ====================


@app.get("/", tags=["Root"])
async def root(config: SettingsDep) -> dict[str, str]:
    """루트 엔드포인트 - 서비스 정보"""
    return {
        "service": config.app_name,
        "version": config.app_version,
        "environment": config.env,
        "status": "running",
    }


@app.get("/health", tags=["Health"])
async def health_check(session: DatabaseSession) -> JSONResponse:
    """헬스체크 엔드포인트 (DB 연결 확인)"""
    try:
        await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return JSONResponse(
            status_code=503, content={"status": "unhealthy", "database": "disconnected"}
        )
    return JSONResponse(status_code=200, content={"status": "healthy", "database": "connected"})


# ==================== Error Handlers ====================


@app.exception_handler(ApplicationError)
async def application_exception_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    """애플리케이션 예외 핸들러 (비즈니스 규칙 위반 등)"""
    body = ResponseDTO.error_response(exc.message, exc.to_dict())
    return JSONResponse(status_code=exc.status_code, content=body.model_dump(mode="json"))


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """전역 예외 핸들러"""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "detail": str(exc) if settings.debug else "An unexpected error occurred",
        },
    )


# ==================== Router 등록 ====================

from jpashop.application.interface.api.item_router import router as item_router  # noqa: E402
from jpashop.application.interface.api.member_router import router as member_router  # noqa: E402
from jpashop.application.interface.api.order_router import router as order_router  # noqa: E402

app.include_router(member_router, prefix="/api/v1/members", tags=["Member"])
app.include_router(item_router, prefix="/api/v1/items", tags=["Item"])
app.include_router(order_router, prefix="/api/v1/orders", tags=["Order"])


def run() -> None:
    """uvicorn 서버 실행"""
    import uvicorn

    uvicorn.run(
        "jpashop.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.uvicorn_reload,
        workers=settings.uvicorn_workers,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
