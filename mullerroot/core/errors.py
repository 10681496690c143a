# mullerroot/core/errors.py
from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mullerroot.schemas.common import ProblemOut
from mullerroot.services.exceptions import InvalidInputError, NumericDegeneracyError

logger = logging.getLogger(__name__)

__all__ = ["register_exception_handlers"]


def _build_problem_response(
    *,
    status_code: int,
    code: str,
    message: str,
    detail: Any | None = None,
) -> JSONResponse:
    """애플리케이션 공통 에러 응답 포맷 생성."""
    payload = ProblemOut(code=code, message=message, detail=detail)

    return JSONResponse(
        status_code=status_code,
        content=payload.model_dump(exclude_none=True),
        headers={
            "Content-Type": "application/problem+json",
        },
    )


def _convert_validation_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """FastAPI RequestValidationError → 단순화된 에러 리스트로 변환."""
    return [
        {
            "loc": e.get("loc"),
            "msg": e.get("msg"),
            "type": e.get("type"),
        }
        for e in exc.errors()
    ]


def register_exception_handlers(app: FastAPI) -> None:
    """
    FastAPI 앱 전역 예외 핸들러 등록.

    - RequestValidationError / InvalidInputError: 입력 검증 실패(422, INVALID_INPUT)
    - NumericDegeneracyError: 반복 중 0 분모 / 비유한 값(422, NUMERIC_DEGENERACY)
    - HTTPException / StarletteHTTPException: 일반 HTTP 에러(404 등)
    - Exception: 그 외 모든 예외(500)
    """

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(  # type: ignore[unused-ignore]
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """요청 바디/쿼리/패스 파라미터 검증 실패 핸들러."""
        errors = _convert_validation_errors(exc)

        logger.info(
            "Request validation failed: %s %s (%d errors)",
            request.method,
            request.url.path,
            len(errors),
        )

        return _build_problem_response(
            status_code=422,
            code="INVALID_INPUT",
            message="입력 검증 실패",
            detail=errors,
        )

    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(
        request: Request,
        exc: InvalidInputError,
    ) -> JSONResponse:
        """솔버 파라미터 범위 검증 실패 핸들러."""
        logger.info(
            "Solver input rejected: %s %s (%s)",
            request.method,
            request.url.path,
            exc,
        )

        return _build_problem_response(
            status_code=422,
            code="INVALID_INPUT",
            message=str(exc),
        )

    @app.exception_handler(NumericDegeneracyError)
    async def numeric_degeneracy_handler(
        request: Request,
        exc: NumericDegeneracyError,
    ) -> JSONResponse:
        """Muller 반복 중 수치 퇴화 발생 핸들러."""
        logger.warning(
            "Numeric degeneracy: %s %s (i=%d, %s)",
            request.method,
            request.url.path,
            exc.index,
            exc.quantity,
        )

        return _build_problem_response(
            status_code=422,
            code="NUMERIC_DEGENERACY",
            message=str(exc),
            detail={"index": exc.index, "quantity": exc.quantity},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """
        FastAPI / Starlette HTTPException 공통 핸들러.

        예: 404 Not Found, 405 Method Not Allowed 등
        """
        logger.warning(
            "HTTPException: %s %s -> %d (%s)",
            request.method,
            request.url.path,
            exc.status_code,
            exc.detail,
        )

        return _build_problem_response(
            status_code=exc.status_code,
            code="HTTP_ERROR",
            message=str(exc.detail) if exc.detail else "HTTP error",
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        최상위 핸들러: 예상치 못한 모든 예외를 500으로 포장.
        """
        logger.exception(
            "Unhandled exception: %s %s",
            request.method,
            request.url.path,
            exc_info=exc,
        )

        return _build_problem_response(
            status_code=500,
            code="INTERNAL_SERVER_ERROR",
            message="알 수 없는 오류가 발생했습니다.",
        )
