# mullerroot/api/v1/endpoints/solver.py
from __future__ import annotations

from fastapi import APIRouter
from loguru import logger

from mullerroot.core.config import settings
from mullerroot.schemas.solver import SolveRequest, SolveResponse
from mullerroot.services.solver import solve
from mullerroot.services.target import TARGET_LABEL, target_function

router = APIRouter(tags=["solver"])


# -----------------------------------------------------------------------------
# Endpoint
# -----------------------------------------------------------------------------
@router.post("/muller", response_model=SolveResponse)
def run_muller(request: SolveRequest) -> SolveResponse:
    """
    고정 대상 함수 f(x) = x^6 - 2 에 대해 Muller 방법 실행.

    - 미수렴도 정상 응답(200, status=not_converged)
    - InvalidInputError / NumericDegeneracyError 는 core.errors 핸들러가 422로 변환
    """
    logger.info(
        f"🚀 [Muller Start] x0={request.x0} x1={request.x1} "
        f"n={request.max_iterations} digits={request.tolerance_digits}"
    )

    result = solve(
        request.x0,
        request.x1,
        request.max_iterations,
        request.tolerance_digits,
        target_function,
        iteration_limit=settings.MAX_ITERATIONS,
        digits_limit=settings.MAX_TOLERANCE_DIGITS,
    )

    logger.info(
        f"✅ [Muller Done] status={result.status.value} root={result.root:+.12e} "
        f"iterations={result.iterations_used}"
    )
    return SolveResponse.from_result(result, function=TARGET_LABEL)
