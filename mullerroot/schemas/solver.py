# mullerroot/schemas/solver.py
from __future__ import annotations

from typing import List, Optional

from pydantic import Field

from mullerroot.core.config import settings
from mullerroot.schemas.common import AppBaseModel
from mullerroot.services.solver import IterationRow, MullerResult, SolveStatus


class SolveRequest(AppBaseModel):
    # 범위 검증(반복 횟수/자릿수 상한)은 서비스 계층에서 settings 기준으로 수행
    x0: float = Field(..., allow_inf_nan=False, description="첫 번째 시작점")
    x1: float = Field(..., allow_inf_nan=False, description="두 번째 시작점 (x0와 달라야 함)")
    max_iterations: int = Field(
        default=settings.DEFAULT_ITERATIONS, description="반복 횟수 상한 (2 < n)"
    )
    tolerance_digits: int = Field(
        default=settings.DEFAULT_TOLERANCE_DIGITS,
        description="허용오차 자릿수 n → tol = 0.5 * 10^-n",
    )


class IterationRowOut(AppBaseModel):
    step: int
    x: float
    y: float
    d: Optional[float] = None
    c: Optional[float] = None

    @classmethod
    def from_row(cls, row: IterationRow) -> "IterationRowOut":
        return cls(step=row.step, x=row.x, y=row.y, d=row.d, c=row.c)


class SolveResponse(AppBaseModel):
    status: SolveStatus
    converged: bool
    root: float
    root_index: int
    iterations_used: int
    tolerance: float
    function: str
    rows: List[IterationRowOut] = []

    @classmethod
    def from_result(cls, result: MullerResult, *, function: str) -> "SolveResponse":
        return cls(
            status=result.status,
            converged=result.converged,
            root=result.root,
            root_index=result.root_index,
            iterations_used=result.iterations_used,
            tolerance=result.tolerance,
            function=function,
            rows=[IterationRowOut.from_row(r) for r in result.rows()],
        )
