# mullerroot/services/solver.py
"""
Muller's method for a real root of a scalar function.

Each step fits a quadratic through the three most recent (x, f(x)) samples
using first/second order divided differences (c, d) and moves to the root of
that quadratic nearest to the current estimate:

    c[i-1] = (y[i] - y[i-1]) / (x[i] - x[i-1])
    d[i-2] = (c[i-1] - c[i-2]) / (x[i] - x[i-2])
    s      = c[i-1] + (x[i] - x[i-1]) * d[i-2]
    x[i+1] = x[i] - 2*y[i] / (s + sign(s) * sqrt(|s^2 - 4*y[i]*d[i-2]|))

The discriminant is taken under an absolute value, so only real estimates
are produced.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from loguru import logger

from mullerroot.services.exceptions import InvalidInputError, NumericDegeneracyError

MAX_ITERATIONS = 1_000_000
MAX_TOLERANCE_DIGITS = 40

RealFunction = Callable[[float], float]


class SolveStatus(str, Enum):
    CONVERGED = "converged"
    NOT_CONVERGED = "not_converged"


@dataclass(frozen=True)
class IterationRow:
    step: int  # 1-based
    x: float
    y: float
    d: Optional[float]
    c: Optional[float]


@dataclass(frozen=True)
class MullerHistory:
    """Parallel sequences indexed by iteration. c/d are shorter than x/y."""

    x: Tuple[float, ...]
    y: Tuple[float, ...]
    c: Tuple[float, ...]
    d: Tuple[float, ...]

    def row(self, i: int) -> IterationRow:
        return IterationRow(
            step=i + 1,
            x=self.x[i],
            y=self.y[i],
            d=self.d[i] if i < len(self.d) else None,
            c=self.c[i] if i < len(self.c) else None,
        )


@dataclass(frozen=True)
class MullerResult:
    status: SolveStatus
    root: float
    root_index: int
    iterations_used: int
    tolerance: float
    history: MullerHistory

    @property
    def converged(self) -> bool:
        return self.status is SolveStatus.CONVERGED

    def rows(self) -> List[IterationRow]:
        """Reportable history prefix, indices 0..iterations_used."""
        return [self.history.row(i) for i in range(self.iterations_used + 1)]


# ============================================================
# Basic helpers
# ============================================================
def sign(v: float) -> int:
    """+1 / -1 for positive / negative values, 0 for (signed) zero."""
    if v > 0:
        return 1
    if v < 0:
        return -1
    return 0


def tolerance_from_digits(digits: int) -> float:
    """Absolute tolerance for `digits` decimal digits: 0.5 * 10^-digits."""
    return 0.5 * 10.0 ** (-digits)


def _is_count(v: object) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def validate_parameters(
    x0: float,
    x1: float,
    max_iterations: int,
    tolerance_digits: int,
    *,
    iteration_limit: int = MAX_ITERATIONS,
    digits_limit: int = MAX_TOLERANCE_DIGITS,
) -> Tuple[float, float]:
    """
    Check the run parameters and return the seeds as floats.

    Raises:
        InvalidInputError: x0 == x1, non-finite seeds, or an iteration count /
            tolerance digit count outside (2, iteration_limit] / (0, digits_limit].
    """
    try:
        a, b = float(x0), float(x1)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"Starting points must be real numbers: {exc}") from exc

    if a == b:
        raise InvalidInputError("Values x0, x1 should be different.")
    if not (math.isfinite(a) and math.isfinite(b)):
        raise InvalidInputError("Values x0, x1 should be finite.")

    if not _is_count(max_iterations) or not 2 < max_iterations <= iteration_limit:
        raise InvalidInputError(f"Iterations value: 2<i<={iteration_limit}")
    if not _is_count(tolerance_digits) or not 0 < tolerance_digits <= digits_limit:
        raise InvalidInputError(f"Tolerance value: 0<t<={digits_limit}")

    return a, b


# ============================================================
# Iteration state
# ============================================================
class _MullerState:
    """Append-only history for a single solve() call."""

    def __init__(self, f: RealFunction) -> None:
        self.f = f
        self.x: List[float] = []
        self.y: List[float] = []
        self.c: List[float] = []
        self.d: List[float] = []

    def snapshot(self) -> MullerHistory:
        return MullerHistory(
            x=tuple(self.x), y=tuple(self.y), c=tuple(self.c), d=tuple(self.d)
        )

    def _fail(self, index: int, quantity: str, reason: str) -> NumericDegeneracyError:
        logger.warning(f"Numeric degeneracy at i={index}: {quantity} {reason}")
        return NumericDegeneracyError(
            f"Numeric degeneracy at iteration {index}: {quantity} {reason}",
            index=index,
            quantity=quantity,
            history=self.snapshot(),
        )

    def _finite(self, value: float, index: int, quantity: str) -> float:
        if not math.isfinite(value):
            raise self._fail(index, quantity, f"is not finite ({value})")
        return value

    def _divide(
        self, num: float, den: float, index: int, quantity: str, den_name: str
    ) -> float:
        if den == 0:
            raise self._fail(index, den_name, "is zero")
        return self._finite(num / den, index, quantity)

    def _append_point(self, x: float, index: int) -> None:
        try:
            y = float(self.f(x))
        except (OverflowError, ZeroDivisionError) as exc:
            raise self._fail(index, "f(x)", f"raised {type(exc).__name__}") from exc
        self._finite(y, index, "f(x)")
        self.x.append(x)
        self.y.append(y)

    def seed(self, x0: float, x1: float) -> None:
        self._append_point(x0, 0)
        self._append_point(x1, 1)
        self._append_point(self._finite((x0 + x1) / 2, 2, "x[2]"), 2)
        x, y = self.x, self.y
        self.c.append(self._divide(y[1] - y[0], x[1] - x[0], 1, "c[0]", "x[1]-x[0]"))

    def step(self, i: int) -> float:
        """Compute c[i-1], d[i-2], x[i+1], y[i+1]; return x[i+1]."""
        x, y, c, d = self.x, self.y, self.c, self.d

        c.append(self._divide(y[i] - y[i - 1], x[i] - x[i - 1], i, "c[i-1]", "x[i]-x[i-1]"))
        d.append(self._divide(c[i - 1] - c[i - 2], x[i] - x[i - 2], i, "d[i-2]", "x[i]-x[i-2]"))

        s = self._finite(c[i - 1] + (x[i] - x[i - 1]) * d[i - 2], i, "s")
        disc = self._finite(s * s - 4 * y[i] * d[i - 2], i, "s^2-4*y[i]*d[i-2]")
        denom = s + sign(s) * math.sqrt(abs(disc))
        if denom == 0:
            raise self._fail(i, "step denominator", "is zero")

        x_next = self._finite(x[i] - 2 * y[i] / denom, i, "x[i+1]")
        self._append_point(x_next, i + 1)
        return x_next


# ============================================================
# Public API
# ============================================================
def solve(
    x0: float,
    x1: float,
    max_iterations: int,
    tolerance_digits: int,
    f: RealFunction,
    *,
    iteration_limit: int = MAX_ITERATIONS,
    digits_limit: int = MAX_TOLERANCE_DIGITS,
) -> MullerResult:
    """
    Run Muller's method from the seeds x0, x1 (and their midpoint).

    Stops as soon as two successive estimates differ by less than
    0.5 * 10^-tolerance_digits, or after iteration index max_iterations - 1.
    Non-convergence is reported through the result status, not raised.

    Raises:
        InvalidInputError: parameters rejected, nothing evaluated.
        NumericDegeneracyError: zero denominator or non-finite value.
    """
    a, b = validate_parameters(
        x0,
        x1,
        max_iterations,
        tolerance_digits,
        iteration_limit=iteration_limit,
        digits_limit=digits_limit,
    )
    tol = tolerance_from_digits(tolerance_digits)
    logger.debug(
        f"Muller start: x0={a!r} x1={b!r} max_iterations={max_iterations} tol={tol:.3e}"
    )

    state = _MullerState(f)
    state.seed(a, b)

    for i in range(2, max_iterations):
        x_next = state.step(i)
        delta = abs(x_next - state.x[i])
        logger.debug(f"i={i} x={x_next:+.15e} y={state.y[i + 1]:+.3e} dx={delta:.3e}")

        if delta < tol:
            logger.info(f"Converged at index {i + 1}: root={x_next:+.12e}")
            return MullerResult(
                status=SolveStatus.CONVERGED,
                root=x_next,
                root_index=i + 1,
                iterations_used=i,
                tolerance=tol,
                history=state.snapshot(),
            )

    last = max_iterations - 1
    logger.info(
        f"Tolerance {tol:.3e} not reached within {max_iterations} iterations "
        f"(best estimate {state.x[last + 1]:+.12e})"
    )
    return MullerResult(
        status=SolveStatus.NOT_CONVERGED,
        root=state.x[last + 1],
        root_index=last + 1,
        iterations_used=last,
        tolerance=tol,
        history=state.snapshot(),
    )
