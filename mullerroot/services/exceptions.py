"""Exception classes for the Muller solver."""
from __future__ import annotations

from typing import Any, Optional


class MullerError(Exception):
    """Base exception for Muller solver errors."""

    pass


class InvalidInputError(MullerError, ValueError):
    """Raised when solver parameters are rejected before any iteration."""

    pass


class NumericDegeneracyError(MullerError, ArithmeticError):
    """
    Raised when the recurrence hits a zero denominator or a non-finite value.

    Attributes:
        index: iteration index being computed when the failure was detected.
        quantity: name of the offending quantity (e.g. ``"x[i]-x[i-1]"``).
        history: ``MullerHistory`` accumulated up to the failure.
    """

    def __init__(
        self,
        message: str,
        *,
        index: int,
        quantity: str,
        history: Optional[Any] = None,
    ) -> None:
        super().__init__(message)
        self.index = index
        self.quantity = quantity
        self.history = history
