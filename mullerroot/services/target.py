# mullerroot/services/target.py
from __future__ import annotations

TARGET_LABEL = "f(x) = x^6 - 2"


def target_function(x: float) -> float:
    """f(x) = x^6 - 2, real roots at +/- 2^(1/6)."""
    return x**6 - 2.0
