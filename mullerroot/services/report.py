# mullerroot/services/report.py
# Fixed-width console rendering of a MullerResult
# - header / row layout follows the classic "|step] |x] |f(x)] |d] |c]" table
# - coefficients that were never computed for a row are shown as "-"

from __future__ import annotations

from typing import List, Optional

from mullerroot.services.solver import IterationRow, MullerResult

FIELD_WIDTH = 22
MISSING = "-"

CONVERGED_MESSAGE = "Method has converged to a root."
NOT_CONVERGED_MESSAGE = "Method did not reach the allowed tolerance."


def _sci(v: Optional[float]) -> str:
    if v is None:
        return MISSING.rjust(FIELD_WIDTH)
    return f"{v:+0{FIELD_WIDTH}.12e}"


def format_header() -> str:
    return f"{'|step]':<11}{'|x]':<25}{'|f(x)]':<25}{'|d]':<25}{'|c]'}"


def format_row(row: IterationRow) -> str:
    return (
        f"| {row.step:08d} | {_sci(row.x)} | {_sci(row.y)} "
        f"| {_sci(row.d)} | {_sci(row.c)}"
    )


def format_table(result: MullerResult) -> str:
    lines: List[str] = [format_header()]
    lines.extend(format_row(r) for r in result.rows())
    return "\n".join(lines)


def outcome_message(result: MullerResult) -> str:
    return CONVERGED_MESSAGE if result.converged else NOT_CONVERGED_MESSAGE


def format_root_line(result: MullerResult) -> str:
    return f"Root x = {result.root:+.12e}"


def format_summary(result: MullerResult) -> str:
    return f"{outcome_message(result)}\n{format_root_line(result)}"
