# ./mullerroot/cli.py

from __future__ import annotations

import typer
from loguru import logger

from mullerroot.core.config import settings
from mullerroot.core.logger import setup_logging
from mullerroot.schemas.solver import SolveResponse
from mullerroot.services.exceptions import InvalidInputError, NumericDegeneracyError
from mullerroot.services.report import format_root_line, format_table, outcome_message
from mullerroot.services.solver import solve
from mullerroot.services.target import TARGET_LABEL, target_function

EXIT_INVALID_INPUT = 1
EXIT_NUMERIC_DEGENERACY = 3

app = typer.Typer(help="Muller's root-finding method for f(x) = x^6 - 2.")


@app.command("solve")
def solve_cmd(
    x0: float = typer.Option(..., prompt="Input point x0"),
    x1: float = typer.Option(..., prompt="Input point x1"),
    iterations: int = typer.Option(settings.DEFAULT_ITERATIONS, prompt="Iterations"),
    tolerance: int = typer.Option(
        settings.DEFAULT_TOLERANCE_DIGITS, prompt="Tolerance", help="decimal digits"
    ),
    as_json: bool = typer.Option(False, "--json/--table"),
    pretty: bool = typer.Option(True, "--pretty/--compact"),
):
    setup_logging()

    try:
        result = solve(
            x0,
            x1,
            iterations,
            tolerance,
            target_function,
            iteration_limit=settings.MAX_ITERATIONS,
            digits_limit=settings.MAX_TOLERANCE_DIGITS,
        )
    except InvalidInputError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=EXIT_INVALID_INPUT)
    except NumericDegeneracyError as e:
        logger.error(f"Muller iteration aborted: {e}")
        typer.echo(str(e), err=True)
        raise typer.Exit(code=EXIT_NUMERIC_DEGENERACY)

    if as_json:
        out = SolveResponse.from_result(result, function=TARGET_LABEL)
        typer.echo(out.model_dump_json(indent=2 if pretty else None))
        return

    typer.echo(f"Muller's root-finding method, {TARGET_LABEL}.\n")
    typer.echo(outcome_message(result) + "\n")
    typer.echo(format_table(result) + "\n")
    typer.echo(format_root_line(result))


@app.command("limits")
def limits():
    """설정된 입력 한계값/기본값 출력"""
    typer.echo(f"Iterations value: 2<i<={settings.MAX_ITERATIONS}")
    typer.echo(f"Tolerance value: 0<t<={settings.MAX_TOLERANCE_DIGITS}")
    typer.echo(
        f"Defaults: iterations={settings.DEFAULT_ITERATIONS} "
        f"tolerance={settings.DEFAULT_TOLERANCE_DIGITS}"
    )


if __name__ == "__main__":
    app()
