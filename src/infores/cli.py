from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import typer

from .codec import AnyResult, decode, encode
from .errors import Defect, Issue
from .informative import to_simple_result
from .logger import configure
from .result import CriticalFailure, Failure, SimpleResult, Success
from .severity import ResultErrorLevel, error_level_is_success, result_to_error_level

EXIT_ERROR: int = 1
EXIT_CRITICAL: int = 2
EXIT_UNREADABLE: int = 3

app: typer.Typer = typer.Typer(help="Inspect JSON-encoded results.")


@app.callback()
def main(
    log_level: str = typer.Option("WARNING", envvar="INFORES_LOG_LEVEL", help="Logging level name."),
) -> None:
    try:
        configure(log_level)
    except ValueError as err:
        raise typer.BadParameter(str(err), param_hint="--log-level") from err


def _read_result(source: Path) -> AnyResult:
    try:
        data: Any = json.loads(source.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as err:
        typer.echo(f"read:{source}:{err}", err=True)
        raise typer.Exit(EXIT_UNREADABLE) from err
    decoded: SimpleResult[AnyResult, tuple[Issue, ...], Defect] = decode(data)
    if isinstance(decoded, Success):
        return decoded.value
    if isinstance(decoded, Failure):
        for issue in decoded.error:
            typer.echo(f"{issue.code}:{issue.path}:{issue.message}", err=True)
    elif isinstance(decoded, CriticalFailure):
        typer.echo(f"defect:{source}:{decoded.critical.describe()}", err=True)
    raise typer.Exit(EXIT_UNREADABLE)


@app.command()
def classify(source: Path) -> None:
    """Print the severity of the result stored in SOURCE.

    Exits 0 for success levels, 1 for ERROR and 2 for CRITICAL.
    """
    result: AnyResult = _read_result(source)
    if isinstance(result, (Success, Failure, CriticalFailure)):
        typer.echo("simple results have no severity; lift them first", err=True)
        raise typer.Exit(EXIT_UNREADABLE)
    level: ResultErrorLevel = result_to_error_level(result)
    typer.echo(level.name)
    if error_level_is_success(level):
        return
    raise typer.Exit(EXIT_CRITICAL if level is ResultErrorLevel.CRITICAL else EXIT_ERROR)


@app.command()
def downgrade(source: Path) -> None:
    """Drop all annotations from the result in SOURCE and print it."""
    result: AnyResult = _read_result(source)
    simple: SimpleResult[Any, Any, Any]
    if isinstance(result, (Success, Failure, CriticalFailure)):
        simple = result
    else:
        simple = to_simple_result(result)
    typer.echo(json.dumps(encode(simple), sort_keys=True))


if __name__ == "__main__":
    app()
