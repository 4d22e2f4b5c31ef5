from __future__ import annotations

from enum import IntEnum
from typing import Any, Iterable

from .errors import ContractViolation
from .informative import Critical, Error, InformativeOK, InformativeResult, OK, WarningOK


class ResultErrorLevel(IntEnum):
    """Severity of an informative result, ordered from harmless to fatal."""

    OK = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4


_LEVEL_BY_VARIANT: dict[type, ResultErrorLevel] = {
    OK: ResultErrorLevel.OK,
    InformativeOK: ResultErrorLevel.INFO,
    WarningOK: ResultErrorLevel.WARNING,
    Error: ResultErrorLevel.ERROR,
    Critical: ResultErrorLevel.CRITICAL,
}


def result_to_error_level(result: InformativeResult[Any, Any, Any, Any, Any, Any, Any]) -> ResultErrorLevel:
    level: ResultErrorLevel | None = _LEVEL_BY_VARIANT.get(type(result))
    if level is None:
        raise ContractViolation(f"not an informative result: {type(result).__name__}")
    return level


def error_level_is_success(level: ResultErrorLevel) -> bool:
    return level < ResultErrorLevel.ERROR


def max_error_level(results: Iterable[InformativeResult[Any, Any, Any, Any, Any, Any, Any]]) -> ResultErrorLevel:
    """Most severe level among ``results``; ``OK`` when there are none."""
    return max((result_to_error_level(r) for r in results), default=ResultErrorLevel.OK)
