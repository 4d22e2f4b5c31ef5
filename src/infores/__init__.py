"""Layered result types: simple three-case results and annotated five-case results."""

from __future__ import annotations

__version__ = "0.1.0"

from .combine import Combinable, combine, combine_all
from .errors import ContractViolation, Defect, Issue, capture_defects
from .informative import (
    OK,
    UNSPECIFIED_CRITICAL_FAILURE,
    UNSPECIFIED_FAILURE,
    Critical,
    Error,
    InformativeOK,
    InformativeResult,
    InfoResult,
    StandardResult,
    WarningOK,
    accumulate_bind,
    add_info,
    add_warning,
    is_success,
    lift_simple_result,
    simple_bind,
    to_error_val,
    to_simple_result,
    to_success_val,
)
from .result import CriticalFailure, Failure, SimpleResult, Success
from .severity import ResultErrorLevel, error_level_is_success, max_error_level, result_to_error_level

__all__ = [
    "Combinable",
    "ContractViolation",
    "Critical",
    "CriticalFailure",
    "Defect",
    "Error",
    "Failure",
    "InfoResult",
    "InformativeOK",
    "InformativeResult",
    "Issue",
    "OK",
    "ResultErrorLevel",
    "SimpleResult",
    "StandardResult",
    "Success",
    "UNSPECIFIED_CRITICAL_FAILURE",
    "UNSPECIFIED_FAILURE",
    "WarningOK",
    "accumulate_bind",
    "add_info",
    "add_warning",
    "capture_defects",
    "combine",
    "combine_all",
    "error_level_is_success",
    "is_success",
    "lift_simple_result",
    "max_error_level",
    "result_to_error_level",
    "simple_bind",
    "to_error_val",
    "to_simple_result",
    "to_success_val",
]
