from __future__ import annotations

import logging

import pytest

from infores.errors import ContractViolation, Defect, capture_defects
from infores.result import CriticalFailure, Failure, SimpleResult, Success


def _load(key: str) -> int:
    table: dict[str, int] = {"a": 1}
    try:
        return table[key]
    except KeyError as exc:
        raise RuntimeError("lookup failed") from exc


@capture_defects
def lookup(key: str) -> SimpleResult[int, str, Defect]:
    if not key:
        return Failure("empty key")
    return Success(_load(key))


def test_defect_from_exception_keeps_cause_chain() -> None:
    try:
        _load("missing")
    except RuntimeError as exc:
        defect = Defect.from_exception(exc)
    assert defect.code == "RuntimeError"
    assert defect.message == "lookup failed"
    assert [inner.code for inner in defect.cause] == ["KeyError"]
    assert defect.describe() == "RuntimeError: lookup failed; caused by KeyError: 'missing'"


def test_defect_without_cause() -> None:
    defect = Defect.from_exception(ZeroDivisionError("division by zero"))
    assert defect == Defect("ZeroDivisionError", "division by zero")
    assert defect.cause == ()


def test_capture_defects_leaves_modelled_outcomes_alone() -> None:
    assert lookup("a") == Success(1)
    assert lookup("") == Failure("empty key")


def test_capture_defects_turns_exceptions_into_critical_failures(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR, logger="infores"):
        result = lookup("missing")
    assert isinstance(result, CriticalFailure)
    assert result.critical.code == "RuntimeError"
    assert result.critical.cause[0].code == "KeyError"
    assert "defect captured in lookup" in caplog.text


def test_capture_defects_preserves_metadata() -> None:
    assert lookup.__name__ == "lookup"


def test_contract_violation_is_a_value_error() -> None:
    assert issubclass(ContractViolation, ValueError)
