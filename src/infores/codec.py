"""JSON encoding of both result families.

Every result becomes an object tagged with ``kind``. Annotations go under
``annotation`` and payloads under ``value``, ``error`` or ``critical``.
A :class:`~infores.errors.Defect` is encoded as ``{"code", "message", "cause"}``
and restored when it appears in a critical channel. JSON has no tuples, so
tuple payloads come back as lists.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, cast

from .errors import Defect, Issue, capture_defects
from .informative import Critical, Error, InformativeOK, InformativeResult, OK, WarningOK
from .result import CriticalFailure, Failure, SimpleResult, Success
from .schema import defect_validator, result_validator

logger: logging.Logger = logging.getLogger(__name__)

AnyResult = (
    SimpleResult[Any, Any, Any]
    | InformativeResult[Any, Any, Any, Any, Any, Any, Any]
)


def encode_defect(defect: Defect) -> dict[str, object]:
    return {
        "code": defect.code,
        "message": defect.message,
        "cause": [encode_defect(inner) for inner in defect.cause],
    }


def decode_defect(obj: Mapping[str, Any]) -> Defect:
    return Defect(
        code=str(obj["code"]),
        message=str(obj["message"]),
        cause=tuple(decode_defect(inner) for inner in obj["cause"]),
    )


def _payload(obj: object) -> object:
    if isinstance(obj, Defect):
        return encode_defect(obj)
    return obj


def _critical_payload(obj: object) -> object:
    if isinstance(obj, Mapping) and defect_validator().is_valid(obj):
        return decode_defect(obj)
    return obj


def encode(result: AnyResult) -> dict[str, object]:
    """Encode ``result`` as a JSON-ready object.

    A ``Defect`` is flattened to a plain object in every channel, but only
    critical channels turn it back into a ``Defect`` on :func:`decode`.
    """
    if isinstance(result, Success):
        return {"kind": "success", "value": _payload(result.value)}
    if isinstance(result, Failure):
        return {"kind": "failure", "error": _payload(result.error)}
    if isinstance(result, CriticalFailure):
        return {"kind": "critical_failure", "critical": _payload(result.critical)}
    if isinstance(result, OK):
        return {"kind": "ok", "value": _payload(result.value)}
    if isinstance(result, InformativeOK):
        return {"kind": "informative_ok", "annotation": result.info, "value": _payload(result.value)}
    if isinstance(result, WarningOK):
        return {"kind": "warning_ok", "annotation": result.warning, "value": _payload(result.value)}
    if isinstance(result, Error):
        return {"kind": "error", "annotation": result.info, "error": _payload(result.error)}
    if isinstance(result, Critical):
        return {"kind": "critical", "annotation": result.info, "critical": _payload(result.critical)}
    raise TypeError(f"cannot encode {type(result).__name__}")


def _build(obj: Mapping[str, Any]) -> AnyResult:
    kind: str = obj["kind"]
    if kind == "success":
        return Success(obj["value"])
    if kind == "failure":
        return Failure(obj["error"])
    if kind == "critical_failure":
        return CriticalFailure(_critical_payload(obj["critical"]))
    if kind == "ok":
        return OK(obj["value"])
    if kind == "informative_ok":
        return InformativeOK(obj["annotation"], obj["value"])
    if kind == "warning_ok":
        return WarningOK(obj["annotation"], obj["value"])
    if kind == "error":
        return Error(obj["annotation"], obj["error"])
    return Critical(obj["annotation"], _critical_payload(obj["critical"]))


@capture_defects
def decode(obj: object) -> SimpleResult[AnyResult, tuple[Issue, ...], Defect]:
    """Validate ``obj`` against the result schema and rebuild the result.

    Defect-shaped objects become ``Defect`` again only under ``critical``;
    in success and error payloads they stay plain dicts. Every schema
    violation is reported as an ``Issue``; an unexpected
    exception ends up in the critical channel.
    """
    errors: list[Issue] = [
        Issue(code="schema", message=err.message, path=err.json_path)
        for err in result_validator().iter_errors(obj)
    ]
    if errors:
        logger.debug("rejected result object with %d issue(s)", len(errors))
        return Failure(tuple(sorted(errors, key=lambda issue: (issue.path, issue.message))))
    checked: Mapping[str, Any] = cast(Mapping[str, Any], obj)
    return Success(_build(checked))
