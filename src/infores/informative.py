"""Five-case outcome type that pairs every outcome with context.

Success comes in three flavours (plain, informative, warned) and failure in
two (user error, critical error). The annotation channels ``info``,
``warning``, error info and critical info must be :class:`~infores.combine.Combinable`
so that context collected across a chain can be merged.

A ``WarningOK`` never becomes an ``Error`` on its own: the only transitions
between variants are the explicit combinators below.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, TypeVar

from .combine import Combinable, combine
from .errors import ContractViolation, Defect
from .result import CriticalFailure, Failure, SimpleResult, Success

S = TypeVar("S")
S2 = TypeVar("S2")
I = TypeVar("I", bound=Combinable)  # noqa: E741
W = TypeVar("W", bound=Combinable)
E = TypeVar("E")
EI = TypeVar("EI", bound=Combinable)
C = TypeVar("C")
CI = TypeVar("CI", bound=Combinable)

logger: logging.Logger = logging.getLogger(__name__)

UNSPECIFIED_FAILURE: str = "Unspecified failure"
UNSPECIFIED_CRITICAL_FAILURE: str = "Unspecified critical failure, please report an issue"


@dataclass(frozen=True, slots=True)
class OK(Generic[S]):
    value: S
    ok: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class InformativeOK(Generic[I, S]):
    """Success with context of interest but nothing to act on."""

    info: I
    value: S
    ok: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class WarningOK(Generic[W, S]):
    """Success, but something looked suspicious."""

    warning: W
    value: S
    ok: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class Error(Generic[E, EI]):
    """The user made a mistake."""

    info: EI
    error: E
    ok: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class Critical(Generic[C, CI]):
    """The program made a mistake."""

    info: CI
    critical: C
    ok: ClassVar[bool] = False


InformativeResult = OK[S] | InformativeOK[I, S] | WarningOK[W, S] | Error[E, EI] | Critical[C, CI]

# Same annotation type on every channel.
InfoResult = OK[S] | InformativeOK[I, S] | WarningOK[I, S] | Error[E, I] | Critical[C, I]

# Critical channel carries a Defect described by a string.
StandardResult = OK[S] | InformativeOK[I, S] | WarningOK[W, S] | Error[E, EI] | Critical[Defect, str]

_SUCCESS_TYPES: tuple[type, ...] = (OK, InformativeOK, WarningOK)


def add_warning(value: S, warning: W) -> WarningOK[W, S]:
    return WarningOK(warning, value)


def add_info(value: S, info: I) -> InformativeOK[I, S]:
    return InformativeOK(info, value)


def is_success(result: InformativeResult[Any, Any, Any, Any, Any, Any, Any]) -> bool:
    return isinstance(result, _SUCCESS_TYPES)


def to_success_val(result: InformativeResult[S, Any, Any, Any, Any, Any, Any]) -> S | None:
    if isinstance(result, _SUCCESS_TYPES):
        return result.value
    return None


def to_error_val(result: InformativeResult[Any, Any, Any, E, Any, C, Any]) -> E | C | None:
    """Return the failure payload of either failure channel.

    User errors and critical errors are merged here; inspect the variant to
    tell them apart.
    """
    if isinstance(result, Error):
        return result.error
    if isinstance(result, Critical):
        return result.critical
    return None


def to_simple_result(result: InformativeResult[S, I, W, E, EI, C, CI]) -> SimpleResult[S, E, C]:
    """Downgrade by dropping every annotation."""
    if isinstance(result, _SUCCESS_TYPES):
        return Success(result.value)
    if isinstance(result, Error):
        return Failure(result.error)
    if isinstance(result, Critical):
        return CriticalFailure(result.critical)
    raise ContractViolation(f"not an informative result: {type(result).__name__}")


def lift_simple_result(
    result: SimpleResult[S, E, C],
    *,
    error_info: str = UNSPECIFIED_FAILURE,
    critical_info: str = UNSPECIFIED_CRITICAL_FAILURE,
) -> InformativeResult[S, Any, Any, E, str, C, str]:
    """Upgrade a simple result, inventing annotations for the failure cases.

    ``error_info`` and ``critical_info`` are the placeholder annotations used
    because a simple result carries none.
    """
    if isinstance(result, Success):
        return OK(result.value)
    if isinstance(result, Failure):
        logger.debug("lifting failure with placeholder annotation %r", error_info)
        return Error(error_info, result.error)
    if isinstance(result, CriticalFailure):
        logger.debug("lifting critical failure with placeholder annotation %r", critical_info)
        return Critical(critical_info, result.critical)
    raise ContractViolation(f"not a simple result: {type(result).__name__}")


def _retype_failure(
    result: InformativeResult[S, I, W, E, EI, C, CI],
) -> Error[E, EI] | Critical[C, CI]:
    # Success variants carry a value of the old success type and cannot be re-typed.
    if isinstance(result, Error):
        return Error(result.info, result.error)
    if isinstance(result, Critical):
        return Critical(result.info, result.critical)
    raise ContractViolation("_retype_failure cannot handle success cases")


def simple_bind(
    result: InformativeResult[S, I, W, E, EI, C, CI],
    next_step: Callable[[S], InformativeResult[S2, I, W, E, EI, C, CI]],
) -> InformativeResult[S2, I, W, E, EI, C, CI]:
    """Chain ``next_step`` onto a success.

    Info or warning attached to ``result`` is discarded; use
    :func:`accumulate_bind` to keep it. Failures are returned with payload
    and annotation intact.
    """
    if isinstance(result, _SUCCESS_TYPES):
        return next_step(result.value)
    return _retype_failure(result)


def accumulate_bind(
    result: InformativeResult[S, I, W, E, EI, C, CI],
    next_step: Callable[[S], InformativeResult[S2, I, W, E, EI, C, CI]],
) -> InformativeResult[S2, I, W, E, EI, C, CI]:
    """Chain ``next_step`` onto a success, carrying annotations forward.

    Annotations on the same channel are combined, earlier first. When the
    channels differ the more severe success variant wins, so a warning is
    never hidden behind later info. A failure from ``next_step`` is returned
    as is.
    """
    if not isinstance(result, _SUCCESS_TYPES):
        return _retype_failure(result)
    following: InformativeResult[S2, I, W, E, EI, C, CI] = next_step(result.value)
    if isinstance(result, OK) or not isinstance(following, _SUCCESS_TYPES):
        return following
    if isinstance(result, InformativeOK):
        if isinstance(following, OK):
            return InformativeOK(result.info, following.value)
        if isinstance(following, InformativeOK):
            return InformativeOK(combine(result.info, following.info), following.value)
        return following
    if isinstance(following, WarningOK):
        return WarningOK(combine(result.warning, following.warning), following.value)
    return WarningOK(result.warning, following.value)


def map_success_only(
    result: InformativeResult[S, I, W, E, EI, C, CI],
    fn: Callable[[S], S2],
) -> InformativeResult[S2, I, W, E, EI, C, CI]:
    """Transform the success payload, keeping variant and annotation."""
    if isinstance(result, OK):
        return OK(fn(result.value))
    if isinstance(result, InformativeOK):
        return InformativeOK(result.info, fn(result.value))
    if isinstance(result, WarningOK):
        return WarningOK(result.warning, fn(result.value))
    return _retype_failure(result)
