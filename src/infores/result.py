"""Three-case outcome type: success, user failure, critical failure.

``Failure`` is for valid code paths fed invalid input. ``CriticalFailure`` is
for defects in the program or an unexpected failure of something it depends on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
C = TypeVar("C")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T
    ok: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    error: E
    ok: ClassVar[bool] = False


@dataclass(frozen=True, slots=True)
class CriticalFailure(Generic[C]):
    critical: C
    ok: ClassVar[bool] = False


SimpleResult = Success[T] | Failure[E] | CriticalFailure[C]


def bind(
    result: SimpleResult[T, E, C],
    next_step: Callable[[T], SimpleResult[U, E, C]],
) -> SimpleResult[U, E, C]:
    """Feed a success into ``next_step``; return any failure untouched."""
    if isinstance(result, Success):
        return next_step(result.value)
    return result


def map_success_only(result: SimpleResult[T, E, C], fn: Callable[[T], U]) -> SimpleResult[U, E, C]:
    """Transform the success payload; ``fn`` must be total, its exceptions propagate."""
    if isinstance(result, Success):
        mapped: U = fn(result.value)
        return Success(mapped)
    return result
