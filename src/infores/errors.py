from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import Callable, ParamSpec, TypeVar

from .result import CriticalFailure, SimpleResult

P = ParamSpec("P")
T = TypeVar("T")
E = TypeVar("E")

logger: logging.Logger = logging.getLogger(__name__)

# Cause chains deeper than this are truncated.
MAX_CAUSE_DEPTH: int = 16


class ContractViolation(ValueError):
    """The library was called in a way its contract forbids."""


@dataclass(frozen=True, slots=True)
class Issue:
    code: str
    message: str
    path: str


@dataclass(frozen=True, slots=True)
class Defect:
    """Portable payload for the critical channel.

    ``code`` is stable across runs (for captured exceptions it is the
    exception class name), ``cause`` holds the chain of underlying defects,
    outermost first.
    """

    code: str
    message: str
    cause: tuple[Defect, ...] = ()

    @classmethod
    def from_exception(cls, exc: BaseException) -> Defect:
        chain: list[Defect] = []
        seen: set[int] = {id(exc)}
        current: BaseException | None = exc.__cause__ or exc.__context__
        while current is not None and id(current) not in seen and len(chain) < MAX_CAUSE_DEPTH:
            seen.add(id(current))
            chain.append(cls(code=type(current).__name__, message=str(current)))
            current = current.__cause__ or current.__context__
        return cls(code=type(exc).__name__, message=str(exc), cause=tuple(chain))

    def describe(self) -> str:
        parts: list[str] = [f"{self.code}: {self.message}"]
        for inner in self.cause:
            parts.append(f"caused by {inner.code}: {inner.message}")
        return "; ".join(parts)


def capture_defects(
    fn: Callable[P, SimpleResult[T, E, Defect]],
) -> Callable[P, SimpleResult[T, E, Defect]]:
    """Turn any exception escaping ``fn`` into ``CriticalFailure(Defect)``.

    ``fn`` still reports expected problems through ``Failure``; only
    unexpected exceptions end up in the critical channel.
    """

    @functools.wraps(fn)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> SimpleResult[T, E, Defect]:
        try:
            return fn(*args, **kwargs)
        except Exception as exc:  # noqa: BLE001
            logger.error("defect captured in %s", fn.__qualname__, exc_info=exc)
            return CriticalFailure(Defect.from_exception(exc))

    return wrapper
