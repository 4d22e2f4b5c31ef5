"""Associative combination of annotation values.

Annotations gathered along a chain of operations are merged, never
overwritten. Any type whose ``+`` is closed and associative qualifies:
``str``, ``tuple``, ``list`` and the numeric types all do. No identity
element is required.

Associativity cannot be checked at runtime; it is a caller obligation.
"""

from __future__ import annotations

from typing import Protocol, Self, TypeVar, runtime_checkable

A = TypeVar("A", bound="Combinable")


@runtime_checkable
class Combinable(Protocol):
    def __add__(self, other: Self, /) -> Self: ...


def combine(left: A, right: A) -> A:
    if __debug__:
        for operand in (left, right):
            if not isinstance(operand, Combinable):
                raise TypeError(f"annotation of type {type(operand).__name__} cannot be combined")
    return left + right


def combine_all(first: A, *rest: A) -> A:
    acc: A = first
    for item in rest:
        acc = combine(acc, item)
    return acc
