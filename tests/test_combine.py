from __future__ import annotations

from hypothesis import given, strategies as st
import pytest

from infores.combine import Combinable, combine, combine_all


@given(st.text(), st.text(), st.text())
def test_string_combination_is_associative(a: str, b: str, c: str) -> None:
    assert combine(combine(a, b), c) == combine(a, combine(b, c))


@given(st.lists(st.tuples(st.text())), st.lists(st.tuples(st.text())))
def test_tuple_messages_accumulate_in_order(a: list[tuple[str]], b: list[tuple[str]]) -> None:
    assert combine(tuple(a), tuple(b)) == tuple(a) + tuple(b)


def test_builtin_annotation_types_are_combinable() -> None:
    for value in ("note", ("note",), ["note"], 1, 1.5):
        assert isinstance(value, Combinable)


def test_combine_all_folds_left() -> None:
    assert combine_all("a") == "a"
    assert combine_all(("a",), ("b",), ("c",)) == ("a", "b", "c")


def test_non_combinable_annotation_raises_type_error() -> None:
    with pytest.raises(TypeError, match="cannot be combined"):
        combine(object(), object())
