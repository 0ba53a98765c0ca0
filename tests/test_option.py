"""Tests for the Option variants and their combinators."""

from collections.abc import Callable

import pytest

import pyoption as po


def _counting[**P, R](func: Callable[P, R]) -> tuple[Callable[P, R], list[int]]:
    calls: list[int] = []

    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        calls.append(1)
        return func(*args, **kwargs)

    return wrapper, calls


def _never(*_args: object) -> po.Option[int]:
    msg = "should not be called"
    raise AssertionError(msg)


@pytest.mark.parametrize("value", [0, 1, "", "text", None, [1, 2], (), {"a": 1}])
def test_some_is_some(value: object) -> None:
    """Any value, falsy ones included, gives a present option."""
    opt = po.some(value)
    assert opt.is_some() is True
    assert opt.is_none() is False


def test_none_is_none() -> None:
    assert po.none.is_some() is False
    assert po.none.is_none() is True
    assert po.none is po.NONE


def test_none_instances_are_interchangeable() -> None:
    """Fresh `NoneOption` instances behave like the singleton."""
    other = po.NoneOption()
    assert other == po.NONE
    assert hash(other) == hash(po.NONE)
    assert other.and_then(_never) == po.NONE
    assert repr(other) == "NONE"


def test_is_some_and() -> None:
    pred, calls = _counting(lambda x: x > 1)
    assert po.some(2).is_some_and(pred) is True
    assert po.some(0).is_some_and(pred) is False
    assert len(calls) == 2


def test_is_some_and_none_skips_predicate() -> None:
    pred, calls = _counting(lambda _: True)
    assert po.none.is_some_and(pred) is False
    assert calls == []


def test_is_none_or() -> None:
    pred, calls = _counting(lambda x: x > 1)
    assert po.some(2).is_none_or(pred) is True
    assert po.some(0).is_none_or(pred) is False
    assert len(calls) == 2
    assert po.none.is_none_or(pred) is True
    assert len(calls) == 2


def test_and() -> None:
    assert po.some(1).and_(po.some(2)) == po.some(2)
    assert po.some(1).and_(po.none) == po.none
    assert po.none.and_(po.some(2)) == po.none
    assert po.none.and_(po.none) == po.none


def test_and_then() -> None:
    f, calls = _counting(lambda x: po.some(x * 10))
    assert po.some(3).and_then(f) == po.some(30)
    assert len(calls) == 1
    assert po.some(3).and_then(lambda _: po.none) == po.none


def test_and_then_on_none_never_calls() -> None:
    assert po.none.and_then(_never) == po.none


def test_or() -> None:
    assert po.some(1).or_(po.some(4)) == po.some(1)
    assert po.none.or_(po.some(4)) == po.some(4)
    assert po.some(1).or_(po.none) == po.some(1)
    assert po.none.or_(po.none) == po.none


def test_or_returns_receiver() -> None:
    opt = po.some([1])
    assert opt.or_(po.some([2])) is opt


def test_or_else() -> None:
    f, calls = _counting(lambda: po.some(9))
    assert po.none.or_else(f) == po.some(9)
    assert len(calls) == 1
    assert po.none.or_else(lambda: po.none) == po.none


def test_or_else_on_some_never_calls() -> None:
    assert po.some(1).or_else(_never) == po.some(1)


def test_map() -> None:
    assert po.some("abc").map(len) == po.some(3)
    assert po.some(2).map(lambda _: None) == po.some(None)


def test_map_identity() -> None:
    for opt in (po.some(5), po.some("x"), po.none):
        assert opt.map(lambda x: x) == opt


def test_map_on_none_never_calls() -> None:
    assert po.none.map(_never) == po.none


def test_combinators_do_not_mutate_receiver() -> None:
    opt = po.some(2)
    opt.map(lambda x: x + 1)
    opt.and_then(lambda x: po.some(x + 1))
    assert opt == po.some(2)


def test_some_is_frozen() -> None:
    opt = po.Some(1)
    with pytest.raises(AttributeError):
        opt.value = 2  # type: ignore[misc]


def test_equality_and_hash() -> None:
    assert po.Some(1) == po.Some(1)
    assert po.Some(1) != po.Some(2)
    assert po.Some(1) != po.NONE
    assert len({po.Some(1), po.Some(1), po.NONE, po.NoneOption()}) == 2


def test_unwrap() -> None:
    assert po.some("car").unwrap() == "car"
    with pytest.raises(po.OptionUnwrapError, match="called `unwrap` on a `None`"):
        po.none.unwrap()


def test_expect() -> None:
    assert po.some(1).expect("boom") == 1
    with pytest.raises(po.OptionUnwrapError, match="boom"):
        po.none.expect("boom")


def test_unwrap_error_is_runtime_error() -> None:
    assert issubclass(po.OptionUnwrapError, RuntimeError)


def test_unwrap_or_variants() -> None:
    assert po.some(1).unwrap_or(2) == 1
    assert po.none.unwrap_or(2) == 2
    assert po.some(1).unwrap_or_else(lambda: 2) == 1
    assert po.none.unwrap_or_else(lambda: 2) == 2


def test_map_or_variants() -> None:
    assert po.some("ab").map_or(0, len) == 2
    assert po.none.map_or(0, len) == 0
    assert po.some("ab").map_or_else(lambda: 0, len) == 2
    assert po.none.map_or_else(lambda: 0, len) == 0


def test_filter_xor_zip_flatten() -> None:
    assert po.some(4).filter(lambda x: x % 2 == 0) == po.some(4)
    assert po.some(3).filter(lambda x: x % 2 == 0) == po.none
    assert po.some(1).xor(po.none) == po.some(1)
    assert po.some(1).xor(po.some(2)) == po.none
    assert po.some(1).zip(po.some("a")) == po.some((1, "a"))
    assert po.none.zip(po.some("a")) == po.none
    assert po.some(po.some(1)).flatten() == po.some(1)


def test_inspect() -> None:
    seen: list[int] = []
    assert po.some(3).inspect(seen.append) == po.some(3)
    assert po.none.inspect(seen.append) == po.none
    assert seen == [3]


def test_into() -> None:
    assert po.some(3).into(lambda opt, n: opt.unwrap_or(0) + n, 1) == 4


def test_and_then_is_the_only_bind() -> None:
    """`and_then` is the single chaining method, with no alias."""
    assert not hasattr(po.Option, "flat_map")
    assert not hasattr(po.some(1), "flat_map")


def test_from_nullable() -> None:
    assert po.from_nullable(0) == po.some(0)
    assert po.from_nullable(None) == po.none


def test_predicates_return_bool() -> None:
    """Truthy predicate results are reported as plain booleans."""
    assert po.some(2).is_some_and(lambda x: x) is True
    assert po.some(0).is_some_and(lambda x: x) is False
    assert po.some("abc").is_none_or(lambda x: x) is True
    assert po.some("").is_none_or(lambda x: x) is False
    assert po.some([1]).filter(lambda x: x) == po.some([1])


def test_or_variants_accept_other_payload_types() -> None:
    left: po.Option[int] = po.some(1)
    right: po.Option[str] = po.some("a")
    assert left.or_(right) == po.some(1)
    assert po.none.or_(right) == po.some("a")
    assert left.or_else(lambda: right) == po.some(1)
    assert po.none.or_else(lambda: right) == po.some("a")
    assert po.none.xor(right) == po.some("a")
    assert left.xor(right) == po.none
