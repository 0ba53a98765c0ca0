"""Tests for the collect and values helpers."""

from collections.abc import Iterator

import pyoption as po


def test_collect_all_some() -> None:
    result = po.collect([po.some(1), po.some(2), po.some(3)])
    assert result == po.some([1, 2, 3])


def test_collect_with_none() -> None:
    assert po.collect([po.some(1), po.none, po.some(3)]) == po.none


def test_collect_empty() -> None:
    """An empty input is present, not absent."""
    result = po.collect([])
    assert result.is_some()
    assert result.unwrap() == []


def test_collect_preserves_order() -> None:
    data = [5, 3, 9, 1, 1, 0]
    assert po.collect(po.some(x) for x in data) == po.some(data)


def test_collect_short_circuits_generator() -> None:
    pulled: list[int] = []

    def _source() -> Iterator[po.Option[int]]:
        for i, opt in enumerate([po.some(1), po.none, po.some(3), po.some(4)]):
            pulled.append(i)
            yield opt

    assert po.collect(_source()) == po.none
    assert pulled == [0, 1]


def test_collect_leaves_rest_of_iterator() -> None:
    it = iter([po.some(1), po.none, po.some(3)])
    assert po.collect(it) == po.none
    assert next(it) == po.some(3)


def test_collect_returns_fresh_list() -> None:
    first = po.collect([po.some(1)]).unwrap()
    first.append(2)
    assert po.collect([po.some(1)]) == po.some([1])


def test_values() -> None:
    items = [po.none, po.some("a"), po.none, po.some("b")]
    assert list(po.values(items)) == ["a", "b"]
    assert list(po.values([])) == []
