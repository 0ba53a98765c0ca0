"""Structural pattern matching on Option variants."""

from __future__ import annotations

import pyoption as po


def _describe(opt: po.Option[str]) -> str:
    match opt:
        case po.Some(value):
            return f"some:{value}"
        case po.NoneOption():
            return "none"
        case _:
            raise AssertionError("unreachable")


def test_option_pattern_matching() -> None:
    assert _describe(po.some("hello")) == "some:hello"
    assert _describe(po.none) == "none"


def test_nested_pattern_matching() -> None:
    """Options nest like any other value."""
    results: list[str] = []
    for opt in [po.some(po.some(10)), po.some(po.NONE), po.NONE]:
        match opt:
            case po.Some(po.Some(value)):
                results.append(f"Some(Some({value}))")
            case po.Some(_):
                results.append("Some(NONE)")
            case _:
                results.append("NONE")
    assert results == ["Some(Some(10))", "Some(NONE)", "NONE"]


def test_with_guards() -> None:
    threshold = 10
    labels = []
    for opt in [po.some(5), po.some(15), po.none]:
        match opt:
            case po.Some(value) if value > threshold:
                labels.append("big")
            case po.Some(_):
                labels.append("small")
            case _:
                labels.append("missing")
    assert labels == ["small", "big", "missing"]


def test_narrowing_with_is_some() -> None:
    opt: po.Option[int] = po.some(3)
    if opt.is_some():
        assert opt.value == 3
