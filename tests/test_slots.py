"""Tests for slot usage in pyoption classes."""

import pyoption as po


def _check_slots(obj: object) -> bool:
    try:
        _x = obj.__dict__
        return False  # noqa: TRY300
    except AttributeError:
        return True


def test_slots() -> None:  # noqa: D103
    assert _check_slots(po.Some(42))
    assert _check_slots(po.NoneOption())
    assert _check_slots(po.NONE)
