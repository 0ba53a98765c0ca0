from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Never, TypeIs, cast

from ._core import Pipeable


class OptionUnwrapError(RuntimeError): ...


class Option[T](ABC, Pipeable):
    """A value that is either present (`Some`) or absent (`NONE`).

    `Option` is closed: `Some` and `NoneOption` are its only variants.
    Every combinator below is total, and callbacks are invoked at most once.
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `Some` value.

        Returns:
            `True` if the option is a `Some` variant, `False` otherwise.

        Example:
            ```python
            >>> from pyoption import Some, NONE, Option
            >>> x: Option[int] = Some(2)
            >>> x.is_some()
            True
            >>> y: Option[int] = NONE
            >>> y.is_some()
            False

            ```
        """
        ...

    @abstractmethod
    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        """
        Returns `True` if the option is a `None` value.

        Returns:
            `True` if the option is a `NoneOption` variant, `False` otherwise.

        Example:
            ```python
            >>> from pyoption import Some, NONE, Option
            >>> x: Option[int] = Some(2)
            >>> x.is_none()
            False
            >>> y: Option[int] = NONE
            >>> y.is_none()
            True

            ```
        """
        ...

    @abstractmethod
    def unwrap(self) -> T:
        """
        Returns the contained `Some` value.

        Returns:
            The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `None`.

        Example:
            ```python
            >>> from pyoption import Some
            >>> Some("car").unwrap()
            'car'

            ```
            ```python
            >>> from pyoption import NONE
            >>> NONE.unwrap()
            Traceback (most recent call last):
                ...
            pyoption._option.OptionUnwrapError: called `unwrap` on a `None`

            ```
        """
        ...

    def is_some_and(self, predicate: Callable[[T], object]) -> bool:
        """
        Returns `True` if the option is `Some` and the value inside of it matches a predicate.

        The predicate is never called on a `None`.

        Args:
            predicate: The check to run against the contained value.

        Returns:
            `True` if the option is `Some` and `predicate` returns a truthy value, `False` otherwise.

        Example:
            ```python
            >>> from pyoption import Some, NONE
            >>> Some(2).is_some_and(lambda x: x > 1)
            True
            >>> Some(0).is_some_and(lambda x: x > 1)
            False
            >>> NONE.is_some_and(lambda x: x > 1)
            False

            ```
        """
        return self.is_some() and bool(predicate(self.unwrap()))

    def is_none_or(self, predicate: Callable[[T], object]) -> bool:
        """
        Returns `True` if the option is `None` or the value inside of it matches a predicate.

        Args:
            predicate: The check to run against the contained value.

        Returns:
            `True` if the option is `None`, otherwise the truth value of `predicate`.

        Example:
            ```python
            >>> from pyoption import Some, NONE
            >>> Some(2).is_none_or(lambda x: x > 1)
            True
            >>> Some(0).is_none_or(lambda x: x > 1)
            False
            >>> NONE.is_none_or(lambda x: x > 1)
            True

            ```
        """
        return self.is_none() or bool(predicate(self.unwrap()))

    def expect(self, msg: str) -> T:
        """
        Returns the contained `Some` value.
        Raises an exception with a provided message if the value is `None`.

        Args:
            msg: The message to include in the exception if the option is `None`.

        Returns:
            The contained `Some` value.

        Raises:
            OptionUnwrapError: If the option is `None`.

        Example:
            ```python
            >>> from pyoption import Some, NONE
            >>> Some("value").expect("fruits are healthy")
            'value'
            >>> NONE.expect("fruits are healthy")
            Traceback (most recent call last):
                ...
            pyoption._option.OptionUnwrapError: fruits are healthy (called `expect` on a `None`)

            ```
        """
        if self.is_some():
            return self.unwrap()
        msg = f"{msg} (called `expect` on a `None`)"
        raise OptionUnwrapError(msg)

    def unwrap_or(self, default: T) -> T:
        """
        Returns the contained `Some` value or a provided default.

        Args:
            default: The value to return if the option is `None`.

        Returns:
            The contained `Some` value or the provided default.

        Example:
            ```python
            >>> from pyoption import Some, NONE
            >>> Some("car").unwrap_or("bike")
            'car'
            >>> NONE.unwrap_or("bike")
            'bike'

            ```
        """
        return self.unwrap() if self.is_some() else default

    def unwrap_or_else(self, f: Callable[[], T]) -> T:
        """
        Returns the contained `Some` value or computes it from a function.

        Args:
            f: A function that returns a default value if the option is `None`.

        Returns:
            The contained `Some` value or the result of the function.

        Example:
            ```python
            >>> from pyoption import Some, NONE
            >>> k = 10
            >>> Some(4).unwrap_or_else(lambda: 2 * k)
            4
            >>> NONE.unwrap_or_else(lambda: 2 * k)
            20

            ```
        """
        return self.unwrap() if self.is_some() else f()

    def map[U](self, f: Callable[[T], U]) -> Option[U]:
        """
        Maps an `Option[T]` to `Option[U]` by applying a function to a contained `Some` value,
        leaving a `None` value untouched.

        Args:
            f: The function to apply to the `Some` value.

        Returns:
            A new `Option` with the mapped value if `Some`, otherwise `None`.

        Example:
            ```python
            >>> from pyoption import Some, NONE
            >>> Some("Hello, World!").map(len)
            Some(value=13)
            >>> NONE.map(len)
            NONE

            ```
        """
        if self.is_some():
            return Some(f(self.unwrap()))
        return NONE

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        """
        Returns the provided default if `None`, or applies a function to the contained value.

        Args:
            default: The value returned for `None`.
            f: The function to apply to the `Some` value.

        Example:
            ```python
            >>> from pyoption import Some, NONE
            >>> Some("foo").map_or(42, len)
            3
            >>> NONE.map_or(42, len)
            42

            ```
        """
        return f(self.unwrap()) if self.is_some() else default

    def map_or_else[U](self, default: Callable[[], U], f: Callable[[T], U]) -> U:
        """
        Computes a default from a function if `None`, or applies `f` to the contained value.

        Example:
            ```python
            >>> from pyoption import Some, NONE
            >>> k = 21
            >>> Some("foo").map_or_else(lambda: 2 * k, len)
            3
            >>> NONE.map_or_else(lambda: 2 * k, len)
            42

            ```
        """
        match self.is_some():
            case True:
                return f(self.unwrap())
            case False:
                return default()
            case _:
                raise RuntimeError("unreachable")

    def and_[U](self, other: Option[U]) -> Option[U]:
        """
        Returns `None` if the option is `None`, otherwise returns `other`.

        Arguments passed to `and_` are eagerly evaluated; if you are passing the result of a function call,
        it is recommended to use `and_then`, which is lazily evaluated.

        Args:
            other: The option returned when `self` is `Some`.

        Returns:
            `other` if `Some`, otherwise `None`.

        Example:
            ```python
            >>> from pyoption import Some, NONE
            >>> Some(1).and_(Some(2))
            Some(value=2)
            >>> Some(1).and_(NONE)
            NONE
            >>> NONE.and_(Some(2))
            NONE

            ```
        """
        return other if self.is_some() else NONE

    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """
        Calls a function if the option is `Some`, otherwise returns `None`.
        Some languages call this operation flatmap.

        Args:
            f: The function to call with the `Some` value.

        Returns:
            The result of the function if `Some`, otherwise `None`.

        Example:
            ```python
            >>> from pyoption import Some, NONE, Option
            >>> def sq(x: int) -> Option[int]:
            ...     return Some(x * x)
            >>> def nope(x: int) -> Option[int]:
            ...     return NONE
            >>> Some(2).and_then(sq).and_then(sq)
            Some(value=16)
            >>> Some(2).and_then(sq).and_then(nope)
            NONE
            >>> Some(2).and_then(nope).and_then(sq)
            NONE
            >>> NONE.and_then(sq).and_then(sq)
            NONE

            ```
        """
        if self.is_some():
            return f(self.unwrap())
        return NONE

    def or_[U](self, other: Option[U]) -> Option[T | U]:
        """
        Returns the option if it contains a value, otherwise returns `other`.

        Arguments passed to `or_` are eagerly evaluated; if you are passing the result of a function call,
        it is recommended to use `or_else`, which is lazily evaluated.

        Args:
            other: The option returned when `self` is `None`.

        Returns:
            `self` if `Some`, otherwise `other`.

        Example:
            ```python
            >>> from pyoption import Some, NONE
            >>> Some(1).or_(Some(4))
            Some(value=1)
            >>> NONE.or_(Some(4))
            Some(value=4)
            >>> NONE.or_(NONE)
            NONE

            ```
        """
        return cast(Option[T | U], self) if self.is_some() else other

    def or_else[U](self, f: Callable[[], Option[U]]) -> Option[T | U]:
        """
        Returns the option if it contains a value, otherwise calls a function and returns the result.

        Args:
            f: The function to call if the option is `None`.

        Returns:
            The original `Option` if it is `Some`, otherwise the result of the function.

        Example:
            ```python
            >>> from pyoption import Some, NONE, Option
            >>> def nobody() -> Option[str]:
            ...     return NONE
            >>> def vikings() -> Option[str]:
            ...     return Some("vikings")
            >>> Some("barbarians").or_else(vikings)
            Some(value='barbarians')
            >>> NONE.or_else(vikings)
            Some(value='vikings')
            >>> NONE.or_else(nobody)
            NONE

            ```
        """
        return cast(Option[T | U], self) if self.is_some() else f()

    def xor[U](self, other: Option[U]) -> Option[T | U]:
        """
        Returns `Some` if exactly one of `self`, `other` is `Some`, otherwise returns `None`.

        Example:
            ```python
            >>> from pyoption import Some, NONE
            >>> Some(2).xor(NONE)
            Some(value=2)
            >>> NONE.xor(Some(2))
            Some(value=2)
            >>> Some(2).xor(Some(2))
            NONE
            >>> NONE.xor(NONE)
            NONE

            ```
        """
        match (self.is_some(), other.is_some()):
            case (True, False):
                return cast(Option[T | U], self)
            case (False, True):
                return other
            case _:
                return NONE

    def filter(self, predicate: Callable[[T], bool]) -> Option[T]:
        """
        Returns `None` if the option is `None`, otherwise calls `predicate` with the wrapped value and returns:

        - `Some(t)` if `predicate` returns `True`
        - `None` if `predicate` returns `False`

        Example:
            ```python
            >>> from pyoption import Some, NONE
            >>> def is_even(n: int) -> bool:
            ...     return n % 2 == 0
            >>> NONE.filter(is_even)
            NONE
            >>> Some(3).filter(is_even)
            NONE
            >>> Some(4).filter(is_even)
            Some(value=4)

            ```
        """
        return self if self.is_some_and(predicate) else NONE

    def zip[U](self, other: Option[U]) -> Option[tuple[T, U]]:
        """
        Zips `self` with another `Option`.

        Returns `Some((s, o))` if both are `Some`, otherwise `None`.

        Example:
            ```python
            >>> from pyoption import Some, NONE
            >>> Some(1).zip(Some("hi"))
            Some(value=(1, 'hi'))
            >>> Some(1).zip(NONE)
            NONE

            ```
        """
        if self.is_some() and other.is_some():
            return Some((self.unwrap(), other.unwrap()))
        return NONE

    def flatten[U](self: Option[Option[U]]) -> Option[U]:
        """
        Removes one level of nesting from an `Option[Option[U]]`.

        Example:
            ```python
            >>> from pyoption import Some, NONE
            >>> Some(Some(6)).flatten()
            Some(value=6)
            >>> Some(NONE).flatten()
            NONE
            >>> NONE.flatten()
            NONE

            ```
        """
        return self.unwrap() if self.is_some() else NONE

    def inspect(self, f: Callable[[T], object]) -> Option[T]:
        """
        Calls a function with the contained value if `Some`, then returns the option unchanged.

        Example:
            ```python
            >>> from pyoption import Some, NONE
            >>> Some(4).inspect(print)
            4
            Some(value=4)
            >>> NONE.inspect(print)
            NONE

            ```
        """
        if self.is_some():
            f(self.unwrap())
        return self


@dataclass(slots=True, frozen=True)
class Some[T](Option[T]):
    """Option variant representing the presence of a value.

    Args:
        value (T): The contained value.

    Example:
    ```python
    >>> import pyoption as po
    >>> po.Some(42)
    Some(value=42)

    ```
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:  # type: ignore[misc]
        return True

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return False

    def unwrap(self) -> T:
        return self.value


@dataclass(slots=True, frozen=True)
class NoneOption(Option[Any]):
    """Option variant representing the absence of a value."""

    def __repr__(self) -> str:
        return "NONE"

    def is_some(self) -> TypeIs[Some[Any]]:  # type: ignore[misc]
        return False

    def is_none(self) -> TypeIs[NoneOption]:  # type: ignore[misc]
        return True

    def unwrap(self) -> Never:
        raise OptionUnwrapError("called `unwrap` on a `None`")


NONE: Option[Any] = NoneOption()
"""Singleton instance representing the absence of a value."""

none: Option[Any] = NONE
"""Lowercase alias of `NONE`, the canonical absent value."""


def some[T](value: T) -> Option[T]:
    """Wrap `value` in `Some`.

    Python's own `None` is a value like any other here.

    Example:
    ```python
    >>> import pyoption as po
    >>> po.some(1)
    Some(value=1)
    >>> po.some(None)
    Some(value=None)

    ```
    """
    return Some(value)


def from_nullable[T](value: T | None) -> Option[T]:
    """Convert a nullable value into an `Option`: `None` becomes `NONE`, anything else `Some`.

    Example:
    ```python
    >>> import pyoption as po
    >>> po.from_nullable({"a": 1}.get("a"))
    Some(value=1)
    >>> po.from_nullable({"a": 1}.get("b"))
    NONE

    ```
    """
    return NONE if value is None else Some(value)
