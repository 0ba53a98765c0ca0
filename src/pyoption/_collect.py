from __future__ import annotations

from collections.abc import Iterable, Iterator

from ._option import NONE, Option, Some


def collect[T](items: Iterable[Option[T]]) -> Option[list[T]]:
    """Turn an iterable of `Option[T]` into an `Option[list[T]]`.

    Elements are consumed in order. The first `None` stops the traversal and is returned as is,
    so nothing after it is ever pulled from `items`. An empty iterable gives `Some([])`.

    Args:
        items (Iterable[Option[T]]): The options to gather.

    Returns:
        Option[list[T]]: `Some` of every wrapped value in input order, or `None` if any element is `None`.

    Example:
    ```python
    >>> import pyoption as po
    >>> po.collect([po.Some(1), po.Some(2), po.Some(3)])
    Some(value=[1, 2, 3])
    >>> po.collect([po.Some(1), po.NONE, po.Some(3)])
    NONE
    >>> po.collect([])
    Some(value=[])

    ```
    Generators are only consumed up to the first `None`:
    ```python
    >>> import pyoption as po
    >>> seen = []
    >>> def produce(n: int) -> po.Option[int]:
    ...     seen.append(n)
    ...     return po.NONE if n == 1 else po.Some(n)
    >>> po.collect(produce(n) for n in range(4))
    NONE
    >>> seen
    [0, 1]

    ```
    """
    acc: list[T] = []
    for item in items:
        if item.is_none():
            return NONE
        acc.append(item.unwrap())
    return Some(acc)


def values[T](items: Iterable[Option[T]]) -> Iterator[T]:
    """Lazily yield the wrapped values of the `Some` elements, skipping every `None`.

    Example:
    ```python
    >>> import pyoption as po
    >>> list(po.values([po.Some(1), po.NONE, po.Some(3)]))
    [1, 3]

    ```
    """
    return (item.unwrap() for item in items if item.is_some())
