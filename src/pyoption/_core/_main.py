from __future__ import annotations

from collections.abc import Callable
from typing import Concatenate, Self


class Pipeable:
    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        This method allows to pipe the instance into an object or function that can convert `Self` into another type.

        Conceptually, this allow to do x.into(f) instead of f(x), hence keeping a functional chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to the function.
            **kwargs (P.kwargs): Keyword arguments to pass to the function.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import pyoption as po
        >>> def describe(opt: po.Option[int]) -> str:
        ...     match opt:
        ...         case po.Some(value):
        ...             return f"got {value}"
        ...         case _:
        ...             return "nothing"
        >>> po.Some(3).into(describe)
        'got 3'
        >>> po.NONE.into(describe)
        'nothing'

        ```
        """
        return func(self, *args, **kwargs)
