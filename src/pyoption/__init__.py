from ._collect import collect, values
from ._option import (
    NONE,
    NoneOption,
    Option,
    OptionUnwrapError,
    Some,
    from_nullable,
    none,
    some,
)

__all__ = [
    "NONE",
    "NoneOption",
    "Option",
    "OptionUnwrapError",
    "Some",
    "collect",
    "from_nullable",
    "none",
    "some",
    "values",
]
