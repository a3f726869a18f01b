"""Generic functional programming helpers."""

from funtils.core.errors import FuntilsError, LiftNameConflictError
from funtils.functional import (
    Debounced,
    Monad,
    MonadUnit,
    ScaleRange,
    clone,
    compose,
    curry,
    debounce,
    dispatch,
    existy,
    gen_scale,
    generate_scale,
    get_index,
    identity,
    memoize,
    merge,
    monad,
    noop,
    partial,
    reduce,
    slice,
    sort_numeric,
    splice,
    values,
)

__version__ = "0.1.0"

__all__ = [
    "clone",
    "merge",
    "slice",
    "splice",
    "reduce",
    "get_index",
    "sort_numeric",
    "values",
    "existy",
    "dispatch",
    "noop",
    "identity",
    "curry",
    "partial",
    "compose",
    "memoize",
    "ScaleRange",
    "generate_scale",
    "gen_scale",
    "Monad",
    "MonadUnit",
    "monad",
    "Debounced",
    "debounce",
    "FuntilsError",
    "LiftNameConflictError",
]
