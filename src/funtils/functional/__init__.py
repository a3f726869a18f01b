"""Functional primitives for funtils.

This package provides small, generic functional programming helpers: deep
clone and merge, sequence wrappers, first-match dispatch, partial application
and composition, memoization, clamped linear scaling, a minimal monad
constructor and debounce. Apart from the memo table, the monad operation
registry and the debounce timer, each helper is stateless and
side-effect-free, so they compose freely.
"""

from funtils.functional.combinators import (
    compose,
    curry,
    dispatch,
    existy,
    identity,
    noop,
    partial,
)
from funtils.functional.memo import memoize
from funtils.functional.monad import Monad, MonadUnit, monad
from funtils.functional.scale import ScaleRange, gen_scale, generate_scale
from funtils.functional.sequences import (
    get_index,
    reduce,
    slice,
    sort_numeric,
    splice,
    values,
)
from funtils.functional.structural import clone, merge
from funtils.functional.timing import Debounced, debounce

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
]
