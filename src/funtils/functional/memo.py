"""Call-result caching keyed by the structure of the argument list."""

import functools
from collections.abc import Mapping
from typing import Any, Callable, Hashable

import numpy as np

from funtils.logger.logger import logger

__all__ = ["memoize"]


def _encode(value: Any) -> Hashable:
    """Encode ``value`` as a hashable, type-tagged tuple.

    Two values share an encoding only if they have the same types at every
    level and the same contents. Mapping entries and set members are ordered
    by the ``repr`` of their encoding, which is total over mixed key types.
    """
    if isinstance(value, Mapping):
        entries = ((_encode(k), _encode(v)) for k, v in value.items())
        return (type(value).__qualname__, tuple(sorted(entries, key=repr)))

    if isinstance(value, (list, tuple)):
        return (type(value).__qualname__, tuple(_encode(item) for item in value))

    if isinstance(value, (set, frozenset)):
        members = sorted((_encode(item) for item in value), key=repr)
        return (type(value).__qualname__, tuple(members))

    if isinstance(value, np.ndarray):
        if value.dtype.hasobject:
            # Raw bytes of an object array are pointers
            items = tuple(_encode(item) for item in value.ravel().tolist())
            return ("ndarray", value.dtype.str, value.shape, items)
        return ("ndarray", value.dtype.str, value.shape, value.tobytes())

    return (type(value).__qualname__, repr(value))


def _cache_key(args: tuple, kwargs: dict) -> Hashable:
    return (_encode(args), _encode(kwargs))


def memoize(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Cache the results of ``fn`` per distinct argument list.

    The key is a structural encoding of the arguments that keeps their
    types, so ``f(1)``, ``f("1")`` and ``f(1.0)`` are cached separately, as
    are ``f([1])`` and ``f((1,))``. NumPy arrays are keyed by dtype, shape
    and raw contents. Other values are keyed by type and ``repr``. A ``None``
    result is cached like any other. The cache grows without bound; call
    ``wrapper.cache_clear()`` to empty it.

    Args:
        fn: Function to wrap.

    Returns:
        The memoized wrapper. Its ``cache`` attribute is the memo table.
    """
    memo: dict = {}
    name = getattr(fn, "__name__", repr(fn))

    @functools.wraps(fn)
    def _memoize(*args: Any, **kwargs: Any) -> Any:
        key = _cache_key(args, kwargs)

        if key not in memo:
            logger.debug(f"memoize: cache miss for {name}")
            memo[key] = fn(*args, **kwargs)

        return memo[key]

    _memoize.cache = memo
    _memoize.cache_clear = memo.clear
    return _memoize
