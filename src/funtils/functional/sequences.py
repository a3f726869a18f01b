"""Functional wrappers over standard sequence operations.

The helpers take the sequence as their first argument so they can be bound
with :func:`funtils.functional.combinators.partial` or passed around as plain
functions.

Note:
    ``slice`` and ``reduce`` shadow the builtins of the same name inside this
    module. Import them qualified (``sequences.slice``) when the builtin is
    also needed.
"""

import functools
from collections.abc import Mapping, MutableSequence, Sequence
from typing import Any, Callable, Iterable, List, Optional

__all__ = [
    "slice",
    "splice",
    "reduce",
    "get_index",
    "sort_numeric",
    "values",
]


def slice(seq: Iterable, start: int = 0, end: Optional[int] = None) -> List[Any]:
    """Return a new list holding ``seq[start:end]``.

    Negative indices count from the end, as with regular slicing. Any
    iterable is accepted (``*args`` tuples included).
    """
    return list(seq)[start:end]


def splice(
    lst: MutableSequence, start: int, delete_count: Optional[int] = None, *items: Any
) -> List[Any]:
    """Remove and/or insert items in ``lst`` in place.

    Args:
        lst: Mutable sequence to modify.
        start: Position to start at. Negative values count from the end.
        delete_count: Number of items to remove. ``None`` removes everything
            from ``start`` to the end.
        *items: Items to insert at ``start``.

    Returns:
        The removed items as a list.
    """
    size = len(lst)
    if start < 0:
        start = max(size + start, 0)
    start = min(start, size)

    if delete_count is None:
        stop = size
    else:
        stop = min(start + max(delete_count, 0), size)

    removed = list(lst[start:stop])
    lst[start:stop] = list(items)
    return removed


def reduce(seq: Iterable, fn: Callable[[Any, Any], Any], *initial: Any) -> Any:
    """Fold ``seq`` with ``fn``, optionally starting from ``initial``."""
    return functools.reduce(fn, seq, *initial)


def _element_id(elem: Any) -> Any:
    if isinstance(elem, Mapping):
        return elem.get("id")
    return getattr(elem, "id", None)


def get_index(arr: Sequence, elem: Any) -> int:
    """Find the position of ``elem`` in ``arr`` by comparing ``id`` fields.

    Items may be mappings (``item["id"]``) or objects (``item.id``).

    Returns:
        Index of the first matching item, or ``-1`` when none matches.
    """
    target = _element_id(elem)

    for i, item in enumerate(arr):
        if _element_id(item) == target:
            return i

    return -1


def sort_numeric(a: Any, b: Any) -> int:
    """Three-way comparator over the numeric values of ``a`` and ``b``.

    Use with ``sorted(items, key=functools.cmp_to_key(sort_numeric))``.
    """
    a = float(a)
    b = float(b)
    return 1 if a > b else -1 if a < b else 0


def values(obj: Mapping) -> List[Any]:
    return [obj[key] for key in obj]
