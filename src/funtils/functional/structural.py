"""Structural copy helpers.

``clone`` produces a recursive copy of plain data (lists, tuples, sets,
mappings, NumPy arrays and objects, including slotted classes, frozen
dataclasses and exceptions) so that mutating the copy never touches the
original. Callables and enum members are treated as atomic leaves and are
returned by reference. ``merge`` layers shallow overrides on top of such a copy.

Examples:
    >>> from funtils.functional.structural import clone, merge
    >>> base = {"obj": {"foo": "bar"}, "arr": [1, 2]}
    >>> copy = clone(base)
    >>> copy["obj"] is base["obj"]
    False
    >>> merge(base, {"obj": {"baz": "bip"}})["obj"]
    {'baz': 'bip'}
"""

import copy
import enum
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

import numpy as np

from funtils.logger.logger import logger

__all__ = ["clone", "merge"]

_ATOMIC_TYPES = (str, bytes, int, float, complex, bool, type(None), enum.Enum)


def _slot_names(cls: type) -> List[str]:
    """Attribute names declared in ``__slots__`` anywhere in ``cls``'s MRO."""
    names = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            if name not in names:
                names.append(name)
    return names


def _new_shell(value: Any) -> Any:
    # Instance of the same class, without running __init__
    cls = type(value)
    try:
        return cls.__new__(cls)
    except TypeError:
        return copy.copy(value)


def clone(value: Any, _memo: Optional[Dict[int, Any]] = None) -> Any:
    """Recursively copy ``value``.

    Containers already visited during the current call are looked up by
    identity, so self-referential structures come out with the same shape
    instead of recursing forever.

    Args:
        value: Any structurally-copyable value.

    Returns:
        A copy sharing no mutable container with ``value``. Callables and
        primitives are returned unchanged.
    """
    if isinstance(value, _ATOMIC_TYPES) or callable(value):
        return value

    if _memo is None:
        _memo = {}

    key = id(value)
    if key in _memo:
        logger.debug(f"clone: reusing copy of shared {type(value).__name__}")
        return _memo[key]

    if isinstance(value, np.ndarray):
        copied = value.copy()
        _memo[key] = copied
        return copied

    if isinstance(value, list):
        copied = []
        _memo[key] = copied
        copied.extend(clone(item, _memo) for item in value)
        return copied

    if isinstance(value, tuple):
        # Tuples are built after their items, so a cycle through one only
        # resolves at the inner containers.
        items = [clone(item, _memo) for item in value]
        if hasattr(value, "_fields"):
            return type(value)._make(items)
        return tuple(items)

    if isinstance(value, (set, frozenset)):
        return type(value)(clone(item, _memo) for item in value)

    if isinstance(value, Mapping):
        copied = {}
        _memo[key] = copied
        for prop in value:
            copied[prop] = clone(value[prop], _memo)
        return copied

    slots = _slot_names(type(value))
    if hasattr(value, "__dict__") or slots:
        copied = _new_shell(value)
        _memo[key] = copied

        if isinstance(value, BaseException):
            copied.args = clone(value.args, _memo)

        for prop, item in getattr(value, "__dict__", {}).items():
            object.__setattr__(copied, prop, clone(item, _memo))

        for prop in slots:
            # Unset slots stay unset
            if hasattr(value, prop):
                object.__setattr__(copied, prop, clone(getattr(value, prop), _memo))
        return copied

    return value


def merge(base: Mapping, overrides: Mapping) -> Dict[Any, Any]:
    """Copy ``base`` and assign every key of ``overrides`` onto the copy.

    Override values are assigned as-is: a nested mapping under an override
    key replaces the one in ``base`` rather than being merged into it.

    Args:
        base: Mapping to copy.
        overrides: Keys to replace or add.

    Returns:
        A new dict. Neither argument is modified.
    """
    merged = clone(base)

    for prop in overrides:
        merged[prop] = overrides[prop]

    return merged
