"""Minimal monad constructor in the style of Crockford's ``MONAD``.

:func:`monad` returns a :class:`MonadUnit`, a constructor that wraps values
in :class:`Monad` instances. Operations registered with
:meth:`MonadUnit.lift` become methods on every instance of that constructor,
including instances created before the registration.

Each constructor owns its own operation registry, so operations lifted on
one constructor are never visible to instances of another.

Examples:
    >>> from funtils.functional.monad import monad
    >>> unit = monad(lambda m, value: value + " - modified")
    >>> _ = unit.lift("lifted", lambda value: value + " - lifted")
    >>> unit("x").value()
    'x - modified'
    >>> unit("x").lifted().value()
    'x - modified - lifted - modified'
"""

from typing import Any, Callable, Dict, Iterable, Optional

from funtils.core.errors import LiftNameConflictError
from funtils.logger.logger import logger

__all__ = ["Monad", "MonadUnit", "monad"]


class Monad:
    """A wrapped value produced by a :class:`MonadUnit`."""

    __slots__ = ("_unit", "_value")

    def __init__(self, unit: "MonadUnit"):
        self._unit = unit
        self._value = None

    def bind(self, fn: Callable[..., Any], args: Iterable[Any] = ()) -> "Monad":
        """Apply ``fn(value, *args)`` and wrap the result.

        A result that is already a :class:`Monad` is returned unchanged,
        anything else is passed through the owning constructor.
        """
        result = fn(self._value, *args)
        return self._unit.wrap(result)

    def value(self) -> Any:
        return self._value

    def __getattr__(self, name: str) -> Callable[..., "Monad"]:
        # Only reached for names that are not regular attributes. The slot is
        # read directly so a half-built instance cannot recurse here.
        unit = object.__getattribute__(self, "_unit")
        try:
            fn = unit.operations[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            ) from None

        def _lifted(*args: Any) -> "Monad":
            return self.bind(fn, args)

        return _lifted

    def __repr__(self) -> str:
        return f"Monad({self._value!r})"


class MonadUnit:
    """Constructor for :class:`Monad` instances sharing one operation registry.

    Attributes:
        modifier: Optional ``modifier(instance, value)`` applied to every
            value before it is stored.
        operations: Registry of lifted operations, keyed by name.
    """

    def __init__(self, modifier: Optional[Callable[[Monad, Any], Any]] = None):
        self.modifier = modifier
        self.operations: Dict[str, Callable[..., Any]] = {}

    def __call__(self, value: Any) -> Monad:
        instance = Monad(self)

        if callable(self.modifier):
            value = self.modifier(instance, value)

        instance._value = value
        return instance

    def wrap(self, result: Any) -> Monad:
        """Return ``result`` if it is a :class:`Monad`, else ``self(result)``."""
        if isinstance(result, Monad):
            return result
        return self(result)

    def lift(self, name: str, fn: Callable[..., Any]) -> "MonadUnit":
        """Register ``fn`` as the operation ``name`` on every instance.

        Calling ``instance.<name>(*args)`` is equivalent to
        ``instance.bind(fn, args)``.

        Raises:
            LiftNameConflictError: If ``name`` is already registered, is a
                built-in :class:`Monad` attribute, or is a
                special ``__dunder__`` name.
        """
        is_dunder = name.startswith("__") and name.endswith("__")
        if name in self.operations or hasattr(Monad, name) or is_dunder:
            raise LiftNameConflictError(name)

        logger.debug(f"monad: lifting operation {name!r}")
        self.operations[name] = fn
        return self


def monad(modifier: Optional[Callable[[Monad, Any], Any]] = None) -> MonadUnit:
    """Create a new monad constructor.

    Args:
        modifier: Function applied as ``modifier(instance, value)`` whenever
            a value is wrapped. Ignored when not callable.

    Returns:
        A fresh :class:`MonadUnit` with an empty operation registry.
    """
    return MonadUnit(modifier)
