"""Higher-order function builders and the existence predicate.

``dispatch`` is the most useful piece here: it gives first-match-wins
polymorphism over a priority-ordered list of handlers, without inheritance.

Examples:
    >>> from funtils.functional.combinators import dispatch, compose
    >>> describe = dispatch(
    ...     lambda x: "string" if isinstance(x, str) else None,
    ...     lambda x: "number" if isinstance(x, (int, float)) else None,
    ... )
    >>> describe(3)
    'number'
    >>> compose(lambda x: x * 2, lambda x: x + 1)(2)
    6
"""

from typing import Any, Callable

__all__ = [
    "existy",
    "dispatch",
    "noop",
    "identity",
    "curry",
    "partial",
    "compose",
]


def existy(test: Any) -> bool:
    """Tell whether ``test`` exists, i.e. is not ``None``.

    ``0``, ``""``, ``False`` and ``nan`` all exist.
    """
    return test is not None


def dispatch(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """Build a dispatcher trying each of ``fns`` in order.

    Args:
        *fns: Handlers called as ``fn(target, *args)``.

    Returns:
        A function returning the first existy handler result, or the last
        handler's result when none exists.
    """

    def do_dispatch(target: Any, *args: Any) -> Any:
        ret = None

        for fn in fns:
            ret = fn(target, *args)

            if existy(ret):
                return ret

        return ret

    return do_dispatch


def noop(*args: Any, **kwargs: Any) -> None:
    return None


def identity(me: Any) -> Callable[[], Any]:
    """Return a zero-argument function that always returns ``me``."""

    def _identity() -> Any:
        return me

    return _identity


def curry(fun: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Wrap ``fun`` so it is always called with exactly one argument."""

    def _curry(arg: Any) -> Any:
        return fun(arg)

    return _curry


def partial(fun: Callable[..., Any], *pargs: Any, **pkwargs: Any) -> Callable[..., Any]:
    """Bind ``pargs`` ahead of the arguments given at call time.

    Keyword arguments given at call time override bound ones.
    """

    def _partial(*args: Any, **kwargs: Any) -> Any:
        return fun(*pargs, *args, **{**pkwargs, **kwargs})

    return _partial


def compose(f: Callable[[Any], Any], g: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Return the composition ``x -> f(g(x))``."""

    def _composed(x: Any) -> Any:
        return f(g(x))

    return _composed
