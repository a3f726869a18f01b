"""Exception types raised by funtils."""

__all__ = ["FuntilsError", "LiftNameConflictError"]


class FuntilsError(Exception):
    """Base class for errors raised explicitly by funtils."""


class LiftNameConflictError(FuntilsError, ValueError):
    """Raised when a monad constructor is asked to lift a name twice.

    Attributes:
        name: The operation name that is already registered.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'"{name}" is already defined')
