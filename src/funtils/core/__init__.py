"""Configuration and error types shared across funtils."""

from funtils.core.config import Settings, settings
from funtils.core.errors import FuntilsError, LiftNameConflictError

__all__ = [
    "Settings",
    "settings",
    "FuntilsError",
    "LiftNameConflictError",
]
