"""Timer-based call collapsing."""

import functools
import threading
from typing import Any, Callable, Optional

from funtils.core.config import settings
from funtils.logger.logger import logger

__all__ = ["Debounced", "debounce"]


class Debounced:
    """Callable that delays ``fn`` until calls stop for ``delay_ms``.

    Every call cancels the pending invocation and schedules a new one with
    the latest arguments, so a burst of calls runs ``fn`` once, after the
    window elapses with no further calls. Calling has no synchronous effect
    beyond rescheduling.

    Attributes:
        fn: Wrapped function.
        delay_ms: Debounce window in milliseconds.
    """

    def __init__(self, fn: Callable[..., Any], delay_ms: float):
        if delay_ms < 0:
            raise ValueError(f"delay_ms must be non-negative, got {delay_ms}.")

        self.fn = fn
        self.delay_ms = delay_ms
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._call: Optional[tuple] = None
        functools.update_wrapper(self, fn, updated=())

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()

            self._call = (args, kwargs)
            self._timer = threading.Timer(self.delay_ms / 1000.0, self._fire)
            self._timer.daemon = True
            self._timer.start()

        logger.debug(f"debounce: call scheduled in {self.delay_ms}ms")

    @property
    def pending(self) -> bool:
        """Whether a call is waiting for its window to elapse."""
        with self._lock:
            return self._call is not None

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            self._take()

    def flush(self) -> Any:
        """Run the pending call now instead of waiting.

        Returns:
            The result of ``fn``, or ``None`` when nothing was pending.
        """
        with self._lock:
            call = self._take()

        if call is None:
            return None

        args, kwargs = call
        return self.fn(*args, **kwargs)

    def _take(self) -> Optional[tuple]:
        # Caller holds the lock
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

        call, self._call = self._call, None
        return call

    def _fire(self) -> None:
        with self._lock:
            if threading.current_thread() is not self._timer:
                # Superseded between expiry and acquiring the lock
                return
            self._timer = None
            call, self._call = self._call, None

        if call is None:
            return

        args, kwargs = call
        try:
            self.fn(*args, **kwargs)
        except Exception as e:
            logger.error(f"debounce: debounced call failed: {e}", exc_info=True)


def debounce(fn: Callable[..., Any], delay_ms: Optional[float] = None) -> Debounced:
    """Collapse rapid repeated calls to ``fn`` into one trailing call.

    Args:
        fn: Function to debounce.
        delay_ms: Window in milliseconds. Defaults to
            ``settings.DEBOUNCE_DELAY_MS``.

    Returns:
        A :class:`Debounced` wrapper.
    """
    if delay_ms is None:
        delay_ms = settings.DEBOUNCE_DELAY_MS
    return Debounced(fn, delay_ms)
