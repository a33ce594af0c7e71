"""Debounced callbacks.

Each ``schedule()`` cancels the pending timer and starts a new one, so only
the last call made within the quiet period fires.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

logger = logging.getLogger("qamus.debounce")

# Default quiet period in seconds
DEBOUNCE_SECONDS = 0.3


class Debouncer:
    """Single-shot, cancel-and-replace timer.

    Features:
    - Trailing-edge firing after ``delay`` seconds of inactivity
    - ``flush()`` fires the pending call immediately
    - Timers run in daemon threads (die with main process)
    """

    def __init__(self, delay: float = DEBOUNCE_SECONDS) -> None:
        if delay <= 0:
            raise ValueError("debounce delay must be positive")
        self._delay = delay
        self._timer: threading.Timer | None = None
        self._pending: tuple[Callable[..., Any], tuple[Any, ...]] | None = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending is not None

    def schedule(self, callback: Callable[..., Any], *args: Any) -> None:
        """Replace any pending call with ``callback(*args)`` after the quiet period."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()

            self._generation += 1
            self._pending = (callback, args)
            timer = threading.Timer(self._delay, self._fire, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = None

    def flush(self) -> bool:
        """Run the pending call now.

        Returns:
            True if a call was pending and has been run
        """
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            pending, self._pending = self._pending, None

        if pending is None:
            return False
        self._run(*pending)
        return True

    def _fire(self, generation: int) -> None:
        """Timer thread entry point; ignores timers superseded after they started."""
        with self._lock:
            if generation != self._generation or self._pending is None:
                return
            self._timer = None
            pending, self._pending = self._pending, None

        self._run(*pending)

    def _run(self, callback: Callable[..., Any], args: tuple[Any, ...]) -> None:
        try:
            callback(*args)
        except Exception:
            logger.exception("Error in debounced callback %r", callback)
