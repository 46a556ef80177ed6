"""Single-slot debounce timer."""

from __future__ import annotations

from functools import partial
from typing import Any, Callable, Protocol


class TimerHandle(Protocol):
    def stop(self) -> Any: ...


Scheduler = Callable[[float, Callable[[], Any]], TimerHandle]


class Debouncer:
    """Run a callback once input has been quiet for `delay` seconds.

    Calling again before the delay elapses cancels the pending call, so only
    the latest arguments are ever delivered.
    """

    def __init__(self, schedule: Scheduler, delay: float) -> None:
        self._schedule = schedule
        self.delay = delay
        self._pending: TimerHandle | None = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def call(self, callback: Callable[..., Any], *args: Any) -> None:
        self.cancel()
        self._pending = self._schedule(self.delay, partial(self._fire, callback, args))

    def cancel(self) -> None:
        if self._pending is None:
            return
        handle, self._pending = self._pending, None
        handle.stop()

    def _fire(self, callback: Callable[..., Any], args: tuple[Any, ...]) -> Any:
        self._pending = None
        # Returned as-is so the scheduler can await coroutine callbacks.
        return callback(*args)
