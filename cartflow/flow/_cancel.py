"""
Cancellation token.
"""

from __future__ import annotations

from collections.abc import Callable


class CancellationToken:
    """
    Cooperative cancellation for flows.

    Cancelling stops event delivery. Requests already sent are not
    guaranteed to be aborted.
    """

    __slots__ = ("_cancelled", "_callbacks")

    def __init__(self) -> None:
        self._cancelled = False
        self._callbacks: list[Callable[[], None]] = []

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()

    def on_cancel(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Register callback. Returns a function that unregisters it."""
        if self._cancelled:
            callback()
            return lambda: None

        self._callbacks.append(callback)

        def unregister() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unregister


__all__ = ("CancellationToken",)
