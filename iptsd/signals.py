"""Registering and removing user defined signal handlers."""

from __future__ import annotations

import signal
from types import FrameType, TracebackType
from typing import Any, Callable

__all__ = ["handle_signal", "clear_handler"]

# Handlers that were installed before we replaced them, keyed by signal number.
_previous: dict[int, Any] = {}


class _SignalGuard:
    """Removes a signal handler when closed or when its ``with`` block ends."""

    def __init__(self, signum: int) -> None:
        self.signum = signum

    def close(self) -> None:
        clear_handler(self.signum)

    def __enter__(self) -> _SignalGuard:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def handle_signal(signum: int, callback: Callable[[int], object]) -> _SignalGuard:
    """Call ``callback(signum)`` whenever ``signum`` is received.

    Any handler previously set through this function is replaced. The returned
    guard removes the handler again.
    """

    def _handler(received: int, _frame: FrameType | None) -> None:
        callback(received)

    previous = signal.signal(signum, _handler)
    _previous.setdefault(signum, previous)
    return _SignalGuard(signum)


def clear_handler(signum: int) -> None:
    """Remove the handler set for ``signum``; does nothing if there is none."""
    if signum not in _previous:
        return
    previous = _previous.pop(signum)
    try:
        signal.signal(signum, previous if previous is not None else signal.SIG_DFL)
    except (OSError, ValueError, TypeError):
        pass