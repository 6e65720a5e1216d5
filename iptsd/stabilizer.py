"""Stabilization of contacts across frames."""

from __future__ import annotations

import copy
import math
from typing import Any, MutableSequence

from .config import StabilityConfig

__all__ = ["Stabilizer"]


def _aspect(size: tuple[float, float]) -> float:
    largest, smallest = max(size), min(size)
    if smallest == 0:
        return math.inf if largest > 0 else math.nan
    return largest / smallest


class Stabilizer:
    """Suppresses small changes of contacts and flags changes too large to track.

    Contacts are objects with the attributes ``index`` (int or None),
    ``stable`` (bool or None), ``size`` and ``mean`` (pairs of floats),
    ``orientation`` (float) and ``normalized`` (bool). They are changed in place.
    """

    def __init__(self, config: StabilityConfig) -> None:
        self.config = config
        self._last: list[Any] = []

    def reset(self) -> None:
        """Forget the previous frame."""
        self._last.clear()

    def stabilize(self, frame: MutableSequence[Any]) -> None:
        """Stabilize every contact of a frame against the previous one."""
        for contact in frame:
            self._stabilize_contact(contact)
        self._last = [copy.deepcopy(contact) for contact in frame]

    def _find_last(self, index: int) -> Any | None:
        return next((c for c in self._last if c.index == index), None)

    def _stabilize_contact(self, contact: Any) -> None:
        # Contacts that can't be tracked can't be stabilized.
        if contact.index is None:
            return

        contact.stable = True

        last = self._find_last(contact.index)
        if last is None:
            return

        if self.config.size_threshold is not None:
            self._stabilize_size(contact, last, self.config.size_threshold)
        if self.config.position_threshold is not None:
            self._stabilize_position(contact, last, self.config.position_threshold)
        if self.config.orientation_threshold is not None:
            self._stabilize_orientation(contact, last, self.config.orientation_threshold)

    @staticmethod
    def _stabilize_size(current: Any, last: Any, thresh: tuple[float, float]) -> None:
        low, high = thresh
        size = []
        for new, old in zip(current.size, last.size):
            delta = abs(new - old)
            if delta < low:
                new = old
            elif delta > high:
                current.stable = False
            size.append(new)
        current.size = tuple(size)

    @staticmethod
    def _stabilize_position(current: Any, last: Any, thresh: tuple[float, float]) -> None:
        low, high = thresh
        distance = math.hypot(current.mean[0] - last.mean[0], current.mean[1] - last.mean[1])
        if distance < low:
            current.mean = tuple(last.mean)
        elif distance > high:
            current.stable = False

    @staticmethod
    def _stabilize_orientation(current: Any, last: Any, thresh: tuple[float, float]) -> None:
        # Too round to determine an orientation reliably.
        if _aspect(tuple(current.size)) < 1.1:
            current.orientation = 0
            return

        low, high = thresh
        full = 1.0 if current.normalized else math.pi

        d1 = abs(current.orientation - last.orientation)
        delta = min(d1, full - d1)

        if delta < low:
            current.orientation = last.orientation
        elif delta > high:
            current.stable = False