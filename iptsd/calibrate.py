"""Collecting contact statistics to calibrate contact validation limits."""

from __future__ import annotations

import logging
import math
import os
import time
from pathlib import Path
from typing import Any, Iterable

__all__ = ["Calibrator"]

_log = logging.getLogger(__name__)

# File name suffix and slack (in centimeters) of the generated snippets.
_SNIPPETS = (("0mm", 0.0), ("2mm", 0.1), ("10mm", 0.5))


def _round_half_away(value: float) -> int:
    return int(math.floor(value + 0.5)) if value >= 0 else -int(math.floor(-value + 0.5))


def _aspect(size: tuple[float, float]) -> float:
    largest, smallest = max(size), min(size)
    if smallest == 0:
        return math.inf if largest > 0 else math.nan
    return largest / smallest


class Calibrator:
    """Gathers size and aspect ratio of stable contacts.

    Contacts are objects with a ``size`` pair (normalized to the screen
    diagonal) and a ``stable`` flag that may be None.
    """

    def __init__(self, width: float, height: float) -> None:
        self.diagonal = math.hypot(width, height)
        """Diagonal of the screen in centimeters."""
        self.sizes: list[float] = []
        self.aspects: list[float] = []
        self._size_sum = 0.0
        self._aspect_sum = 0.0

    def add_contacts(self, contacts: Iterable[Any]) -> None:
        """Record all stable contacts of a frame."""
        for contact in contacts:
            if contact.stable is False:
                continue

            size = max(contact.size) * self.diagonal
            aspect = _aspect(tuple(contact.size))

            self._size_sum += size
            self._aspect_sum += aspect
            self.sizes.append(size)
            self.aspects.append(aspect)

        if not self.sizes:
            return

        self.sizes.sort()
        self.aspects.sort()

        count = len(self.sizes)
        size_min, size_max, aspect_min, aspect_max = self.min_max()

        _log.info("Samples: %d", count)
        _log.info(
            "Size:    %.3f (Min: %.3f; Max: %.3f)", self._size_sum / count, size_min, size_max
        )
        _log.info(
            "Aspect:  %.3f (Min: %.3f; Max: %.3f)",
            self._aspect_sum / count,
            aspect_min,
            aspect_max,
        )

    def min_max(self) -> tuple[float, float, float, float]:
        """The 1st and 99th percentile of size and aspect.

        Returns ``(size_min, size_max, aspect_min, aspect_max)``.
        """
        if not self.sizes:
            raise ValueError("No contacts have been recorded")

        sizes = sorted(self.sizes)
        aspects = sorted(self.aspects)
        last = max(len(sizes) - 1, 0)

        low = _round_half_away(last * 0.01)
        high = _round_half_away(last * 0.99)

        return sizes[low], sizes[high], aspects[low], aspects[high]

    def config_snippet(self, slack: float) -> str:
        """A configuration snippet with the determined limits, widened by ``slack``."""
        size_min, size_max, aspect_min, aspect_max = self.min_max()

        if slack > 0:
            size_min = max(size_min - slack, 0.0)
            size_max += slack
            aspect_min = max(aspect_min, 1.0)

            size_min = math.floor(size_min * 10) / 10
            size_max = math.ceil(size_max * 10) / 10
            aspect_min = math.floor(aspect_min * 10) / 10
            aspect_max = math.ceil(aspect_max * 10) / 10

        return (
            "#\n"
            f"# Samples: {len(self.sizes)}\n"
            f"# Slack:   {slack:.3f}\n"
            "#\n"
            "\n"
            "[Contacts]\n"
            f"SizeMin = {size_min:.3f}\n"
            f"SizeMax = {size_max:.3f}\n"
            f"AspectMin = {aspect_min:.3f}\n"
            f"AspectMax = {aspect_max:.3f}\n"
        )

    def write_file(self, path: str | os.PathLike[str], slack: float) -> None:
        """Write the configuration snippet for ``slack`` to ``path``."""
        Path(path).write_text(self.config_snippet(slack), encoding="utf-8")

    def write_snippets(
        self, directory: str | os.PathLike[str], timestamp: int | None = None
    ) -> list[Path]:
        """Write snippets without, with some and with much slack into ``directory``.

        Returns the paths of the written files, from least to most slack.
        """
        if timestamp is None:
            timestamp = int(time.time())

        base = Path(directory)
        paths = []
        for suffix, slack in _SNIPPETS:
            path = base / f"iptsd_calib_{timestamp}_{suffix}.conf"
            self.write_file(path, slack)
            paths.append(path)

        _log.info("Recommended:             %s", paths[1])
        _log.info("If iptsd misses inputs:  %s", paths[2])
        _log.info("For manual finetuning:   %s", paths[0])
        _log.warning("Installing these snippets can overwrite a previous calibration!")
        return paths