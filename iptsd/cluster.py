"""Spanning clusters of touched pixels on a heatmap."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

__all__ = ["Box", "span"]

Point = Tuple[int, int]


@dataclass
class Box:
    """An axis aligned bounding box of integer ``(x, y)`` points.

    A box without corners is empty.
    """

    min: Optional[Point] = None
    max: Optional[Point] = None

    def is_empty(self) -> bool:
        """Whether the box holds no point at all."""
        return self.min is None or self.max is None

    def contains(self, point: Point) -> bool:
        """Whether ``point`` lies inside the box, borders included."""
        if self.min is None or self.max is None:
            return False
        x, y = point
        return self.min[0] <= x <= self.max[0] and self.min[1] <= y <= self.max[1]

    def extend(self, point: Point) -> None:
        """Grow the box so that it contains ``point``."""
        x, y = int(point[0]), int(point[1])
        if self.min is None or self.max is None:
            self.min = (x, y)
            self.max = (x, y)
            return
        self.min = (min(self.min[0], x), min(self.min[1], y))
        self.max = (max(self.max[0], x), max(self.max[1], y))


def span(
    heatmap: np.ndarray,
    position: Point,
    activation_threshold: float,
    deactivation_threshold: float,
) -> Box:
    """Span a cluster on ``heatmap`` starting at ``position`` ``(x, y)``.

    Pixels above the deactivation threshold are added to the cluster. Once the
    value has fallen to or below the activation threshold it may not rise again,
    so that two neighbouring contacts are not joined. Returns the bounding box
    of the cluster, which is empty if the start is outside the heatmap or not
    above the deactivation threshold.
    """
    data = np.asarray(heatmap)
    if data.ndim != 2:
        raise ValueError(f"Heatmap must be two-dimensional, got {data.ndim} dimensions")

    cluster = Box()
    rows, cols = data.shape
    x, y = position

    if not (0 <= x < cols and 0 <= y < rows):
        return cluster

    visited = np.zeros((rows, cols), dtype=bool)
    pending: list[tuple[int, int, float]] = [(int(x), int(y), math.inf)]

    while pending:
        px, py, previous = pending.pop()
        value = data[py, px]

        if value <= deactivation_threshold:
            continue

        # Don't allow the value to increase outside of the activation area.
        if previous <= activation_threshold and value > previous:
            continue

        if visited[py, px]:
            continue
        visited[py, px] = True

        if not cluster.contains((px, py)):
            cluster.extend((px, py))

        if py > 0:
            pending.append((px, py - 1, value))
        if py < rows - 1:
            pending.append((px, py + 1, value))
        if px > 0:
            pending.append((px - 1, py, value))
        if px < cols - 1:
            pending.append((px + 1, py, value))

    return cluster