"""Two-dimensional convolution with a 3x3 kernel."""

from __future__ import annotations

import numpy as np

__all__ = ["convolve_3x3"]


def convolve_3x3(data: np.ndarray, kernel: np.ndarray) -> np.ndarray:
    """Apply a 3x3 ``kernel`` to ``data``, extending the edges outwards.

    Pixels beyond the border take the value of the nearest border pixel.
    ``kernel[dy + 1, dx + 1]`` weighs the input pixel at offset ``(dx, dy)``.
    """
    values = np.asarray(data)
    weights = np.asarray(kernel)

    if values.ndim != 2:
        raise ValueError(f"Data must be two-dimensional, got {values.ndim} dimensions")
    if weights.shape != (3, 3):
        raise ValueError(f"Kernel must be 3x3, got shape {weights.shape}")
    if values.size == 0:
        raise ValueError("Data must not be empty")

    rows, cols = values.shape
    padded = np.pad(values, 1, mode="edge")
    out = np.zeros((rows, cols), dtype=np.result_type(values.dtype, weights.dtype))

    for ky in range(3):
        for kx in range(3):
            out += padded[ky : ky + rows, kx : kx + cols] * weights[ky, kx]

    return out