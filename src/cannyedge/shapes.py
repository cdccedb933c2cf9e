# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Synthetic test images.

Deterministic single-channel fixtures with known boundaries, used by the
test-suite and by ``cannyedge --demo``.
"""

from typing import Callable, Dict, Optional

import numpy as np

from .array import Dense2DArray


def _canvas(rows: int, cols: int) -> np.ndarray:
    return np.zeros((rows, cols), dtype=np.float64)


def make_step(rows: int = 5, cols: int = 5, low: float = 0.0,
              high: float = 100.0, split: Optional[int] = None) -> Dense2DArray:
    """Vertical step edge: columns before ``split`` = low, the rest = high.

    ``split`` defaults to cols // 2.
    """
    split = cols // 2 if split is None else split
    img = _canvas(rows, cols) + low
    img[:, split:] = high
    return Dense2DArray.from_numpy(img)


def make_square(size: int = 32, margin: int = 8, value: float = 1.0) -> Dense2DArray:
    """Filled axis-aligned square on a dark background."""
    img = _canvas(size, size)
    img[margin:size - margin, margin:size - margin] = value
    return Dense2DArray.from_numpy(img)


def make_circle(size: int = 32, radius: Optional[int] = None, value: float = 1.0) -> Dense2DArray:
    """Filled centred disc; edges at every orientation."""
    radius = size // 3 if radius is None else radius
    yy, xx = np.indices((size, size))
    c = (size - 1) / 2.0
    img = _canvas(size, size)
    img[(xx - c) ** 2 + (yy - c) ** 2 <= radius * radius] = value
    return Dense2DArray.from_numpy(img)


def make_rgb(gray: Dense2DArray) -> Dense2DArray:
    """Replicate a single-channel image into R = G = B."""
    plane = gray.plane()
    return Dense2DArray.from_numpy(np.stack([plane, plane, plane], axis=-1))


SHAPES: Dict[str, Callable[..., Dense2DArray]] = {
    "step": lambda: make_step(32, 32, 0.0, 1.0),
    "square": make_square,
    "circle": make_circle,
}
