# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Non-maximum suppression of gradient-magnitude ridges.

Uses exact-axis lookup: the gradient direction is quantised to the
nearest of 0, 45, 90 and 135 degrees (modulo 180) and each pixel is
compared with the two discrete neighbours on that axis, without
interpolation. A pixel survives when it is strictly greater than the
neighbour earlier in raster order and at least equal to the later one,
so a two-pixel plateau across the ridge keeps exactly one pixel.
"""

import logging

import numpy as np

from .array import Dense2DArray
from .gradient import GradientField

logger = logging.getLogger(__name__)

# (behind, ahead) neighbour offsets per quantised axis; "behind" comes
# first in raster order.
AXIS_NEIGHBOURS = (
    ((0, -1), (0, 1)),     # 0 deg: gradient along the row
    ((-1, -1), (1, 1)),    # 45 deg: down-right
    ((-1, 0), (1, 0)),     # 90 deg: gradient along the column
    ((-1, 1), (1, -1)),    # 135 deg: down-left
)


def quantize_direction(direction: np.ndarray) -> np.ndarray:
    """Map directions in radians to axis bins 0..3 (0, 45, 90, 135 degrees)."""
    folded = np.mod(direction, np.pi)
    return (np.floor(folded / (np.pi / 4.0) + 0.5).astype(np.intp)) % 4


def suppress(field: GradientField) -> Dense2DArray:
    """Thin gradient-magnitude ridges to one pixel.

    Args:
        field: Gradient magnitude and direction.

    Returns:
        Array of the same shape holding the surviving magnitudes and 0
        elsewhere. The outermost rows and columns are always 0.
    """
    mag = field.magnitude.plane()
    rows, cols = mag.shape
    out = np.zeros((rows, cols, 1), dtype=np.float64)
    if rows < 3 or cols < 3:
        return Dense2DArray(out)

    centre = mag[1:-1, 1:-1]
    bins = quantize_direction(field.direction.plane()[1:-1, 1:-1])

    def neighbour(dr: int, dc: int) -> np.ndarray:
        return mag[1 + dr:rows - 1 + dr, 1 + dc:cols - 1 + dc]

    keep = np.zeros(centre.shape, dtype=bool)
    for axis, (behind, ahead) in enumerate(AXIS_NEIGHBOURS):
        on_axis = bins == axis
        keep |= on_axis & (centre > neighbour(*behind)) & (centre >= neighbour(*ahead))

    out[1:-1, 1:-1, 0] = np.where(keep, centre, 0.0)
    logger.debug("suppress: %d of %d interior pixels kept", int(keep.sum()), keep.size)
    return Dense2DArray(out)
