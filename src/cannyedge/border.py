# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Border policies for sample access outside the array extents.

Supported policies, shown for a row ``abcdefgh``:

* ZERO:      ``0000|abcdefgh|0000``
* REPLICATE: ``aaaa|abcdefgh|hhhh``
* REFLECT:   ``dcba|abcdefgh|hgfe``  (edge sample repeated)

REFLECT mirrors a second time about the opposite boundary when one
reflection is not enough (kernel radius larger than a short axis).

Policies are applied independently to the row and column axes.
"""

import enum
from typing import Optional, Tuple

import numpy as np

from .errors import KernelTooLarge


class BorderType(enum.Enum):
    ZERO = "zero"
    REPLICATE = "replicate"
    REFLECT = "reflect"


def _mirror(index: int, extent: int) -> int:
    return -index - 1 if index < 0 else 2 * extent - index - 1


def resolve_index(index: int, extent: int, border: BorderType) -> Optional[int]:
    """Resolve a possibly out-of-range index along one axis.

    Args:
        index: Requested index (may be negative or >= extent).
        extent: Valid length of the axis.
        border: Border policy.

    Returns:
        The in-bounds source index, or None when the sample is zero-filled.

    Raises:
        KernelTooLarge: REFLECT would land outside the axis after mirroring
            about both boundaries.
    """
    if 0 <= index < extent:
        return index
    if border is BorderType.ZERO:
        return None
    if border is BorderType.REPLICATE:
        return 0 if index < 0 else extent - 1
    if border is BorderType.REFLECT:
        # -1 -> 0, -2 -> 1, extent -> extent-1, extent+1 -> extent-2
        reflected = _mirror(index, extent)
        if not 0 <= reflected < extent:
            reflected = _mirror(reflected, extent)
        if not 0 <= reflected < extent:
            raise KernelTooLarge(
                f"index {index} reflects past an axis of length {extent} twice; "
                f"keep the kernel radius below {2 * extent + 1}")
        return reflected
    raise TypeError(f"unknown border type: {border!r}")


def axis_lookup(extent: int, radius: int,
                border: BorderType) -> Tuple[np.ndarray, np.ndarray]:
    """Resolve every index in [-radius, extent + radius) once.

    Returns:
        (indices, valid): source index per padded position, and a boolean
        mask that is False where the sample is zero-filled (the index
        there is a placeholder 0).
    """
    size = extent + 2 * radius
    indices = np.zeros(size, dtype=np.intp)
    valid = np.ones(size, dtype=bool)
    for pos in range(size):
        src = resolve_index(pos - radius, extent, border)
        if src is None:
            valid[pos] = False
        else:
            indices[pos] = src
    return indices, valid


def pad(data: np.ndarray, row_radius: int, col_radius: int,
        border: BorderType) -> np.ndarray:
    """Pad a (rows, cols, channels) block according to the border policy."""
    rows, cols = data.shape[:2]
    r_idx, r_ok = axis_lookup(rows, row_radius, border)
    c_idx, c_ok = axis_lookup(cols, col_radius, border)
    padded = data[np.ix_(r_idx, c_idx)]
    if border is BorderType.ZERO:
        padded[~(r_ok[:, None] & c_ok[None, :])] = 0.0
    return padded
