# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""RGB to grayscale conversion."""

import numpy as np

from .array import Dense2DArray
from .errors import ShapeMismatch

#: Luminance weights for the red, green and blue channels.
RGB_WEIGHTS = (0.299, 0.587, 0.114)


def to_gray(array: Dense2DArray) -> Dense2DArray:
    """Reduce a 3-channel RGB array to one luminance channel.

    Args:
        array: Array with exactly 3 channels in R, G, B order.

    Returns:
        Single-channel array, ``0.299 R + 0.587 G + 0.114 B`` per pixel.

    Raises:
        ShapeMismatch: If the input does not have 3 channels.
    """
    if array.channels != 3:
        raise ShapeMismatch(f"to_gray expects 3 channels, got {array.channels}")
    wr, wg, wb = RGB_WEIGHTS
    rgb = array.data
    gray = rgb[:, :, 0] * wr + rgb[:, :, 1] * wg + rgb[:, :, 2] * wb
    return Dense2DArray(gray[:, :, np.newaxis])
