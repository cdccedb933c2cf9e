# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""2D convolution engine with explicit border handling.

The engine performs correlation: the kernel is applied in its given
orientation, anchored at its centre, without flipping. Callers who need
true convolution flip the kernel first (``kernel[::-1, ::-1]``). Gaussian
kernels are symmetric and unaffected; the Sobel kernels in
:mod:`cannyedge.filters` are defined for correlation.
"""

import logging
from typing import Sequence, Union

import numpy as np

from .array import Dense2DArray, as_array
from .border import BorderType, pad
from .errors import ShapeMismatch

logger = logging.getLogger(__name__)


def make_kernel(weights: Union[Dense2DArray, np.ndarray, Sequence]) -> Dense2DArray:
    """Validate convolution weights and freeze them as a kernel.

    Raises:
        ShapeMismatch: If the kernel has several channels or an even dimension.
    """
    kernel = as_array(weights)
    if kernel.channels != 1:
        raise ShapeMismatch(f"kernel must be single-channel, got {kernel.channels} channels")
    if kernel.rows % 2 == 0 or kernel.cols % 2 == 0:
        raise ShapeMismatch(
            f"kernel dimensions must be odd, got {kernel.rows}x{kernel.cols}")
    if isinstance(weights, Dense2DArray):
        kernel = kernel.copy()
    kernel.data.setflags(write=False)
    return kernel


def convolve(array: Dense2DArray,
             kernel: Union[Dense2DArray, np.ndarray, Sequence],
             border: BorderType = BorderType.REFLECT) -> Dense2DArray:
    """Correlate every channel of an array with a 2D kernel.

    Args:
        array: Source samples (any channel count).
        kernel: Odd-sized single-channel weights.
        border: Policy for samples outside the array.

    Returns:
        New array with the same shape as ``array``.

    Raises:
        ShapeMismatch: If the kernel has an even dimension.
        KernelTooLarge: If REFLECT cannot resolve the kernel footprint.
    """
    kernel = make_kernel(kernel)
    weights = kernel.plane()
    kr, kc = kernel.rows // 2, kernel.cols // 2

    padded = pad(array.data, kr, kc, border)
    rows, cols = array.rows, array.cols

    out = np.zeros(array.shape, dtype=np.float64)
    # Fixed order: taps summed within a kernel row, then rows summed top
    # to bottom. Mirrored kernel rows then cancel exactly on flat input.
    for ki in range(kernel.rows):
        row_acc = np.zeros(array.shape, dtype=np.float64)
        for kj in range(kernel.cols):
            row_acc += weights[ki, kj] * padded[ki:ki + rows, kj:kj + cols]
        out += row_acc

    logger.debug("convolve %s with %dx%d kernel (%s)",
                 array, kernel.rows, kernel.cols, border.value)
    return Dense2DArray(out)
