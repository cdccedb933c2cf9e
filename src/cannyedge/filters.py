# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Standard kernels and the linear filters built on the convolution engine.

Kernels are defined for correlation (see :mod:`cannyedge.convolution`):
``SOBEL_X`` responds positively to intensity increasing left to right,
``SOBEL_Y`` to intensity increasing top to bottom.
"""

from typing import Union

import numpy as np

from .array import Dense2DArray
from .border import BorderType
from .convolution import convolve, make_kernel

SOBEL_X = make_kernel([[-1.0, 0.0, 1.0],
                       [-2.0, 0.0, 2.0],
                       [-1.0, 0.0, 1.0]])

SOBEL_Y = make_kernel([[-1.0, -2.0, -1.0],
                       [0.0, 0.0, 0.0],
                       [1.0, 2.0, 1.0]])

#: Fixed 5x5 smoothing kernel applied before the Canny gradient stage.
GAUSSIAN_5X5 = make_kernel(np.array([[2.0, 4.0, 5.0, 4.0, 2.0],
                                     [4.0, 9.0, 12.0, 9.0, 4.0],
                                     [5.0, 12.0, 15.0, 12.0, 5.0],
                                     [4.0, 9.0, 12.0, 9.0, 4.0],
                                     [2.0, 4.0, 5.0, 4.0, 2.0]]) / 159.0)


def _check_ksize(ksize: int) -> int:
    ksize = int(ksize)
    if ksize < 1 or ksize % 2 == 0:
        raise ValueError(f"ksize must be a positive odd integer, got {ksize}")
    return ksize


def gaussian_kernel(ksize: int, sigma: float = 1.0) -> Dense2DArray:
    """Square Gaussian kernel normalised to unit sum.

    Args:
        ksize: Kernel side length (odd).
        sigma: Standard deviation in pixels.

    Returns:
        Read-only single-channel kernel.
    """
    ksize = _check_ksize(ksize)
    if sigma <= 0:
        raise ValueError(f"sigma must be positive, got {sigma}")
    ax = np.arange(ksize, dtype=np.float64) - ksize // 2
    x, y = np.meshgrid(ax, ax)
    g = np.exp(-(x * x + y * y) / (2.0 * sigma * sigma))
    return make_kernel(g / g.sum())


def mean_kernel(ksize: int) -> Dense2DArray:
    """Box kernel of side ``ksize`` with every weight 1 / ksize**2."""
    ksize = _check_ksize(ksize)
    return make_kernel(np.full((ksize, ksize), 1.0 / (ksize * ksize)))


def gaussian_smooth(array: Dense2DArray, ksize: int,
                    border: BorderType = BorderType.REFLECT,
                    sigma: float = 1.0) -> Dense2DArray:
    """Smooth every channel with a ``ksize`` Gaussian kernel."""
    return convolve(array, gaussian_kernel(ksize, sigma), border)


def mean_smooth(array: Dense2DArray, ksize: int,
                border: BorderType = BorderType.REFLECT) -> Dense2DArray:
    """Smooth every channel with a ``ksize`` box kernel."""
    return convolve(array, mean_kernel(ksize), border)


def sobel(array: Dense2DArray, dx: int, dy: int,
          border: BorderType = BorderType.REFLECT) -> Dense2DArray:
    """First-order 3x3 Sobel derivative along x (columns) or y (rows).

    Exactly one of ``dx`` / ``dy`` must be 1.
    """
    if (dx, dy) == (1, 0):
        return convolve(array, SOBEL_X, border)
    if (dx, dy) == (0, 1):
        return convolve(array, SOBEL_Y, border)
    raise ValueError(f"only (dx, dy) in {{(1, 0), (0, 1)}} is supported, got ({dx}, {dy})")


def sobel_norm(array: Dense2DArray, norm: Union[int, str] = 2,
               border: BorderType = BorderType.REFLECT) -> Dense2DArray:
    """Norm of the Sobel gradient.

    Args:
        array: Source samples.
        norm: 1 (|gx| + |gy|), 2 (Euclidean) or "inf" / -1 (max(|gx|, |gy|)).
        border: Border policy for both derivatives.

    Returns:
        Gradient norm, same shape as ``array``.
    """
    if norm not in (1, 2, -1, "inf"):
        raise ValueError(f"unsupported norm: {norm!r}")
    gx = sobel(array, 1, 0, border).data
    gy = sobel(array, 0, 1, border).data
    if norm == 2:
        out = np.sqrt(gx * gx + gy * gy)
    elif norm == 1:
        out = np.abs(gx) + np.abs(gy)
    else:
        out = np.maximum(np.abs(gx), np.abs(gy))
    return Dense2DArray(out)
