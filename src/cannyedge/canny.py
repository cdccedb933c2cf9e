# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Composed Canny edge detector.

Pipeline:
    1. RGB -> gray (3-channel input only)
    2. Optional 5x5 Gaussian smoothing
    3. Sobel gradient magnitude and direction
    4. Non-maximum suppression
    5. Hysteresis with thresholds = ratio x max gradient magnitude

Stage errors propagate unchanged.
"""

import logging
from dataclasses import dataclass

import numpy as np

from .array import Dense2DArray, EdgeMap
from .border import BorderType
from .color import to_gray
from .convolution import convolve
from .errors import NonFiniteSample, ShapeMismatch
from .filters import GAUSSIAN_5X5
from .gradient import GradientField, gradient
from .hysteresis import check_thresholds, hysteresis
from .suppression import suppress

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CannyStages:
    """Every intermediate artifact of one Canny run."""

    gray: Dense2DArray
    smoothed: Dense2DArray
    field: GradientField
    thinned: Dense2DArray
    low: float
    high: float
    edges: EdgeMap


def _prepare(image: Dense2DArray) -> Dense2DArray:
    if not np.isfinite(image.buffer).all():
        raise NonFiniteSample(f"canny_edge input {image} contains NaN or infinite samples")
    if image.channels == 3:
        return to_gray(image)
    if image.channels == 1:
        return image.copy()
    raise ShapeMismatch(
        f"canny_edge expects a 1- or 3-channel image, got {image.channels} channels")


def canny_stages(image: Dense2DArray,
                 high_threshold_ratio: float,
                 low_threshold_ratio: float,
                 border: BorderType = BorderType.REFLECT,
                 smooth: bool = True) -> CannyStages:
    """Run the Canny pipeline and keep every intermediate result.

    Args:
        image: 1-channel gray or 3-channel RGB samples.
        high_threshold_ratio: Strong-edge threshold as a fraction of the
            maximum gradient magnitude.
        low_threshold_ratio: Weak-edge threshold as a fraction of the
            maximum gradient magnitude.
        border: Border policy for smoothing and gradient convolutions.
        smooth: Apply the 5x5 Gaussian before differentiating.

    Returns:
        CannyStages with the gray, smoothed, gradient, thinned and edge
        arrays plus the absolute thresholds used.

    Raises:
        InvalidThreshold: Unless 0 <= low ratio < high ratio.
        ShapeMismatch: For channel counts other than 1 or 3.
        NonFiniteSample: If the image holds NaN or infinite samples.
    """
    check_thresholds(low_threshold_ratio, high_threshold_ratio)

    gray = _prepare(image)
    smoothed = convolve(gray, GAUSSIAN_5X5, border) if smooth else gray
    field = gradient(smoothed, border)
    thinned = suppress(field)

    peak = float(field.magnitude.buffer.max())
    high = high_threshold_ratio * peak
    low = low_threshold_ratio * peak
    if peak > 0.0:
        edges = hysteresis(thinned, low, high)
    else:
        # flat image: nothing to link and the thresholds collapse to 0
        edges = Dense2DArray.filled(gray.rows, gray.cols)

    logger.debug("canny %s: peak=%.6g low=%.6g high=%.6g edges=%d",
                 image, peak, low, high, int(np.count_nonzero(edges.buffer)))
    return CannyStages(gray, smoothed, field, thinned, low, high, edges)


def canny_edge(image: Dense2DArray,
               high_threshold_ratio: float,
               low_threshold_ratio: float,
               border: BorderType = BorderType.REFLECT,
               smooth: bool = True) -> EdgeMap:
    """Detect edges and return a binary EdgeMap (1.0 edge, 0.0 background).

    See :func:`canny_stages` for the parameters.
    """
    return canny_stages(image, high_threshold_ratio, low_threshold_ratio,
                        border, smooth).edges


def edge_ratio(edges: EdgeMap) -> float:
    """Fraction of pixels marked as edges."""
    return float(np.count_nonzero(edges.buffer)) / edges.buffer.size
