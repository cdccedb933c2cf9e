# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Double-threshold hysteresis linking.

Pixels at or above ``high`` are strong edges. Pixels in [low, high) are
weak and become edges only when 8-connected, directly or through other
weak pixels, to a strong pixel. Linking is a breadth-first traversal
over an explicit frontier queue seeded with the strong pixels in raster
order; a visited bitmap guarantees each pixel is enqueued at most once.
"""

import logging
import math
from collections import deque

import numpy as np

from .array import Dense2DArray, EdgeMap, require_single_channel
from .errors import InvalidThreshold

logger = logging.getLogger(__name__)

SUPPRESSED = 0
WEAK = 1
STRONG = 2

_NEIGHBOURS_8 = ((-1, -1), (-1, 0), (-1, 1),
                 (0, -1), (0, 1),
                 (1, -1), (1, 0), (1, 1))


def check_thresholds(low: float, high: float) -> None:
    """Raise InvalidThreshold unless 0 <= low < high (both finite)."""
    if not (math.isfinite(low) and math.isfinite(high)):
        raise InvalidThreshold(f"thresholds must be finite, got low={low}, high={high}")
    if low < 0:
        raise InvalidThreshold(f"low threshold must be >= 0, got {low}")
    if low >= high:
        raise InvalidThreshold(f"low threshold {low} must be below high threshold {high}")


def classify(thinned: Dense2DArray, low: float, high: float) -> np.ndarray:
    """Label every pixel STRONG, WEAK or SUPPRESSED.

    Zero magnitudes are always SUPPRESSED, so pixels removed by
    non-maximum suppression never bridge components when ``low`` is 0.

    Returns:
        2D int8 array of labels.
    """
    require_single_channel(thinned, "hysteresis")
    check_thresholds(low, high)
    mag = thinned.plane()
    labels = np.full(mag.shape, SUPPRESSED, dtype=np.int8)
    labels[(mag >= low) & (mag > 0)] = WEAK
    labels[mag >= high] = STRONG
    return labels


def hysteresis(thinned: Dense2DArray, low: float, high: float) -> EdgeMap:
    """Link weak responses to strong ones and binarise.

    Samples with magnitude 0 are never edges, even when ``low`` is 0.

    Args:
        thinned: Single-channel magnitude map, usually the output of
            :func:`cannyedge.suppression.suppress`.
        low: Absolute lower threshold.
        high: Absolute upper threshold.

    Returns:
        EdgeMap with 1.0 on edge pixels and 0.0 elsewhere.

    Raises:
        InvalidThreshold: Unless 0 <= low < high.
        ShapeMismatch: If ``thinned`` has more than one channel.
    """
    labels = classify(thinned, low, high)
    rows, cols = labels.shape
    visited = np.zeros((rows, cols), dtype=bool)
    frontier = deque()

    for r, c in zip(*np.nonzero(labels == STRONG)):
        visited[r, c] = True
        frontier.append((int(r), int(c)))
    seeds = len(frontier)

    while frontier:
        r, c = frontier.popleft()
        for dr, dc in _NEIGHBOURS_8:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and not visited[nr, nc] \
                    and labels[nr, nc] != SUPPRESSED:
                visited[nr, nc] = True
                frontier.append((nr, nc))

    logger.debug("hysteresis low=%.6g high=%.6g: %d strong seeds, %d edge pixels",
                 low, high, seeds, int(visited.sum()))
    return Dense2DArray(visited.astype(np.float64)[:, :, np.newaxis])
