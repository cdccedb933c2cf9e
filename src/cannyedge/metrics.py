# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Edge-map evaluation against a reference.

Matching is symmetric and tolerant: a predicted edge counts as a true
positive when a reference edge lies within ``tol_px`` (Euclidean), and a
reference edge is missed when no predicted edge lies within ``tol_px``.
A one-pixel offset between detectors that pick different sides of a
step therefore does not count as an error.
"""

from typing import Union

import numpy as np
from scipy.ndimage import distance_transform_edt

from .array import Dense2DArray, require_single_channel

EdgeLike = Union[Dense2DArray, np.ndarray]


def _as_mask(edges: EdgeLike) -> np.ndarray:
    if isinstance(edges, Dense2DArray):
        require_single_channel(edges, "edge metrics")
        return edges.plane() != 0
    return np.asarray(edges) != 0


def edge_metrics_symmetric(pred: EdgeLike, gt: EdgeLike, tol_px: float = 2) -> dict:
    """Precision, recall and F1 of a predicted edge map.

    Args:
        pred: Predicted edges (EdgeMap or array, non-zero = edge).
        gt: Reference edges of the same shape.
        tol_px: Matching tolerance in pixels.

    Returns:
        Dictionary with keys 'p', 'r', 'f1', 'TP', 'FP', 'FN'.
    """
    pred = _as_mask(pred)
    gt = _as_mask(gt)
    if pred.shape != gt.shape:
        raise ValueError(f"shape mismatch: {pred.shape} vs {gt.shape}")

    ps = int(pred.sum())
    gs = int(gt.sum())
    if ps == 0 and gs == 0:
        return {"p": 1.0, "r": 1.0, "f1": 1.0, "TP": 0, "FP": 0, "FN": 0}
    if ps == 0:
        return {"p": 0.0, "r": 0.0, "f1": 0.0, "TP": 0, "FP": 0, "FN": gs}
    if gs == 0:
        return {"p": 0.0, "r": 0.0, "f1": 0.0, "TP": 0, "FP": ps, "FN": 0}

    dist_to_gt = distance_transform_edt(~gt)
    dist_to_pred = distance_transform_edt(~pred)

    tp = int((pred & (dist_to_gt <= tol_px)).sum())
    fp = ps - tp
    fn = int((gt & (dist_to_pred > tol_px)).sum())

    p = tp / (tp + fp)
    r = (gs - fn) / gs
    f1 = 2 * p * r / (p + r) if p + r > 0 else 0.0
    return {"p": p, "r": r, "f1": f1, "TP": tp, "FP": fp, "FN": fn}


def gt_edges_from_binary(img: Dense2DArray, threshold: float = 0.5) -> np.ndarray:
    """Reference boundary of a binary image.

    A pixel is a boundary pixel when it lies on the bright side
    (>= threshold) and one of its 4-neighbours lies on the dark side.

    Returns:
        Boolean 2D array.
    """
    require_single_channel(img, "gt_edges_from_binary")
    fg = img.plane() >= threshold
    edges = np.zeros_like(fg)
    edges[:, 1:] |= fg[:, 1:] & ~fg[:, :-1]
    edges[:, :-1] |= fg[:, :-1] & ~fg[:, 1:]
    edges[1:, :] |= fg[1:, :] & ~fg[:-1, :]
    edges[:-1, :] |= fg[:-1, :] & ~fg[1:, :]
    return edges
