# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Shared helpers: logger factory, array comparison, 8-bit quantisation."""

import logging

import numpy as np

from .array import Dense2DArray
from .errors import ShapeMismatch

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def setup_logger(name: str = "cannyedge", level: int = logging.INFO) -> logging.Logger:
    """Return a logger with a single stream handler attached."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def max_diff(a: Dense2DArray, b: Dense2DArray) -> float:
    """Maximum absolute sample difference between two same-shape arrays."""
    if a.shape != b.shape:
        raise ShapeMismatch(f"cannot compare shapes {a.shape} and {b.shape}")
    return float(np.max(np.abs(a.data - b.data)))


def to_uint8(array: Dense2DArray) -> np.ndarray:
    """Quantise [0, 1] samples to 0..255 (round half up, clipped).

    Returns:
        uint8 ndarray, 2D for single-channel input.
    """
    q = np.floor(array.to_numpy() * 255.0 + 0.5)
    return np.clip(q, 0, 255).astype(np.uint8)
