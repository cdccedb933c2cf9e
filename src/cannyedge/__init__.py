# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""cannyedge: Canny edge detection on dense 2D arrays.

Grayscale conversion, border-aware correlation, Sobel gradients,
non-maximum suppression and hysteresis linking, each a pure function
from a Dense2DArray to a freshly allocated Dense2DArray.
"""

from .array import Dense2DArray, EdgeMap
from .border import BorderType, resolve_index
from .canny import CannyStages, canny_edge, canny_stages
from .color import to_gray
from .convolution import convolve
from .errors import (CannyEdgeError, IndexOutOfBounds, InvalidThreshold,
                     KernelTooLarge, NonFiniteSample, ShapeMismatch)
from .gradient import GradientField, gradient
from .hysteresis import hysteresis
from .suppression import suppress

__version__ = "0.1.0"
__author__ = "Vasile Lucian Borbeleac"
__copyright__ = "© 2024-2026 FRAGMERGENT TECHNOLOGY S.R.L."

__all__ = [
    "BorderType",
    "CannyEdgeError",
    "CannyStages",
    "Dense2DArray",
    "EdgeMap",
    "GradientField",
    "IndexOutOfBounds",
    "InvalidThreshold",
    "KernelTooLarge",
    "NonFiniteSample",
    "ShapeMismatch",
    "canny_edge",
    "canny_stages",
    "convolve",
    "gradient",
    "hysteresis",
    "resolve_index",
    "suppress",
    "to_gray",
]
