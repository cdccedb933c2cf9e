# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Error types raised by the cannyedge stages.

All errors are precondition violations detected synchronously; no stage
produces partial output when one is raised.
"""


class CannyEdgeError(Exception):
    """Base class for every error raised by the library."""


class ShapeMismatch(CannyEdgeError, ValueError):
    """Array, kernel or channel-count incompatibility."""


class IndexOutOfBounds(CannyEdgeError, IndexError):
    """Direct element access outside the array extents."""


class KernelTooLarge(CannyEdgeError, ValueError):
    """Border reflection cannot resolve an index after mirroring about both boundaries."""


class InvalidThreshold(CannyEdgeError, ValueError):
    """Hysteresis thresholds violate 0 <= low < high."""


class NonFiniteSample(CannyEdgeError, ValueError):
    """Input contains NaN or infinite samples."""
