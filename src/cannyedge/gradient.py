# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Gradient stage: Sobel derivatives, magnitude and orientation."""

import logging
from dataclasses import dataclass

import numpy as np

from .array import Dense2DArray, require_single_channel
from .border import BorderType
from .convolution import convolve
from .errors import ShapeMismatch
from .filters import SOBEL_X, SOBEL_Y

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GradientField:
    """Gradient magnitude and direction computed from one source array.

    ``direction`` is atan2(gy, gx) in radians within (-pi, pi], where gx
    grows left to right and gy grows top to bottom. It is only
    meaningful where ``magnitude`` > 0.
    """

    magnitude: Dense2DArray
    direction: Dense2DArray

    def __post_init__(self):
        if self.magnitude.shape != self.direction.shape:
            raise ShapeMismatch(
                f"magnitude {self.magnitude.shape} and direction "
                f"{self.direction.shape} differ in shape")
        require_single_channel(self.magnitude, "GradientField")

    @property
    def shape(self):
        return self.magnitude.shape


def gradient(array: Dense2DArray,
             border: BorderType = BorderType.REFLECT) -> GradientField:
    """Compute the Sobel gradient field of a single-channel array.

    Args:
        array: Single-channel source.
        border: Border policy for both derivative convolutions.

    Returns:
        GradientField with magnitude sqrt(gx^2 + gy^2) and direction
        atan2(gy, gx).

    Raises:
        ShapeMismatch: If the array has more than one channel.
    """
    require_single_channel(array, "gradient")
    gx = convolve(array, SOBEL_X, border).data
    gy = convolve(array, SOBEL_Y, border).data

    magnitude = np.sqrt(gx * gx + gy * gy)
    direction = np.arctan2(gy, gx)
    # atan2 returns -pi for (-0.0, negative); fold onto the closed end
    direction[direction == -np.pi] = np.pi

    logger.debug("gradient of %s: max magnitude %.6g", array, float(magnitude.max()))
    return GradientField(Dense2DArray(magnitude), Dense2DArray(direction))
