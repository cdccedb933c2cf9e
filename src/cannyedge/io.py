# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Image file boundary backed by OpenCV.

Decoding and encoding stay outside the core: these helpers only turn
files into [0, 1] Dense2DArrays and back.
"""

from pathlib import Path
from typing import Union

import cv2
import numpy as np

from .array import Dense2DArray
from .utils import to_uint8


def read_image(path: Union[str, Path], gray: bool = False) -> Dense2DArray:
    """Load an image file as RGB (or gray) samples normalised to [0, 1]."""
    flag = cv2.IMREAD_GRAYSCALE if gray else cv2.IMREAD_COLOR
    img = cv2.imread(str(path), flag)
    if img is None:
        raise FileNotFoundError(f"Could not load image: {path}")
    if not gray:
        img = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
    return Dense2DArray.from_numpy(img.astype(np.float64) / 255.0)


def write_image(array: Dense2DArray, path: Union[str, Path]) -> None:
    """Encode a [0, 1] array (1 or 3 channels) to an image file.

    EdgeMaps come out as 0 / 255.

    Raises:
        OSError: If OpenCV has no encoder for the extension or the write fails.
    """
    try:
        writable = cv2.haveImageWriter(str(path))
    except cv2.error as exc:
        raise OSError(f"No image encoder for: {path}") from exc
    if not writable:
        raise OSError(f"No image encoder for: {path}")
    img = to_uint8(array)
    if array.channels == 3:
        img = cv2.cvtColor(img, cv2.COLOR_RGB2BGR)
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    try:
        ok = cv2.imwrite(str(path), img)
    except cv2.error as exc:
        raise OSError(f"Could not write image: {path}") from exc
    if not ok:
        raise OSError(f"Could not write image: {path}")
