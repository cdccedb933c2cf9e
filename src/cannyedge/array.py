# -*- coding: utf-8 -*-
# Copyright (c) 2024-2026 Vasile Lucian Borbeleac / FRAGMERGENT TECHNOLOGY S.R.L.
# Cluj-Napoca, Romania

"""Dense 2D sample array shared by every pipeline stage.

Samples live in a contiguous float64 buffer laid out row-major as
(rows, cols, channels). The value range is not enforced: callers
normalise to [0, 1] or [0, 255] by convention.
"""

from typing import Sequence, Tuple, Union

import numpy as np

from .errors import IndexOutOfBounds, ShapeMismatch


def _check_dims(rows: int, cols: int, channels: int) -> Tuple[int, int, int]:
    dims = (int(rows), int(cols), int(channels))
    if min(dims) < 1:
        raise ShapeMismatch(f"dimensions must be >= 1, got {dims}")
    return dims


class Dense2DArray:
    """Owned rows x cols x channels buffer of floating-point samples.

    The constructor always copies ``data``; mutating the source afterwards
    never reaches the array.
    """

    __slots__ = ("_data",)

    def __init__(self, data: np.ndarray):
        if data.ndim != 3:
            raise ShapeMismatch(f"expected (rows, cols, channels) data, got ndim={data.ndim}")
        _check_dims(*data.shape)
        self._data = np.array(data, dtype=np.float64, order="C")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def filled(cls, rows: int, cols: int, channels: int = 1,
               value: float = 0.0) -> "Dense2DArray":
        """Create an array of the given dimensions with every sample = value."""
        dims = _check_dims(rows, cols, channels)
        return cls(np.full(dims, value, dtype=np.float64))

    @classmethod
    def from_buffer(cls, buffer: Union[Sequence[float], np.ndarray],
                    rows: int, cols: int, channels: int = 1) -> "Dense2DArray":
        """Create an array from a flat row-major buffer.

        Args:
            buffer: Flat samples, channel index varying fastest.
            rows: Number of rows.
            cols: Number of columns.
            channels: Samples per pixel.

        Returns:
            A new array owning a copy of the buffer.

        Raises:
            ShapeMismatch: If len(buffer) != rows * cols * channels.
        """
        dims = _check_dims(rows, cols, channels)
        flat = np.array(buffer, dtype=np.float64).reshape(-1)
        expected = dims[0] * dims[1] * dims[2]
        if flat.size != expected:
            raise ShapeMismatch(
                f"buffer has {flat.size} samples, {rows}x{cols}x{channels} needs {expected}")
        return cls(flat.reshape(dims))

    @classmethod
    def from_numpy(cls, arr: np.ndarray) -> "Dense2DArray":
        """Wrap a copy of a 2D (gray) or 3D (channels-last) numpy array."""
        arr = np.asarray(arr, dtype=np.float64)
        if arr.ndim == 2:
            arr = arr[:, :, np.newaxis]
        elif arr.ndim != 3:
            raise ShapeMismatch(f"expected a 2D or 3D array, got ndim={arr.ndim}")
        return cls(arr)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def channels(self) -> int:
        return self._data.shape[2]

    @property
    def shape(self) -> Tuple[int, int, int]:
        return self._data.shape

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _check_index(self, row: int, col: int, channel: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols
                and 0 <= channel < self.channels):
            raise IndexOutOfBounds(
                f"index ({row}, {col}, {channel}) outside {self.rows}x{self.cols}x{self.channels}")

    def get(self, row: int, col: int, channel: int = 0) -> float:
        self._check_index(row, col, channel)
        return float(self._data[row, col, channel])

    def set(self, row: int, col: int, value: float, channel: int = 0) -> None:
        self._check_index(row, col, channel)
        self._data[row, col, channel] = value

    # ------------------------------------------------------------------
    # Bulk views
    # ------------------------------------------------------------------

    @property
    def buffer(self) -> np.ndarray:
        """Flat writable view of the raw row-major samples."""
        return self._data.reshape(-1)

    @property
    def data(self) -> np.ndarray:
        """(rows, cols, channels) view of the samples."""
        return self._data

    def plane(self, channel: int = 0) -> np.ndarray:
        """2D view of a single channel."""
        if not 0 <= channel < self.channels:
            raise IndexOutOfBounds(f"channel {channel} outside [0, {self.channels})")
        return self._data[:, :, channel]

    def to_numpy(self) -> np.ndarray:
        """Copy of the samples; 2D when the array has a single channel."""
        if self.channels == 1:
            return self._data[:, :, 0].copy()
        return self._data.copy()

    def copy(self) -> "Dense2DArray":
        return Dense2DArray(self._data)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Dense2DArray):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self) -> str:
        return f"Dense2DArray(rows={self.rows}, cols={self.cols}, channels={self.channels})"


#: Binary classification map (values 0.0 / 1.0) produced by hysteresis.
EdgeMap = Dense2DArray


def as_array(value: Union[Dense2DArray, np.ndarray, Sequence]) -> Dense2DArray:
    """Accept a Dense2DArray or anything numpy can turn into a 2D/3D array."""
    if isinstance(value, Dense2DArray):
        return value
    return Dense2DArray.from_numpy(np.asarray(value, dtype=np.float64))


def require_single_channel(array: Dense2DArray, stage: str) -> None:
    if array.channels != 1:
        raise ShapeMismatch(f"{stage} expects a single-channel array, got {array.channels} channels")
