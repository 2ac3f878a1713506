from __future__ import annotations

from typing import Any, Optional, Tuple

import numpy as np

from coherentnoise.core.constants import RASTER_MAX_HEIGHT, RASTER_MAX_WIDTH
from coherentnoise.core.exceptions import InvalidParameterError, NoiseOutOfMemoryError

from .color import Color


class RasterBuffer:
    """
    Row-major 2D buffer backed by a flat numpy array.

    Capacity (``mem_used`` cells) is tracked separately from the logical
    ``width x height`` so shrinking never reallocates. Reads outside the
    logical bounds return ``border_value``; writes outside are ignored.
    Cell contents are unspecified after a resize.
    """

    dtype: Any = np.float32
    cell_shape: Tuple[int, ...] = ()

    def __init__(self, width: int = 0, height: int = 0):
        self.border_value = self._default_border_value()
        self._reset()
        if width or height:
            self.set_size(width, height)

    # -------------------------
    # Cell conversion hooks
    # -------------------------

    def _default_border_value(self):
        raise NotImplementedError

    def _to_cell(self, raw):
        raise NotImplementedError

    def _from_cell(self, value):
        raise NotImplementedError

    # -------------------------
    # Storage management
    # -------------------------

    def _reset(self) -> None:
        self._storage: Optional[np.ndarray] = None
        self._width = 0
        self._height = 0
        self._mem_used = 0

    def _allocate(self, cell_count: int) -> np.ndarray:
        try:
            return np.zeros((cell_count,) + self.cell_shape, dtype=self.dtype)
        except MemoryError as exc:
            raise NoiseOutOfMemoryError(
                f"Unable to allocate {cell_count} cells for {type(self).__name__}"
            ) from exc

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def mem_used(self) -> int:
        return self._mem_used

    def set_size(self, width: int, height: int) -> None:
        width = int(width)
        height = int(height)
        if width < 0 or height < 0 or width > RASTER_MAX_WIDTH or height > RASTER_MAX_HEIGHT:
            raise InvalidParameterError(
                f"Raster size must be within 0..{RASTER_MAX_WIDTH} x 0..{RASTER_MAX_HEIGHT}, "
                f"got {width}x{height}"
            )
        if width == 0 or height == 0:
            self._reset()
            return

        needed = width * height
        if self._mem_used < needed:
            # Allocate before releasing so a failure leaves the buffer intact.
            self._storage = self._allocate(needed)
            self._mem_used = needed
        self._width = width
        self._height = height

    def reclaim_mem(self) -> None:
        needed = self._width * self._height
        if self._mem_used > needed:
            storage = self._allocate(needed)
            storage[...] = self._storage[:needed]
            self._storage = storage
            self._mem_used = needed

    def as_array(self) -> np.ndarray:
        """Row-major ``height x width`` view of the logical cells."""
        if self._storage is None:
            return np.zeros((0, 0) + self.cell_shape, dtype=self.dtype)
        count = self._width * self._height
        return self._storage[:count].reshape((self._height, self._width) + self.cell_shape)

    # -------------------------
    # Cell access
    # -------------------------

    def _in_bounds(self, x: int, y: int) -> bool:
        return self._storage is not None and 0 <= x < self._width and 0 <= y < self._height

    def get_value(self, x: int, y: int):
        if self._in_bounds(x, y):
            return self._to_cell(self._storage[y * self._width + x])
        return self.border_value

    def set_value(self, x: int, y: int, value) -> None:
        if self._in_bounds(x, y):
            self._storage[y * self._width + x] = self._from_cell(value)

    def clear(self, value) -> None:
        if self._storage is not None:
            self.as_array()[...] = self._from_cell(value)

    # -------------------------
    # Copy / move
    # -------------------------

    def copy_from(self, source: "RasterBuffer") -> None:
        self.set_size(source.width, source.height)
        if self._storage is not None:
            self.as_array()[...] = source.as_array()
        self.border_value = source.border_value

    def copy(self) -> "RasterBuffer":
        duplicate = type(self)()
        duplicate.copy_from(self)
        return duplicate

    def take_ownership(self, source: "RasterBuffer") -> None:
        """Move the source's storage into this buffer, leaving the source empty."""
        if source is self:
            return
        self._storage = source._storage
        self._width = source._width
        self._height = source._height
        self._mem_used = source._mem_used
        source._reset()


class NoiseMap(RasterBuffer):
    """2D array of float32 noise values."""

    dtype = np.float32
    cell_shape = ()

    def _default_border_value(self) -> float:
        return 0.0

    def _to_cell(self, raw) -> float:
        return float(raw)

    def _from_cell(self, value) -> float:
        return value


class Image(RasterBuffer):
    """2D array of RGBA colors."""

    dtype = np.uint8
    cell_shape = (4,)

    def _default_border_value(self) -> Color:
        return Color(0, 0, 0, 0)

    def _to_cell(self, raw) -> Color:
        red, green, blue, alpha = (int(channel) for channel in raw)
        return Color(red, green, blue, alpha)

    def _from_cell(self, value):
        """Accept a ``Color`` or a plain ``(red, green, blue, alpha)`` sequence."""
        if isinstance(value, Color):
            return value.as_tuple()
        red, green, blue, alpha = value
        return red, green, blue, alpha
