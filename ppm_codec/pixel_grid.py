"""
RGB Pixel Grid

Row-major RGB image storage backed by a numpy uint8 array of shape
(height, width, 3). Width and height are fixed at construction.
"""

import numpy as np
from typing import Callable, Iterator, Optional, Tuple

from .color import Color


class PixelGrid:
    """Fixed-size rectangular grid of RGB pixels."""

    def __init__(self, width: int, height: int, fill: Color = Color.WHITE):
        """
        Initialize a grid filled with a single color.

        Args:
            width: Number of columns
            height: Number of rows
            fill: Initial color of every pixel
        """
        if width < 0 or height < 0:
            raise ValueError(f"Invalid dimensions: {width}x{height}")
        self._data = np.empty((height, width, 3), dtype=np.uint8)
        self._data[:, :] = fill.as_tuple()

    @classmethod
    def from_array(cls, array: np.ndarray) -> "PixelGrid":
        """
        Build a grid from an array of shape (height, width, 3).

        Args:
            array: Integer channel values in 0..255

        Returns:
            New PixelGrid holding a copy of the data
        """
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError(
                f"Expected an array of shape (height, width, 3), got {array.shape}"
            )
        if array.dtype.kind not in "iu":
            raise ValueError(f"Expected an integer array, got dtype {array.dtype}")
        if array.size and (array.min() < 0 or array.max() > 255):
            raise ValueError(
                f"Channel values out of range 0-255: {array.min()}..{array.max()}"
            )
        height, width = array.shape[:2]
        grid = cls(width, height)
        grid._data[:] = array.astype(np.uint8)
        return grid

    @property
    def width(self) -> int:
        return self._data.shape[1]

    @property
    def height(self) -> int:
        return self._data.shape[0]

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) out of bounds for {self.width}x{self.height} grid"
            )

    def get(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self._data[y, x]
        return Color(int(r), int(g), int(b))

    def set(self, x: int, y: int, color: Color):
        self._check_bounds(x, y)
        self._data[y, x] = color.as_tuple()

    def _set_unchecked(self, x: int, y: int, rgb: Tuple[int, int, int]):
        # Caller guarantees 0 <= x < width, 0 <= y < height and channels in 0..255.
        self._data[y, x] = rgb

    def pixels(self) -> Iterator[Color]:
        """Yield every pixel in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                r, g, b = self._data[y, x]
                yield Color(int(r), int(g), int(b))

    def to_array(self) -> np.ndarray:
        """Return a copy of the underlying (height, width, 3) array."""
        return self._data.copy()

    def tobytes(self) -> bytes:
        """Row-major r, g, b channel bytes with no padding."""
        return self._data.tobytes()

    def filter(
        self, fn: Callable[["PixelGrid", int, int], Optional[Color]]
    ) -> "PixelGrid":
        """
        Apply a per-pixel filter and return the result as a new grid.

        Args:
            fn: Called as fn(grid, x, y). Returns the replacement Color, or
                None to keep the current pixel.

        Returns:
            Filtered copy of this grid
        """
        result = PixelGrid.from_array(self._data)
        for y in range(self.height):
            for x in range(self.width):
                color = fn(self, x, y)
                if color is not None:
                    result._set_unchecked(x, y, color.as_tuple())
        return result

    def mean_color(self) -> Color:
        """Average color over all pixels (black for an empty grid)."""
        if self._data.size == 0:
            return Color.BLACK
        mean = self._data.reshape(-1, 3).mean(axis=0)
        return Color(*(int(round(c)) for c in mean))

    def __eq__(self, other) -> bool:
        if not isinstance(other, PixelGrid):
            return NotImplemented
        return self._data.shape == other._data.shape and np.array_equal(
            self._data, other._data
        )

    def __repr__(self) -> str:
        return f"PixelGrid(width={self.width}, height={self.height})"

    def __str__(self) -> str:
        """String representation."""
        return (
            f"PixelGrid(\n"
            f"  dimensions: {self.width}x{self.height}\n"
            f"  pixels: {self.width * self.height}\n"
            f"  mean color: {self.mean_color()}\n"
            f")"
        )
