"""
Pixel Filters

Per-pixel filters for PixelGrid.filter(). A filter is called as
fn(grid, x, y) and returns a replacement Color or None.
"""

from typing import Callable, Optional

from .color import Color
from .pixel_grid import PixelGrid

PixelFilter = Callable[[PixelGrid, int, int], Optional[Color]]


def to_ratio(num: int, maximum: int) -> float:
    """Map num in [0, maximum] onto [0.0, 2.0]."""
    return (2.0 * num) / maximum


def circle_filter(color: Color = Color.CYAN) -> PixelFilter:
    """
    Build a filter painting the ellipse inscribed in the image.

    Args:
        color: Fill color inside the ellipse

    Returns:
        Filter function for PixelGrid.filter()
    """

    def apply(image: PixelGrid, x: int, y: int) -> Optional[Color]:
        dx = to_ratio(x, image.width) - 1.0
        dy = to_ratio(y, image.height) - 1.0
        if dx * dx + dy * dy < 1.0:
            return color
        return None

    return apply


FILTERS = {
    "circle": circle_filter,
}
