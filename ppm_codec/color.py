from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Color:
    """8-bit RGB color, no alpha."""

    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} out of range 0-255: {value}")

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __str__(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)
Color.CYAN = Color(0, 255, 255)
Color.MAGENTA = Color(255, 0, 255)
Color.YELLOW = Color(255, 255, 0)

NAMED_COLORS = {
    "black": Color.BLACK,
    "white": Color.WHITE,
    "red": Color.RED,
    "green": Color.GREEN,
    "blue": Color.BLUE,
    "cyan": Color.CYAN,
    "magenta": Color.MAGENTA,
    "yellow": Color.YELLOW,
}
