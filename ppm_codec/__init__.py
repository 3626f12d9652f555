"""
Binary PPM (P6) codec.

Decodes P6 files with max value 255 into a PixelGrid and encodes a
PixelGrid back into the exact P6 byte layout.
"""

from .byte_cursor import ByteCursor
from .color import Color
from .errors import (
    EmptyInputError,
    MagicMismatchError,
    MalformedHeaderError,
    PPMError,
    UnexpectedEofError,
    UnsupportedFormatError,
    UnsupportedMaxValueError,
)
from .pixel_grid import PixelGrid
from .ppm_parser import decode_ppm, read_ppm
from .ppm_writer import encode_ppm, write_ppm

__all__ = [
    "ByteCursor",
    "Color",
    "decode_ppm",
    "EmptyInputError",
    "encode_ppm",
    "MagicMismatchError",
    "MalformedHeaderError",
    "PixelGrid",
    "PPMError",
    "read_ppm",
    "UnexpectedEofError",
    "UnsupportedFormatError",
    "UnsupportedMaxValueError",
    "write_ppm",
]
