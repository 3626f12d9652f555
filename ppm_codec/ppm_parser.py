"""
PPM Image Parser

Decodes binary PPM (P6) files with a maximum channel value of 255.

The header must be laid out exactly as "P6\\n<width> <height>\\n255\\n":
comments and extra whitespace are not supported. Bytes after the last
pixel are ignored.
"""

from typing import Tuple

from .byte_cursor import ByteCursor
from .color import Color
from .errors import (
    EmptyInputError,
    MagicMismatchError,
    MalformedHeaderError,
    UnexpectedEofError,
    UnsupportedFormatError,
    UnsupportedMaxValueError,
)
from .pixel_grid import PixelGrid

MAX_VALUE = 255

# bytes.isspace(): space, \t, \n, \r, \x0b, \x0c
_WHITESPACE = frozenset(b" \t\n\r\x0b\x0c")


def read_ppm(ppm_path: str) -> PixelGrid:
    """
    Read a P6 file from disk.

    Args:
        ppm_path: Path to the PPM file

    Returns:
        Decoded PixelGrid
    """
    with open(ppm_path, "rb") as f:
        data = f.read()
    return decode_ppm(data)


def decode_ppm(data: bytes) -> PixelGrid:
    """
    Decode a complete P6 file held in memory.

    Args:
        data: Raw file contents

    Returns:
        Decoded PixelGrid

    Raises:
        PPMError: If the header or pixel payload is invalid or truncated
    """
    cursor = ByteCursor(data)
    width, height = read_header(cursor)
    return read_pixels(cursor, width, height)


def read_header(cursor: ByteCursor) -> Tuple[int, int]:
    """
    Read the magic number, dimensions and max value.

    Args:
        cursor: Cursor positioned at the start of the file

    Returns:
        Tuple of (width, height)
    """
    p = cursor.next_byte()
    if p is None:
        raise EmptyInputError("Empty file, expected magic number 'P6'.")
    if p != ord("P"):
        raise MagicMismatchError(
            f"Wrong magic value at start of header: expected 'P', found {_describe(p)}."
        )

    six = cursor.next_byte()
    if six is None:
        raise UnexpectedEofError(
            "Reached end of file after 'P', expected format marker '6'."
        )
    if six != ord("6"):
        raise UnsupportedFormatError(
            f"Wrong PNM file type, expects a P6 (binary PPM) file: "
            f"found {_describe(six)} after 'P'."
        )

    newline = cursor.next_byte()
    if newline is None:
        raise UnexpectedEofError(
            "Reached end of file after magic number P6, expected a newline."
        )
    if newline != ord("\n"):
        raise MalformedHeaderError(
            f"No newline after magic number P6, found {_describe(newline)}."
        )

    width = read_number(cursor, "width")
    height = read_number(cursor, "height")
    max_value = read_number(cursor, "max value")
    if max_value != MAX_VALUE:
        raise UnsupportedMaxValueError(
            f"Expects a maximum rgb value of {MAX_VALUE}, found {max_value}."
        )

    return (width, height)


def read_number(cursor: ByteCursor, field: str) -> int:
    """
    Read an unsigned decimal token terminated by a single whitespace byte.

    Args:
        cursor: Cursor positioned at the first digit
        field: Header field name, used in error messages

    Returns:
        Parsed number
    """
    number = 0
    while True:
        byte = cursor.next_byte()
        if byte is None:
            raise UnexpectedEofError(
                f"Reached end of file while reading the {field} in the header."
            )
        if ord("0") <= byte <= ord("9"):
            number = number * 10 + (byte - ord("0"))
        elif byte in _WHITESPACE:
            return number
        else:
            raise MalformedHeaderError(
                f"Wrong character in header while reading the {field}: "
                f"expected a digit or whitespace, found {_describe(byte)}."
            )


def read_pixels(cursor: ByteCursor, width: int, height: int) -> PixelGrid:
    """
    Read width*height RGB triples in row-major order.

    Args:
        cursor: Cursor positioned right after the header
        width: Image width in pixels
        height: Image height in pixels

    Returns:
        Fully populated PixelGrid
    """
    image = PixelGrid(width, height, Color.WHITE)
    for y in range(height):
        for x in range(width):
            image._set_unchecked(x, y, read_color(cursor, x, y))
    return image


def read_color(cursor: ByteCursor, x: int, y: int) -> Tuple[int, int, int]:
    """Read the next red, green and blue bytes for pixel (x, y)."""
    channels = []
    for name in ("red", "green", "blue"):
        value = cursor.next_byte()
        if value is None:
            raise UnexpectedEofError(
                f"Reached end of file before reading the {name} value "
                f"of pixel ({x}, {y})."
            )
        channels.append(value)
    return (channels[0], channels[1], channels[2])


def _describe(byte: int) -> str:
    if 0x20 <= byte <= 0x7E:
        return f"{chr(byte)!r}"
    return f"byte 0x{byte:02x}"
