"""
PPM Image Writer

Serializes a PixelGrid as a binary PPM (P6) file with max value 255.
"""

from .pixel_grid import PixelGrid


def encode_ppm(image: PixelGrid) -> bytes:
    """
    Build the exact P6 byte layout for an image.

    Args:
        image: Grid to encode

    Returns:
        Header "P6\\n<width> <height>\\n255\\n" followed by row-major RGB bytes
    """
    header = f"P6\n{image.width} {image.height}\n255\n".encode("ascii")
    return header + image.tobytes()


def write_ppm(ppm_path: str, image: PixelGrid):
    """
    Write an image to disk as P6, overwriting any existing file.

    Args:
        ppm_path: Destination path
        image: Grid to encode
    """
    with open(ppm_path, "wb") as f:
        f.write(encode_ppm(image))
