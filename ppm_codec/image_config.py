"""
Image Description Config

Parses YAML files describing an image to render: its size, background color
and an optional shape drawn on top. The output path, when given, is resolved
relative to the YAML file location.
"""

import yaml
import os
from typing import Optional

from .color import Color, NAMED_COLORS
from .filters import FILTERS
from .pixel_grid import PixelGrid


class ImageConfig:
    """Class to handle image descriptions from YAML files."""

    def __init__(self, yaml_path: str):
        """
        Initialize ImageConfig from a YAML file.

        Args:
            yaml_path: Path to the YAML config file
        """
        self.yaml_path = yaml_path
        self.yaml_dir = os.path.dirname(os.path.abspath(yaml_path))

        with open(yaml_path, "r") as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {yaml_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Expected a mapping at top level of {yaml_path}")

        self.width = data.get("width")
        self.height = data.get("height")
        self.background = self._parse_color(data.get("background", "white"))
        self.shape = str(data.get("shape", "circle")).lower()
        self.color = self._parse_color(data.get("color", "cyan"))
        self.output_path = self._resolve_output_path(data.get("output"))

        self._validate()

    @staticmethod
    def _parse_color(value) -> Color:
        """
        Parse a color given as a name or a [r, g, b] list.

        Args:
            value: Color name or 3-item list from the YAML file

        Returns:
            Parsed Color
        """
        if isinstance(value, str):
            color = NAMED_COLORS.get(value.lower())
            if color is None:
                raise ValueError(f"Unknown color name: {value}")
            return color
        if isinstance(value, (list, tuple)) and len(value) == 3:
            for c in value:
                if isinstance(c, bool) or not isinstance(c, int):
                    raise ValueError(f"Invalid color channel {c!r} in {value!r}")
            return Color(*value)
        raise ValueError(f"Invalid color: {value!r}")

    def _resolve_output_path(self, output_path: Optional[str]) -> Optional[str]:
        if output_path is None or output_path == "":
            return None
        if not isinstance(output_path, str):
            raise ValueError(f"Invalid output path: {output_path!r}")
        if os.path.isabs(output_path):
            return output_path
        return os.path.join(self.yaml_dir, output_path)

    def _validate(self):
        """Validate the parsed config."""
        for name in ("width", "height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"Invalid {name}: {value!r}")

        if self.shape != "none" and self.shape not in FILTERS:
            raise ValueError(f"Unsupported shape: {self.shape}")

    def render(self) -> PixelGrid:
        """
        Render the described image.

        Returns:
            New PixelGrid
        """
        image = PixelGrid(self.width, self.height, self.background)
        if self.shape == "none":
            return image
        return image.filter(FILTERS[self.shape](self.color))

    def __str__(self) -> str:
        """String representation of config."""
        return (
            f"ImageConfig(\n"
            f"  size: {self.width}x{self.height}\n"
            f"  background: {self.background}\n"
            f"  shape: {self.shape}\n"
            f"  color: {self.color}\n"
            f"  output: {self.output_path}\n"
            f")"
        )
