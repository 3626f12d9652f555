#!/usr/bin/env python3
"""
PPM Tool - Main Entry Point

Inspects and generates binary PPM (P6) images.

Usage:
    ppm_tool inspect <image.ppm>
    ppm_tool generate <config.yaml> [-o output.ppm]
    ppm_tool demo [-d output_dir]

Example:
    ppm_tool generate examples/circle.yaml -o circle.ppm
"""

import sys
import os
import argparse

from .color import Color
from .errors import PPMError
from .filters import circle_filter
from .image_config import ImageConfig
from .pixel_grid import PixelGrid
from .ppm_parser import read_ppm
from .ppm_writer import write_ppm


class PPMTool:
    """Runs the inspect, generate and demo commands."""

    def inspect(self, ppm_path: str) -> PixelGrid:
        """
        Decode a PPM file and print a summary of it.

        Args:
            ppm_path: Path to the PPM file

        Returns:
            Decoded PixelGrid
        """
        image = read_ppm(ppm_path)

        print(f"\n📂 Input: {ppm_path}")
        print(f"\n📊 Image Properties:")
        print(f"   Size:        {image.width} × {image.height} pixels")
        print(f"   Pixels:      {image.width * image.height}")
        print(f"   Mean color:  {image.mean_color()}")
        print()

        return image

    def generate(self, yaml_path: str, output_path: str = None) -> str:
        """
        Render the image described by a YAML config and write it as P6.

        Args:
            yaml_path: Path to YAML config file
            output_path: Output PPM path (default: config's output, else
                same as input YAML with .ppm extension)

        Returns:
            Path of the written file
        """
        print("\n" + "=" * 70)
        print("  PPM GENERATOR")
        print("=" * 70)
        print(f"\n📂 Config: {yaml_path}")

        config = ImageConfig(yaml_path)

        print(f"\n📊 Image Properties:")
        print(f"   Size:        {config.width} × {config.height} pixels")
        print(f"   Background:  {config.background}")
        print(f"   Shape:       {config.shape} ({config.color})")

        image = config.render()

        if output_path is None:
            output_path = config.output_path
        if output_path is None:
            output_path = os.path.splitext(yaml_path)[0] + ".ppm"

        write_ppm(output_path, image)

        print("\n" + "=" * 70)
        print("  ✓ GENERATION COMPLETE")
        print("=" * 70)
        print(f"\n📁 Output:  {output_path}")
        print()

        return output_path

    def demo(self, output_dir: str = ".") -> list:
        """
        Write a landscape and a portrait cyan circle on white.

        Args:
            output_dir: Directory for the generated files

        Returns:
            List of written paths
        """
        os.makedirs(output_dir, exist_ok=True)
        written = []
        for index, (width, height) in enumerate([(128, 72), (72, 128)], start=1):
            image = PixelGrid(width, height, Color.WHITE).filter(
                circle_filter(Color.CYAN)
            )
            path = os.path.join(output_dir, f"write_test_{index}.ppm")
            write_ppm(path, image)
            print(f"💾 Wrote {width} × {height}: {path}")
            written.append(path)
        return written


def _resolve_yaml_path(yaml_file: str) -> str:
    if yaml_file.endswith(".yaml") or yaml_file.endswith(".yml"):
        return yaml_file
    for ext in (".yaml", ".yml"):
        if os.path.exists(yaml_file + ext):
            return yaml_file + ext
    return yaml_file


def main(args=None):
    """
    Main entry point for the PPM tool.

    Args:
        args: Command line arguments (optional, for testing)
    """
    parser = argparse.ArgumentParser(
        description="Inspect and generate binary PPM (P6) images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the size and mean color of an image
  ppm_tool inspect image.ppm

  # Render an image from a YAML description
  ppm_tool generate examples/circle.yaml
  ppm_tool generate examples/circle -o circle.ppm

  # Write the two demo circles into ./out
  ppm_tool demo -d out

Note:
  Only P6 files with a max value of 255 are supported. Header comments are
  not supported.
        """,
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True

    inspect_parser = subparsers.add_parser("inspect", help="Decode and summarize a PPM file")
    inspect_parser.add_argument("ppm_file", type=str, help="Path to P6 PPM file")

    generate_parser = subparsers.add_parser(
        "generate", help="Render an image described by a YAML file"
    )
    generate_parser.add_argument(
        "yaml_file",
        type=str,
        help="Path to image YAML config file (with or without .yaml extension)",
    )
    generate_parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Output PPM file path (default: config 'output', else YAML path with .ppm extension)",
    )

    demo_parser = subparsers.add_parser("demo", help="Write the demo circle images")
    demo_parser.add_argument(
        "-d",
        "--output-dir",
        type=str,
        default=".",
        help="Directory for the generated images (default: current directory)",
    )

    # Parse arguments
    if args is None:
        args = parser.parse_args()
    else:
        args = parser.parse_args(args)

    tool = PPMTool()
    try:
        if args.command == "inspect":
            tool.inspect(args.ppm_file)
        elif args.command == "generate":
            yaml_file = _resolve_yaml_path(args.yaml_file)
            if not os.path.exists(yaml_file):
                print(f"Error: YAML file not found: {yaml_file}", file=sys.stderr)
                return 1
            tool.generate(yaml_file, output_path=args.output)
        else:
            tool.demo(args.output_dir)
        return 0

    except PPMError as e:
        print(f"Error: invalid PPM file ({e.kind}): {e}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
