#!/usr/bin/env python3
"""
Block ASCII Renderer - Command Line Interface
=============================================
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from PIL import Image

from ascii_block_renderer.colors import AnsiColorFormatter, accent_for_image
from ascii_block_renderer.config import RenderParameters
from ascii_block_renderer.errors import (
    ConfigurationError,
    DecodeError,
    OutputWriteError,
)
from ascii_block_renderer.logging_utils import configure_logging
from ascii_block_renderer.renderer import AsciiRenderer, RenderResult

logger = logging.getLogger(__name__)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        prog='ascii-block-render',
        description='Renders given image in block ASCII art',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s -i image.png -p                    # Print to the terminal
  %(prog)s -i image.png -w 120 -p             # 120 characters wide
  %(prog)s -i image.png -w 120 -H 40 -p       # Fit inside 120x40
  %(prog)s -i image.png -o art.txt            # Save to a file
  %(prog)s -i image.png -p -c                 # Tint with the image's accent color
  %(prog)s -i image.png -p -n                 # Black on white
        """
    )

    # Input/Output
    parser.add_argument('-i', '--input', help='Path to the input file (required)')
    parser.add_argument('-o', '--output', help='Saves the ASCII art to a path')
    parser.add_argument('-p', '--print', action='store_true',
                        help='Prints the ASCII art to console after rendering it')

    # Size options
    parser.add_argument('-w', '--width', type=int, default=0,
                        help='Target ASCII art character width')
    parser.add_argument('-H', '--height', type=int, default=0,
                        help='Target ASCII art character height. If both height and width '
                             'are given, the art is fitted inside that box')
    parser.add_argument('-s', '--squishfactor', type=float, default=1.0,
                        help='Adjust this if your image is squished or stretched vertically. '
                             'Larger value -> more squished.')

    # Look
    parser.add_argument('-n', '--invert', action='store_true',
                        help='Inverts the colors of the ascii art, from white on black to black on white')
    parser.add_argument('-c', '--color', action='store_true',
                        help='Render the image in terminal color')

    # Other options
    parser.add_argument('-a', '--analyze', action='store_true',
                        help='Show the glyph distribution of the generated art')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    parser.add_argument('--log-file', type=Path, help='Also write a debug log to this file')

    return parser


def write_art(path: str, text: str) -> None:
    """Write rendered art to ``path`` as UTF-8."""
    try:
        Path(path).write_text(text, encoding='utf-8')
    except OSError as exc:
        raise OutputWriteError(f"Could not open output file: {path} ({exc})") from exc
    logger.info("Saved to %s", path)


def print_art(result: RenderResult, params: RenderParameters, image: Image.Image) -> None:
    """Print the art, tinted with the image's accent color in color mode."""
    if params.color_mode:
        accent = accent_for_image(image)
        sys.stdout.write(AnsiColorFormatter.wrap(result.text, accent) + '\n')
        sys.stdout.flush()
    else:
        print(result.text)


def report_distribution(result: RenderResult) -> None:
    """Log how often each glyph occurs in the rendered grid."""
    total = result.width * result.height
    logger.info("Glyph distribution (%dx%d):", result.width, result.height)
    for glyph, count in result.glyph_distribution().items():
        logger.info("  %-6s %r: %d (%.1f%%)", glyph.name, glyph.value, count,
                    100.0 * count / total if total else 0.0)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command line usage."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    try:
        params = RenderParameters.from_namespace(args)
    except ConfigurationError as exc:
        logger.error("Error parsing arguments: %s", exc)
        return 1

    try:
        image, result = AsciiRenderer(params).generate_from_file()
        logger.debug("Rendered %s at %dx%d", params.input_name, result.width, result.height)

        if params.output_path:
            write_art(params.output_path, result.text)
        if params.print:
            print_art(result, params, image)
        elif params.color_mode:
            logger.info("Color mode only applies to printed output; pass -p to print")
    except ConfigurationError as exc:
        logger.error("Error parsing arguments: %s", exc)
        return 1
    except DecodeError as exc:
        logger.error("Error reading / editing image: %s", exc)
        return 1
    except OutputWriteError as exc:
        logger.error("%s", exc)
        return 1

    if params.analyze:
        report_distribution(result)

    return 0


if __name__ == '__main__':
    sys.exit(main())
