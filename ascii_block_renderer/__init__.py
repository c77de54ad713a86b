"""
Block ASCII Renderer
====================
Renders raster images as block glyph art (space, ░, ▒, ▓, █), optionally
tinted with an accent color derived from the image for terminal display.
"""

from ascii_block_renderer.colors import (
    AccentColor,
    AccentColorSelector,
    AnsiColorFormatter,
    ColorTransform,
    accent_for_image,
    extract_accent_color,
    select_accent,
)
from ascii_block_renderer.config import RenderParameters
from ascii_block_renderer.constants import Glyph, PIXEL_RATIO
from ascii_block_renderer.dimensions import DimensionResolver, resolve
from ascii_block_renderer.errors import (
    AsciiRendererError,
    ConfigurationError,
    DecodeError,
    EmptyPaletteError,
    OutputWriteError,
)
from ascii_block_renderer.glyphs import BLACK_ON_WHITE, WHITE_ON_BLACK, GlyphLUT
from ascii_block_renderer.imaging import ImageProcessor
from ascii_block_renderer.renderer import AsciiRenderer, RenderResult, render, render_file

__version__ = "0.1.0"

__all__ = [
    # Main classes
    'AsciiRenderer',
    'RenderParameters',
    'RenderResult',

    # Lookup tables
    'Glyph',
    'GlyphLUT',
    'WHITE_ON_BLACK',
    'BLACK_ON_WHITE',

    # Geometry
    'DimensionResolver',
    'PIXEL_RATIO',
    'resolve',

    # Colors
    'AccentColor',
    'AccentColorSelector',
    'AnsiColorFormatter',
    'ColorTransform',
    'accent_for_image',
    'extract_accent_color',
    'select_accent',

    # Image processing
    'ImageProcessor',

    # Errors
    'AsciiRendererError',
    'ConfigurationError',
    'DecodeError',
    'EmptyPaletteError',
    'OutputWriteError',

    # Convenience functions
    'render',
    'render_file',
]
