#!/usr/bin/env python3
"""
Block ASCII Renderer - Constants
================================
Glyphs and the fixed numeric policy shared by the rendering pipeline.
"""

from enum import Enum
from typing import Tuple


# (r, g, b), each channel 0-255
Color = Tuple[int, int, int]


# =============================================================================
# GLYPHS
# =============================================================================

class Glyph(Enum):
    """Visual weights used for one character cell, ordered by density."""
    SPACE = ' '     # U+0020
    LIGHT = '░'     # U+2591
    MEDIUM = '▒'    # U+2592
    DARK = '▓'      # U+2593
    FULL = '█'      # U+2588

    @property
    def density(self) -> int:
        """Position of the glyph in the density ramp (0 = empty, 4 = solid)."""
        return GLYPH_RAMP.index(self)


# Dark to light on a dark terminal background
GLYPH_RAMP: Tuple[Glyph, ...] = (
    Glyph.SPACE, Glyph.LIGHT, Glyph.MEDIUM, Glyph.DARK, Glyph.FULL
)

# Lower bounds of bins 1..4; bin 0 starts at 0
BRIGHTNESS_BREAKPOINTS: Tuple[int, ...] = (30, 90, 152, 219)


# =============================================================================
# GEOMETRY
# =============================================================================

# Height/width of a terminal character cell relative to a square pixel
PIXEL_RATIO: float = 2.6666666666

DEFAULT_WIDTH: int = 400


# =============================================================================
# PREPROCESSING
# =============================================================================

BLUR_RADIUS: float = 0.0
BLUR_SIGMA: float = 1.0

ACCENT_THUMBNAIL_SIZE: Tuple[int, int] = (100, 100)
ACCENT_PALETTE_SIZE: int = 5

FALLBACK_ACCENT: Color = (180, 180, 180)


# =============================================================================
# ANSI
# =============================================================================

ANSI_RESET: str = "\033[0m"
