#!/usr/bin/env python3
"""
Block ASCII Renderer - Glyph Lookup Tables
==========================================
Maps 8-bit brightness values to block glyphs.

Two tables exist: white-on-black (normal) and black-on-white (inverted).
Both share the same breakpoints and are built once at import time.
"""

from bisect import bisect_right
from typing import Tuple

import numpy as np

from ascii_block_renderer.constants import BRIGHTNESS_BREAKPOINTS, GLYPH_RAMP, Glyph


GlyphTable = Tuple[Glyph, ...]


class GlyphLUT:
    """Build and serve brightness-to-glyph lookup tables."""

    @staticmethod
    def bin_index(brightness: int) -> int:
        """
        Return the brightness bin (0-4) for an 8-bit value.

        Args:
            brightness: Value in 0..255

        Returns:
            Bin index, 0 for the darkest bin
        """
        if not 0 <= brightness <= 255:
            raise ValueError(f"Brightness out of range: {brightness}")
        return bisect_right(BRIGHTNESS_BREAKPOINTS, brightness)

    @classmethod
    def build_table(cls, inverted: bool) -> GlyphTable:
        """
        Build a 256-entry brightness-to-glyph table.

        In normal mode brighter pixels get denser glyphs, which suits a dark
        terminal background. Inverted mode reads the bins in reverse density.

        Args:
            inverted: Produce the black-on-white table

        Returns:
            Tuple of 256 glyphs indexed by brightness
        """
        last = len(GLYPH_RAMP) - 1
        table = []
        for brightness in range(256):
            k = cls.bin_index(brightness)
            table.append(GLYPH_RAMP[last - k] if inverted else GLYPH_RAMP[k])
        return tuple(table)

    @staticmethod
    def table_for(inverted: bool) -> GlyphTable:
        """Return the prebuilt table for the requested polarity."""
        return BLACK_ON_WHITE if inverted else WHITE_ON_BLACK

    @staticmethod
    def char_array_for(inverted: bool) -> np.ndarray:
        """Return the prebuilt table as a numpy array of characters."""
        return _BLACK_ON_WHITE_CHARS if inverted else _WHITE_ON_BLACK_CHARS


WHITE_ON_BLACK: GlyphTable = GlyphLUT.build_table(False)
BLACK_ON_WHITE: GlyphTable = GlyphLUT.build_table(True)

_WHITE_ON_BLACK_CHARS = np.array([glyph.value for glyph in WHITE_ON_BLACK])
_BLACK_ON_WHITE_CHARS = np.array([glyph.value for glyph in BLACK_ON_WHITE])
_WHITE_ON_BLACK_CHARS.flags.writeable = False
_BLACK_ON_WHITE_CHARS.flags.writeable = False
