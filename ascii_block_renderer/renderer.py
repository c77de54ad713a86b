#!/usr/bin/env python3
"""
Block ASCII Renderer - Renderer
===============================
Turns a decoded image into a grid of block glyphs.

Steps:
    blur -> resolve output size -> exact resize -> grayscale -> glyph lookup
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import numpy as np
from PIL import Image

from ascii_block_renderer.config import RenderParameters
from ascii_block_renderer.constants import Glyph
from ascii_block_renderer.dimensions import DimensionResolver
from ascii_block_renderer.glyphs import GlyphLUT
from ascii_block_renderer.imaging import ImageProcessor

logger = logging.getLogger(__name__)


@dataclass
class RenderResult:
    """Result of a block ASCII render."""
    text: str                                          # Rows joined, each ending in '\n'
    lines: List[str] = field(default_factory=list)     # Rows without newlines
    width: int = 0                                     # Output width in cells
    height: int = 0                                    # Output height in cells
    original_size: Tuple[int, int] = (0, 0)           # Source image size

    def glyph_distribution(self) -> Dict[Glyph, int]:
        """Count glyphs in the grid, most common first."""
        counts = Counter()
        for line in self.lines:
            counts.update(line)
        return {Glyph(char): count for char, count in counts.most_common()}


class AsciiRenderer:
    """Render images as block glyph art."""

    def __init__(self, params: RenderParameters):
        self.params = params

    def _resolve_size(self, image: Image.Image) -> Tuple[int, int]:
        width, height = DimensionResolver.resolve(
            image.width, image.height,
            self.params.target_width, self.params.target_height,
            self.params.pixel_ratio,
        )
        logger.debug("Resolved output size %dx%d from %dx%d",
                     width, height, image.width, image.height)
        return width, height

    def _scan(self, gray: Image.Image) -> List[str]:
        """Map every pixel of ``gray`` to a glyph, row by row."""
        samples = ImageProcessor.pixels(gray).astype(np.float64)
        scale = 255.0 / ImageProcessor.SAMPLE_MAX
        brightness = np.clip((samples * scale).astype(np.int64), 0, 255)
        chars = GlyphLUT.char_array_for(self.params.inverted)[brightness]
        return [''.join(row) for row in chars]

    def generate(self, image: Image.Image) -> RenderResult:
        """
        Generate block art from a decoded image.

        Args:
            image: Source image in any Pillow mode, left untouched

        Returns:
            RenderResult holding the text grid
        """
        original_size = image.size

        blurred = ImageProcessor.blur(ImageProcessor.normalize(image))
        width, height = self._resolve_size(blurred)
        resized = ImageProcessor.resize(blurred, width, height)
        gray = ImageProcessor.to_grayscale(resized)

        lines = self._scan(gray)
        text = ''.join(line + '\n' for line in lines)

        return RenderResult(
            text=text,
            lines=lines,
            width=width,
            height=height,
            original_size=original_size,
        )

    def generate_from_file(self) -> Tuple[Image.Image, RenderResult]:
        """Decode ``params.input_path`` and render it.

        Returns the decoded image as well so callers can reuse it.
        """
        image = ImageProcessor.decode(self.params.input_path)
        return image, self.generate(image)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def render(params: RenderParameters, image: Image.Image) -> str:
    """Render ``image`` with ``params`` and return the text grid."""
    return AsciiRenderer(params).generate(image).text


def render_file(params: RenderParameters) -> str:
    """Decode ``params.input_path`` and return its text grid."""
    _, result = AsciiRenderer(params).generate_from_file()
    return result.text
