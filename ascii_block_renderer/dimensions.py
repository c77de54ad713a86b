#!/usr/bin/env python3
"""
Block ASCII Renderer - Output Dimensions
========================================
Resolves the output grid size in character cells from the source image size
and the user's width/height constraints.

Terminal character cells are taller than they are wide, so heights are
divided (and widths multiplied) by the pixel ratio.
"""

import math
from typing import Tuple

from ascii_block_renderer.constants import DEFAULT_WIDTH
from ascii_block_renderer.errors import ConfigurationError


class DimensionResolver:
    """Compute the output width and height of the glyph grid."""

    @staticmethod
    def _round(value: float) -> int:
        """Round half away from zero, never below 1."""
        return max(1, int(math.floor(value + 0.5)))

    @staticmethod
    def height_for_width(source_width: int, source_height: int,
                         target_width: float, pixel_ratio: float) -> float:
        """Unrounded height that keeps the source aspect at ``target_width``."""
        return source_height * (target_width / source_width) / pixel_ratio

    @staticmethod
    def width_for_height(source_width: int, source_height: int,
                         target_height: float, pixel_ratio: float) -> float:
        """Unrounded width that keeps the source aspect at ``target_height``."""
        return source_width * target_height * pixel_ratio / source_height

    @classmethod
    def resolve(cls, source_width: int, source_height: int,
                target_width: int, target_height: int,
                pixel_ratio: float) -> Tuple[int, int]:
        """
        Resolve the output size.

        Args:
            source_width: Source image width in pixels (>= 1)
            source_height: Source image height in pixels (>= 1)
            target_width: Requested width in cells, 0 if unset
            target_height: Requested height in cells, 0 if unset
            pixel_ratio: Character cell height/width correction (> 0)

        Returns:
            (width, height) in character cells, both >= 1
        """
        if source_width < 1 or source_height < 1:
            raise ConfigurationError(
                f"Source dimensions must be positive, got {source_width}x{source_height}")
        if target_width < 0 or target_height < 0:
            raise ConfigurationError(
                f"Target dimensions must not be negative, got {target_width}x{target_height}")
        if not pixel_ratio > 0:
            raise ConfigurationError(f"Pixel ratio must be positive, got {pixel_ratio}")

        width: float = target_width
        height: float = target_height

        if target_width and target_height:
            # Fit inside the box
            source_aspect = source_width / source_height
            box_aspect = target_width / (target_height * pixel_ratio)
            if source_aspect > box_aspect:
                height = cls.height_for_width(source_width, source_height, width, pixel_ratio)
            else:
                width = cls.width_for_height(source_width, source_height, height, pixel_ratio)
        elif target_width:
            height = cls.height_for_width(source_width, source_height, width, pixel_ratio)
        elif target_height:
            width = cls.width_for_height(source_width, source_height, height, pixel_ratio)
        else:
            width = DEFAULT_WIDTH
            height = cls.height_for_width(source_width, source_height, width, pixel_ratio)

        return cls._round(width), cls._round(height)


def resolve(source_width: int, source_height: int,
            target_width: int, target_height: int,
            pixel_ratio: float) -> Tuple[int, int]:
    """Module-level shortcut for :meth:`DimensionResolver.resolve`."""
    return DimensionResolver.resolve(source_width, source_height,
                                     target_width, target_height, pixel_ratio)
