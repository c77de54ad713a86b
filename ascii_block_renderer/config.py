#!/usr/bin/env python3
"""
Block ASCII Renderer - Configuration
====================================
Immutable parameters for a single render.
"""

import argparse
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ascii_block_renderer.constants import PIXEL_RATIO
from ascii_block_renderer.errors import ConfigurationError


@dataclass(frozen=True)
class RenderParameters:
    """Configuration for one block ASCII render."""

    input_path: str = ''
    output_path: Optional[str] = None

    # Size in character cells, 0 = derive from the image
    target_width: int = 0
    target_height: int = 0

    # > 1 squishes the art vertically, < 1 stretches it
    squish_factor: float = 1.0

    inverted: bool = False            # Black on white instead of white on black
    color_mode: bool = False          # Tint printed art with the accent color
    print: bool = False               # Echo the art to stdout
    analyze: bool = False             # Report the glyph distribution

    def __post_init__(self):
        if not self.input_path:
            raise ConfigurationError("No input path specified")
        for name in ('target_width', 'target_height'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ConfigurationError(f"{name} must not be negative, got {value}")
        try:
            squish = float(self.squish_factor)
        except (TypeError, ValueError):
            raise ConfigurationError(
                f"squish_factor must be a number, got {self.squish_factor!r}") from None
        if not math.isfinite(squish) or squish <= 0:
            raise ConfigurationError(f"squish_factor must be positive, got {self.squish_factor}")

    @property
    def pixel_ratio(self) -> float:
        """Character cell aspect correction scaled by the squish factor."""
        return PIXEL_RATIO * self.squish_factor

    @property
    def input_name(self) -> str:
        return Path(self.input_path).name

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> 'RenderParameters':
        """Build parameters from parsed command line arguments."""
        return cls(
            input_path=args.input or '',
            output_path=args.output,
            target_width=args.width or 0,
            target_height=args.height or 0,
            squish_factor=args.squishfactor,
            inverted=args.invert,
            color_mode=args.color,
            print=args.print,
            analyze=args.analyze,
        )
