#!/usr/bin/env python3
"""
Block ASCII Renderer - Accent Colors
====================================
Picks a single accent color from an image and derives the terminal
background/foreground pair used to tint the rendered art.

Pipeline:
    image -> 100x100 thumbnail -> blur -> 5-color palette -> most vibrant entry
          -> (darkened background, brightened foreground)
"""

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np
from PIL import Image

from ascii_block_renderer.constants import (
    ACCENT_PALETTE_SIZE,
    ACCENT_THUMBNAIL_SIZE,
    ANSI_RESET,
    FALLBACK_ACCENT,
    Color,
)
from ascii_block_renderer.errors import EmptyPaletteError
from ascii_block_renderer.imaging import ImageProcessor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccentColor:
    """Accent seed color and the display colors derived from it."""
    seed: Color
    background: Color
    foreground: Color

    @classmethod
    def from_seed(cls, seed: Color) -> 'AccentColor':
        """Derive background and foreground from ``seed``."""
        return cls(
            seed=seed,
            background=ColorTransform.derive_background(seed),
            foreground=ColorTransform.derive_foreground(seed),
        )


# =============================================================================
# COLOR TRANSFORMS
# =============================================================================

class ColorTransform:
    """Derive display colors from a seed color.

    Arithmetic runs in single precision and channels are truncated, not
    rounded, before clamping to 0-255.
    """

    BACKGROUND_DESATURATION = np.float32(0.6)
    BACKGROUND_DARKEN = np.float32(0.25)
    FOREGROUND_SATURATION = np.float32(1.2)
    FOREGROUND_BRIGHTEN = np.float32(1.2)

    @staticmethod
    def _channels(color: Color) -> Tuple[np.ndarray, np.float32]:
        r, g, b = color
        channels = np.array([r, g, b], dtype=np.float32)
        gray = np.float32(r + g + b) / np.float32(3.0)
        return channels, gray

    @staticmethod
    def _to_color(channels: np.ndarray) -> Color:
        clamped = np.clip(np.trunc(channels).astype(np.int64), 0, 255)
        return int(clamped[0]), int(clamped[1]), int(clamped[2])

    @classmethod
    def derive_background(cls, color: Color) -> Color:
        """
        Slightly desaturate and strongly darken ``color``.

        Args:
            color: Seed (r, g, b)

        Returns:
            Background (r, g, b)
        """
        channels, gray = cls._channels(color)
        keep = cls.BACKGROUND_DESATURATION
        mixed = gray * (np.float32(1.0) - keep) + channels * keep
        return cls._to_color(mixed * cls.BACKGROUND_DARKEN)

    @classmethod
    def derive_foreground(cls, color: Color) -> Color:
        """
        Push ``color`` away from gray and brighten it.

        Args:
            color: Seed (r, g, b)

        Returns:
            Foreground (r, g, b)
        """
        channels, gray = cls._channels(color)
        saturated = gray + (channels - gray) * cls.FOREGROUND_SATURATION
        return cls._to_color(saturated * cls.FOREGROUND_BRIGHTEN)


# =============================================================================
# ACCENT SELECTION
# =============================================================================

class AccentColorSelector:
    """Score palette entries and pick the most vibrant one."""

    BRIGHTNESS_FLOOR = 0.4

    @classmethod
    def score(cls, color: Sequence[float], sample_max: float = 255.0) -> float:
        """
        Vibrancy score of one palette entry.

        Grayish colors score near zero whatever their brightness; the
        brightness floor keeps saturated mid-tones from vanishing.
        """
        scale = 255.0 / sample_max
        r, g, b = (channel * scale for channel in color)
        maxc = max(r, g, b)
        minc = min(r, g, b)
        saturation = 0.0 if maxc == 0 else (maxc - minc) / maxc
        brightness = (r + g + b) / (3.0 * 255.0)
        return saturation * (cls.BRIGHTNESS_FLOOR + brightness)

    @classmethod
    def select(cls, palette: Sequence[Sequence[float]], sample_max: float = 255.0) -> Color:
        """
        Pick the highest scoring palette entry.

        Ties keep the earliest entry, so the result follows the quantizer's
        palette order.

        Args:
            palette: Palette entries as (r, g, b)
            sample_max: Largest channel value in ``palette``

        Returns:
            Chosen color with channels rescaled to 0-255 and truncated
        """
        if not palette:
            raise EmptyPaletteError("Color palette is empty after quantization")

        scale = 255.0 / sample_max
        best_score = -1.0
        best = palette[0]
        for entry in palette:
            entry_score = cls.score(entry, sample_max)
            if entry_score > best_score:
                best_score = entry_score
                best = entry
        r, g, b = (int(channel * scale) for channel in best)
        return r, g, b

    @classmethod
    def extract(cls, image: Image.Image) -> Color:
        """
        Extract the accent color of an image.

        The image is shrunk to a fixed thumbnail size, blurred and quantized to
        a small palette before scoring.

        Raises:
            EmptyPaletteError: If quantization yields no colors
        """
        thumb = ImageProcessor.resize(ImageProcessor.normalize(image), *ACCENT_THUMBNAIL_SIZE)
        thumb = ImageProcessor.blur(thumb)
        palette = ImageProcessor.quantize_to_palette(thumb, ACCENT_PALETTE_SIZE)
        return cls.select(palette)


def select_accent(palette: Sequence[Sequence[float]]) -> Color:
    """Shortcut for :meth:`AccentColorSelector.select`."""
    return AccentColorSelector.select(palette)


def extract_accent_color(image: Image.Image) -> Color:
    """Shortcut for :meth:`AccentColorSelector.extract`."""
    return AccentColorSelector.extract(image)


def accent_for_image(image: Image.Image) -> AccentColor:
    """
    Accent colors for ``image``, falling back to neutral gray.

    An empty palette only degrades the tint; it never aborts a render.
    """
    try:
        seed = extract_accent_color(image)
    except EmptyPaletteError as exc:
        logger.warning("%s; using fallback accent %s", exc, FALLBACK_ACCENT)
        seed = FALLBACK_ACCENT
    accent = AccentColor.from_seed(seed)
    logger.debug("Accent %s -> background %s, foreground %s",
                 accent.seed, accent.background, accent.foreground)
    return accent


# =============================================================================
# ANSI COLOR OUTPUT
# =============================================================================

class AnsiColorFormatter:
    """Wrap rendered art in 24-bit ANSI color codes."""

    RESET = ANSI_RESET

    @staticmethod
    def rgb_to_ansi_24bit(r: int, g: int, b: int, foreground: bool = True) -> str:
        """Convert RGB to 24-bit ANSI color code (true color)."""
        code = 38 if foreground else 48
        return f"\033[{code};2;{r};{g};{b}m"

    @classmethod
    def wrap(cls, art: str, accent: AccentColor) -> str:
        """Set background then foreground, emit ``art`` and reset."""
        return (
            cls.rgb_to_ansi_24bit(*accent.background, foreground=False)
            + cls.rgb_to_ansi_24bit(*accent.foreground, foreground=True)
            + art
            + cls.RESET
        )
