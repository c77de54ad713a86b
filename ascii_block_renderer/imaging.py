#!/usr/bin/env python3
"""
Block ASCII Renderer - Image Processing
=======================================
Thin Pillow adapter used by the renderer and the accent color extractor:
decoding, Gaussian blur, exact resizing, grayscale conversion, palette
quantization and raw pixel access.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Union

import numpy as np
from PIL import Image, ImageFilter

from ascii_block_renderer.constants import BLUR_RADIUS, BLUR_SIGMA, Color
from ascii_block_renderer.errors import DecodeError

logger = logging.getLogger(__name__)

# Largest sample value of 16-bit and 32-bit integer modes
_DEEP_SAMPLE_MAX = {
    'I;16': 65535,
    'I;16L': 65535,
    'I;16B': 65535,
    'I': 65535,
}


@contextmanager
def _step(description: str) -> Iterator[None]:
    """Report Pillow failures inside the block as :class:`DecodeError`."""
    try:
        yield
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"Failed to {description}: {exc}") from exc


class ImageProcessor:
    """Image operations delegated to Pillow."""

    # Sample range of every image leaving normalize()
    SAMPLE_MAX = 255

    @staticmethod
    def normalize(image: Image.Image) -> Image.Image:
        """
        Flatten any Pillow image to 8-bit 'RGB' or 'L'.

        Transparent pixels are composited over white and deep integer
        grayscale is scaled down to 8 bits. 'RGB' and 'L' images are
        returned as they are.

        Args:
            image: Image in any Pillow mode

        Returns:
            Image in 'RGB' or 'L' mode
        """
        if image.mode in ('RGB', 'L'):
            return image
        with _step(f"convert image from mode {image.mode}"):
            if image.mode in _DEEP_SAMPLE_MAX:
                samples = np.asarray(image, dtype=np.float64) * 255.0
                samples /= _DEEP_SAMPLE_MAX[image.mode]
                return Image.fromarray(np.clip(samples, 0, 255).astype(np.uint8))
            if image.mode in ('RGBA', 'LA', 'PA') or 'transparency' in image.info:
                rgba = image.convert('RGBA')
                background = Image.new('RGB', rgba.size, (255, 255, 255))
                background.paste(rgba, mask=rgba.split()[3])
                return background
            if image.mode in ('1', 'F'):
                return image.convert('L')
            return image.convert('RGB')

    @classmethod
    def decode(cls, path: Union[str, Path]) -> Image.Image:
        """
        Read an image from disk and flatten it to 8-bit RGB or L.

        Args:
            path: Image file in any format Pillow can read

        Returns:
            Fully loaded image in 'RGB' or 'L' mode
        """
        with _step(f"decode image '{path}'"):
            with Image.open(path) as src:
                src.load()
                logger.debug("Decoded %s: %sx%s, mode %s", path, src.width, src.height, src.mode)
                if src.mode in ('RGB', 'L'):
                    return src.copy()
                return cls.normalize(src)

    @staticmethod
    def blur(image: Image.Image, radius: float = BLUR_RADIUS,
             sigma: float = BLUR_SIGMA) -> Image.Image:
        """
        Apply a Gaussian blur.

        ``radius`` 0 lets the kernel extent follow ``sigma``; Pillow always
        sizes its kernel from the standard deviation, so only ``sigma`` is
        forwarded.
        """
        if radius < 0 or sigma < 0:
            raise ValueError(f"Blur radius and sigma must not be negative: {radius}, {sigma}")
        with _step("blur image"):
            return image.filter(ImageFilter.GaussianBlur(radius=sigma))

    @staticmethod
    def resize(image: Image.Image, width: int, height: int) -> Image.Image:
        """Resample to exactly ``width`` x ``height``, ignoring aspect ratio."""
        with _step(f"resize image to {width}x{height}"):
            return image.resize((width, height), Image.Resampling.LANCZOS)

    @staticmethod
    def to_grayscale(image: Image.Image) -> Image.Image:
        """Convert a normalized image to 8-bit 'L'."""
        if image.mode == 'L':
            return image
        with _step("convert image to grayscale"):
            return image.convert('L')

    @staticmethod
    def pixels(image: Image.Image) -> np.ndarray:
        """Raw pixel buffer, indexed as ``[y, x]``."""
        return np.asarray(image)

    @staticmethod
    def quantize_to_palette(image: Image.Image, colors: int) -> List[Color]:
        """
        Reduce the image to at most ``colors`` representative colors.

        Args:
            image: Source image
            colors: Maximum palette size

        Returns:
            Palette entries actually used, in palette index order
        """
        with _step(f"quantize image to {colors} colors"):
            quantized = image.convert('RGB').quantize(
                colors=colors,
                method=Image.Quantize.MEDIANCUT,
                dither=Image.Dither.NONE,
            )
            palette = quantized.getpalette() or []
            used = sorted(index for _, index in quantized.getcolors(maxcolors=256) or [])

        entries = []
        for index in used:
            rgb = palette[index * 3:index * 3 + 3]
            if len(rgb) == 3:
                entries.append((rgb[0], rgb[1], rgb[2]))
        logger.debug("Quantized palette: %s", entries)
        return entries
