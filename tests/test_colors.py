import itertools
import logging

import pytest

from ascii_block_renderer import colors, constants, imaging
from ascii_block_renderer.colors import (
    AccentColor,
    AccentColorSelector,
    AnsiColorFormatter,
    ColorTransform,
    accent_for_image,
    extract_accent_color,
    select_accent,
)
from ascii_block_renderer.constants import FALLBACK_ACCENT
from ascii_block_renderer.errors import EmptyPaletteError
from ascii_block_renderer.imaging import ImageProcessor


# =============================================================================
# COLOR TRANSFORMS
# =============================================================================

def test_background_of_extremes():
    assert ColorTransform.derive_background((0, 0, 0)) == (0, 0, 0)
    assert ColorTransform.derive_background((255, 255, 255)) == (63, 63, 63)


def test_foreground_of_extremes():
    assert ColorTransform.derive_foreground((0, 0, 0)) == (0, 0, 0)
    assert ColorTransform.derive_foreground((255, 255, 255)) == (255, 255, 255)


def test_foreground_clamps_both_ends():
    assert ColorTransform.derive_foreground((200, 0, 0)) == (255, 0, 0)


def test_channels_are_truncated_not_rounded():
    # 3 * 1.2 == 3.6 and 10 * 0.25 == 2.5
    assert ColorTransform.derive_foreground((3, 3, 3)) == (3, 3, 3)
    assert ColorTransform.derive_background((10, 10, 10)) == (2, 2, 2)


def test_transforms_stay_in_range():
    steps = (0, 1, 51, 127, 128, 204, 254, 255)
    for color in itertools.product(steps, repeat=3):
        for derived in (ColorTransform.derive_background(color),
                        ColorTransform.derive_foreground(color)):
            assert all(isinstance(channel, int) for channel in derived)
            assert all(0 <= channel <= 255 for channel in derived)


def test_background_is_darker_than_foreground():
    seed = (40, 120, 220)
    assert sum(ColorTransform.derive_background(seed)) < sum(ColorTransform.derive_foreground(seed))


# =============================================================================
# ACCENT SELECTION
# =============================================================================

GRAYS = [(128, 128, 128), (130, 128, 129), (200, 200, 198), (50, 52, 50)]


@pytest.mark.parametrize("position", range(5))
def test_saturated_entry_wins_from_any_position(position):
    palette = list(GRAYS)
    palette.insert(position, (250, 30, 40))
    assert select_accent(palette) == (250, 30, 40)


def test_ties_keep_first_entry():
    assert select_accent([(255, 0, 0), (0, 255, 0)]) == (255, 0, 0)
    assert select_accent([(0, 255, 0), (255, 0, 0)]) == (0, 255, 0)


def test_gray_and_black_score_zero():
    assert AccentColorSelector.score((0, 0, 0)) == 0.0
    assert AccentColorSelector.score((90, 90, 90)) == 0.0


def test_brightness_floor_keeps_dark_saturated_colors():
    assert AccentColorSelector.score((60, 0, 0)) == pytest.approx(1.0 * (0.4 + 60 / 765))


def test_all_gray_palette_returns_first_entry():
    assert select_accent(GRAYS[:1] + [(10, 10, 10)]) == GRAYS[0]


def test_rescales_from_native_sample_range():
    assert AccentColorSelector.select([(65535, 0, 0)], sample_max=65535) == (255, 0, 0)


def test_empty_palette_raises():
    with pytest.raises(EmptyPaletteError):
        select_accent([])


def test_extract_from_solid_image(solid_image):
    r, g, b = extract_accent_color(solid_image((230, 20, 20), size=(64, 48)))
    assert r > 200
    assert g < 50 and b < 50


def test_extract_leaves_source_untouched(solid_image):
    image = solid_image((10, 200, 30), size=(32, 32))
    before = image.tobytes()
    extract_accent_color(image)
    assert image.size == (32, 32)
    assert image.tobytes() == before


def test_extract_from_palette_image(solid_image):
    image = solid_image((255, 0, 0), size=(32, 32)).convert("P")
    assert extract_accent_color(image) == (255, 0, 0)


def test_color_alias_is_shared():
    assert colors.Color is constants.Color
    assert imaging.Color is constants.Color


def test_accent_for_image_falls_back_on_empty_palette(monkeypatch, solid_image, caplog):
    monkeypatch.setattr(ImageProcessor, "quantize_to_palette", staticmethod(lambda image, colors: []))
    with caplog.at_level(logging.WARNING):
        accent = accent_for_image(solid_image())
    assert accent == AccentColor.from_seed(FALLBACK_ACCENT)
    assert accent.seed == (180, 180, 180)
    assert "fallback accent" in caplog.text


def test_accent_color_derives_pair():
    accent = AccentColor.from_seed((255, 255, 255))
    assert accent.background == (63, 63, 63)
    assert accent.foreground == (255, 255, 255)


# =============================================================================
# ANSI OUTPUT
# =============================================================================

def test_wrap_sets_background_then_foreground_and_resets():
    accent = AccentColor(seed=(1, 2, 3), background=(10, 20, 30), foreground=(200, 210, 220))
    wrapped = AnsiColorFormatter.wrap("█ \n", accent)
    assert wrapped == "\033[48;2;10;20;30m\033[38;2;200;210;220m█ \n\033[0m"
