import numpy as np
import pytest
from PIL import Image

from ascii_block_renderer.errors import DecodeError
from ascii_block_renderer.imaging import ImageProcessor


def test_decode_missing_file(tmp_path):
    with pytest.raises(DecodeError):
        ImageProcessor.decode(tmp_path / "missing.png")


def test_decode_non_image(tmp_path):
    path = tmp_path / "notes.png"
    path.write_text("definitely not a png")
    with pytest.raises(DecodeError):
        ImageProcessor.decode(path)


def test_decode_composites_transparency_over_white(tmp_path):
    path = tmp_path / "clear.png"
    Image.new("RGBA", (4, 4), (0, 0, 0, 0)).save(path)
    decoded = ImageProcessor.decode(path)
    assert decoded.mode == "RGB"
    assert decoded.getpixel((0, 0)) == (255, 255, 255)


def test_decode_keeps_grayscale(tmp_path):
    path = tmp_path / "gray.png"
    Image.new("L", (3, 2), 77).save(path)
    decoded = ImageProcessor.decode(path)
    assert decoded.mode == "L"
    assert decoded.size == (3, 2)


def test_decode_scales_16_bit_grayscale(tmp_path):
    path = tmp_path / "deep.png"
    Image.fromarray(np.full((4, 4), 65535, dtype=np.uint16)).save(path)
    decoded = ImageProcessor.decode(path)
    assert decoded.mode == "L"
    assert decoded.getpixel((0, 0)) == 255


def test_resize_ignores_aspect(solid_image):
    assert ImageProcessor.resize(solid_image(size=(10, 10)), 40, 3).size == (40, 3)


def test_blur_returns_new_image(solid_image):
    image = solid_image()
    blurred = ImageProcessor.blur(image)
    assert blurred is not image
    assert blurred.size == image.size


def test_blur_rejects_negative_sigma(solid_image):
    with pytest.raises(ValueError):
        ImageProcessor.blur(solid_image(), sigma=-1.0)


def test_grayscale_conversion(solid_image):
    gray = ImageProcessor.to_grayscale(solid_image((128, 128, 128)))
    assert gray.mode == "L"
    assert ImageProcessor.pixels(gray)[0, 0] == 128
    assert ImageProcessor.to_grayscale(gray) is gray


def test_normalize_keeps_8_bit_images(solid_image):
    image = solid_image()
    assert ImageProcessor.normalize(image) is image
    gray = Image.new("L", (2, 2), 9)
    assert ImageProcessor.normalize(gray) is gray


@pytest.mark.parametrize(
    "image, mode, value",
    [
        (Image.fromarray(np.full((4, 4), 65535, dtype=np.uint16)), "L", 255),
        (Image.new("I", (4, 4), 32896), "L", 128),
        (Image.new("F", (4, 4), 200.0), "L", 200),
        (Image.new("1", (4, 4), 1), "L", 255),
        (Image.new("RGB", (4, 4), (255, 0, 0)).convert("P"), "RGB", (255, 0, 0)),
        (Image.new("RGBA", (4, 4), (0, 0, 0, 0)), "RGB", (255, 255, 255)),
        (Image.new("LA", (4, 4), (0, 255)), "RGB", (0, 0, 0)),
        (Image.new("CMYK", (4, 4), (0, 0, 0, 0)), "RGB", (255, 255, 255)),
    ],
)
def test_normalize_flattens_to_8_bit(image, mode, value):
    normalized = ImageProcessor.normalize(image)
    assert normalized.mode == mode
    assert normalized.getpixel((0, 0)) == value


def test_normalized_deep_image_can_be_blurred():
    deep = Image.fromarray(np.full((8, 8), 50000, dtype=np.uint16))
    blurred = ImageProcessor.blur(ImageProcessor.normalize(deep))
    assert blurred.mode == "L"
    assert blurred.getpixel((4, 4)) == 194


def test_quantize_limits_palette_size():
    rng = np.random.default_rng(7)
    image = Image.fromarray(rng.integers(0, 256, size=(40, 40, 3), dtype=np.uint8))
    palette = ImageProcessor.quantize_to_palette(image, 5)
    assert 1 <= len(palette) <= 5
    for color in palette:
        assert len(color) == 3
        assert all(0 <= channel <= 255 for channel in color)


def test_quantize_two_color_image():
    image = Image.new("RGB", (20, 20), (0, 0, 255))
    image.paste((255, 255, 0), (0, 0, 10, 20))
    palette = ImageProcessor.quantize_to_palette(image, 5)
    assert sorted(palette) == [(0, 0, 255), (255, 255, 0)]
