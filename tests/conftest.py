import logging

import pytest
from PIL import Image

from ascii_block_renderer.logging_utils import _remove_managed_handlers


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    _remove_managed_handlers(logging.getLogger())


@pytest.fixture
def solid_image():
    """Factory for uniform RGB images."""

    def _make(color=(128, 128, 128), size=(10, 10)):
        return Image.new("RGB", size, color)

    return _make


@pytest.fixture
def image_file(tmp_path, solid_image):
    """Factory that writes an image to ``tmp_path`` and returns its path."""

    def _write(image=None, name="source.png"):
        path = tmp_path / name
        (image if image is not None else solid_image()).save(path)
        return path

    return _write
