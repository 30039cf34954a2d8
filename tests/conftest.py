"""Pytest configuration and fixtures."""

import pytest
from PIL import Image

from ptouchprint.protocol.raster import RasterImage


@pytest.fixture
def label_image() -> Image.Image:
    """A 40x20 label with a black bar across the middle."""
    image = Image.new("L", (40, 20), 255)
    image.paste(0, (0, 8, 40, 12))
    return image


@pytest.fixture
def raster_a(label_image) -> RasterImage:
    return RasterImage.from_image(label_image)


@pytest.fixture
def raster_b() -> RasterImage:
    """A solid black 10x64 label."""
    return RasterImage.from_image(Image.new("L", (10, 64), 0))


@pytest.fixture
def lpr_path(tmp_path):
    """A path standing in for the lpr executable."""
    path = tmp_path / "lpr"
    path.write_text("#!/bin/sh\ncat > /dev/null\n")
    path.chmod(0o755)
    return path
