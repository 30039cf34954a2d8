"""Convert PIL images into P-touch raster lines."""

import logging
from collections.abc import Iterable
from pathlib import Path

from PIL import Image

from ptouchprint.protocol.commands import LINE_LENGTH_BYTES, PRINT_HEAD_PINS

logger = logging.getLogger(__name__)


class RasterImage:
    """A single monochrome page, stored as print head raster lines.

    Each raster line is one column of dots across the tape, packed
    MSB-first into LINE_LENGTH_BYTES bytes (1 = print). Lines are fed
    along the length of the tape in order.
    """

    def __init__(self, lines: Iterable[bytes]) -> None:
        self._lines = tuple(bytes(line) for line in lines)
        if not self._lines:
            raise ValueError("A raster image needs at least one line")
        for index, line in enumerate(self._lines):
            if len(line) != LINE_LENGTH_BYTES:
                raise ValueError(f"Raster line {index} is {len(line)} bytes, expected {LINE_LENGTH_BYTES}")

    @property
    def lines(self) -> tuple[bytes, ...]:
        """The raster lines of this image."""
        return self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"RasterImage(lines={len(self._lines)})"

    @classmethod
    def from_image(cls, image: Image.Image, threshold: int = 128) -> "RasterImage":
        """Rasterize a PIL image.

        The image is laid out as it should appear on the label: its width
        runs along the tape and its height across it. Images shorter than
        the print head are centered.

        Args:
            image: Source image in any mode.
            threshold: Grey level below which a pixel is printed (0-255).

        Returns:
            RasterImage with one line per image column.

        Raises:
            ValueError: If the image is empty or taller than the print head.
        """
        if not 0 <= threshold <= 255:
            raise ValueError(f"Threshold must be between 0 and 255, got {threshold}")

        width, height = image.size
        if width == 0 or height == 0:
            raise ValueError("Cannot rasterize an empty image")
        if height > PRINT_HEAD_PINS:
            raise ValueError(f"Image height {height}px exceeds the {PRINT_HEAD_PINS} pin print head")

        # Flatten transparency onto white so transparent areas do not print
        if image.mode in ("RGBA", "LA", "P"):
            image = image.convert("RGBA")
            background = Image.new("RGBA", image.size, (255, 255, 255, 255))
            image = Image.alpha_composite(background, image)
        grey = image.convert("L")

        canvas = Image.new("L", (width, PRINT_HEAD_PINS), 255)
        canvas.paste(grey, (0, (PRINT_HEAD_PINS - height) // 2))

        # Mode "1" packs 255 as a set bit, so dark pixels map to 255
        mono = canvas.point(lambda p: 255 if p < threshold else 0, mode="1")

        # Rotate so each image column becomes a row of PRINT_HEAD_PINS pixels
        rotated = mono.transpose(Image.Transpose.ROTATE_270)
        data = rotated.tobytes()

        lines = [data[i : i + LINE_LENGTH_BYTES] for i in range(0, len(data), LINE_LENGTH_BYTES)]
        logger.debug(f"Rasterized {width}x{height} image into {len(lines)} lines")
        return cls(lines)

    @classmethod
    def from_file(cls, path: str | Path, threshold: int = 128) -> "RasterImage":
        """Load and rasterize an image file readable by PIL."""
        with Image.open(path) as image:
            image.load()
            return cls.from_image(image, threshold=threshold)
