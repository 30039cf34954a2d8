"""P-touch raster protocol encoding."""

from ptouchprint.protocol.builder import PTouchJobBinary
from ptouchprint.protocol.commands import LINE_LENGTH_BYTES, PRINT_HEAD_PINS
from ptouchprint.protocol.raster import RasterImage

__all__ = [
    "LINE_LENGTH_BYTES",
    "PRINT_HEAD_PINS",
    "PTouchJobBinary",
    "RasterImage",
]
