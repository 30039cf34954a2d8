"""Accumulates P-touch raster commands into a job binary."""

import sys
from typing import TextIO

from ptouchprint.protocol import commands
from ptouchprint.protocol.raster import RasterImage

HEX_DUMP_WIDTH = 16


class PTouchJobBinary:
    """Byte buffer for a single P-touch print job.

    Creating a builder writes the invalidate/initialize preamble and switches
    the printer to raster mode. Callers then issue configuration commands,
    raster images and page breaks, and finish with print_and_feed().
    """

    def __init__(self) -> None:
        self._data = bytearray()
        self._append(commands.INVALIDATE)
        self._append(commands.INITIALIZE)
        self._append(commands.RASTER_MODE)

    def _append(self, data: bytes) -> None:
        self._data.extend(data)

    def print_info(self, tape_size: int) -> None:
        """Set the media width in mm."""
        self._append(commands.print_information(tape_size))

    def mode(self, auto_cut: bool) -> None:
        """Enable or disable automatic cutting."""
        self._append(commands.various_mode(auto_cut))

    def cut_each(self, pages: int) -> None:
        """Cut after every `pages` labels."""
        self._append(commands.cut_each(pages))

    def advanced_mode(self, half_cut: bool, chain_printing: bool) -> None:
        self._append(commands.advanced_mode(half_cut, chain_printing))

    def margin(self, dots: int) -> None:
        """Set the feed margin in dots."""
        self._append(commands.margin_amount(dots))

    def compression_mode(self) -> None:
        """Switch raster transfer to TIFF (PackBits) compression."""
        self._append(commands.COMPRESSION_TIFF)

    def raster_image(self, image: RasterImage) -> None:
        for line in image.lines:
            self._append(commands.raster_line(line))

    def print_page(self) -> None:
        """Print the current page and start a new one."""
        self._append(commands.PRINT_PAGE)

    def print_and_feed(self) -> None:
        """Print the final page and feed the tape."""
        self._append(commands.PRINT_AND_FEED)

    def get_data(self) -> bytes:
        return bytes(self._data)

    def display_hex(self, stream: TextIO | None = None) -> None:
        """Write a hexdump of the job, 16 bytes per row, to stream (default stdout)."""
        out = stream if stream is not None else sys.stdout
        data = self._data
        for offset in range(0, len(data), HEX_DUMP_WIDTH):
            chunk = data[offset : offset + HEX_DUMP_WIDTH]
            hex_part = " ".join(f"{b:02x}" for b in chunk)
            text_part = "".join(chr(b) if 0x20 <= b < 0x7F else "." for b in chunk)
            out.write(f"{offset:08x}  {hex_part:<{HEX_DUMP_WIDTH * 3 - 1}}  |{text_part}|\n")
