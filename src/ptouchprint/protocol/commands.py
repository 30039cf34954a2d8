"""P-touch raster command bytes."""

import packbits

# Print head geometry
PRINT_HEAD_PINS = 128
LINE_LENGTH_BYTES = PRINT_HEAD_PINS // 8

ESC = b"\x1b"

INVALIDATE = b"\x00" * 100
INITIALIZE = ESC + b"\x40"
RASTER_MODE = ESC + b"\x69\x61\x01"

# Print information flags: 0x80 = printer recovery on, 0x04 = media width valid
PRINT_INFO_FLAGS = 0x84

# Various mode settings (ESC i M)
MODE_AUTO_CUT = 0x40

# Advanced mode settings (ESC i K)
ADVANCED_HALF_CUT = 0x04
ADVANCED_NO_CHAIN_PRINTING = 0x08

COMPRESSION_TIFF = b"\x4d\x02"

RASTER_LINE = b"\x47"
ZERO_RASTER_LINE = b"\x5a"
PRINT_PAGE = b"\x0c"  # Print without feeding
PRINT_AND_FEED = b"\x1a"  # Print with feeding (last page)


def print_information(tape_size: int, raster_lines: int = 0) -> bytes:
    return (
        ESC
        + b"\x69\x7a"
        + bytes([PRINT_INFO_FLAGS, 0x00, tape_size & 0xFF, 0x00])
        + raster_lines.to_bytes(4, "little")
        + b"\x00\x00"
    )


def various_mode(auto_cut: bool) -> bytes:
    return ESC + b"\x69\x4d" + bytes([MODE_AUTO_CUT if auto_cut else 0x00])


def cut_each(pages: int) -> bytes:
    if not 1 <= pages <= 0xFF:
        raise ValueError(f"Cut interval must be between 1 and 255 pages, got {pages}")
    return ESC + b"\x69\x41" + bytes([pages])


def advanced_mode(half_cut: bool, chain_printing: bool) -> bytes:
    value = 0x00
    if half_cut:
        value |= ADVANCED_HALF_CUT
    if not chain_printing:
        value |= ADVANCED_NO_CHAIN_PRINTING
    return ESC + b"\x69\x4b" + bytes([value])


def margin_amount(dots: int) -> bytes:
    if not 0 <= dots <= 0xFFFF:
        raise ValueError(f"Margin must be between 0 and 65535 dots, got {dots}")
    return ESC + b"\x69\x64" + dots.to_bytes(2, "little")


def raster_line(line: bytes) -> bytes:
    """Encode one raster line, using the zero-line command for blank lines."""
    if not any(line):
        return ZERO_RASTER_LINE
    packed = packbits.encode(line)
    return RASTER_LINE + len(packed).to_bytes(2, "little") + packed
