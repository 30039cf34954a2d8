"""Tests for the P-touch job binary builder and command encoding."""

import io

import packbits
import pytest

from ptouchprint.protocol import commands
from ptouchprint.protocol.builder import PTouchJobBinary
from ptouchprint.protocol.raster import RasterImage

PREAMBLE = b"\x00" * 100 + b"\x1b\x40" + b"\x1b\x69\x61\x01"


class TestCommands:
    """Tests for individual command encoders."""

    def test_print_information(self):
        assert commands.print_information(12) == b"\x1b\x69\x7a\x84\x00\x0c\x00\x00\x00\x00\x00\x00\x00"

    def test_print_information_length(self):
        assert len(commands.print_information(24)) == 13

    @pytest.mark.parametrize("auto_cut, expected", [(True, b"\x1b\x69\x4d\x40"), (False, b"\x1b\x69\x4d\x00")])
    def test_various_mode(self, auto_cut, expected):
        assert commands.various_mode(auto_cut) == expected

    def test_cut_each(self):
        assert commands.cut_each(3) == b"\x1b\x69\x41\x03"

    @pytest.mark.parametrize("pages", [0, 256, -1])
    def test_cut_each_out_of_range(self, pages):
        with pytest.raises(ValueError, match="Cut interval"):
            commands.cut_each(pages)

    @pytest.mark.parametrize(
        "half_cut, chain_printing, value",
        [(True, False, 0x0C), (False, False, 0x08), (True, True, 0x04), (False, True, 0x00)],
    )
    def test_advanced_mode(self, half_cut, chain_printing, value):
        assert commands.advanced_mode(half_cut, chain_printing) == b"\x1b\x69\x4b" + bytes([value])

    def test_margin_amount(self):
        assert commands.margin_amount(14) == b"\x1b\x69\x64\x0e\x00"
        assert commands.margin_amount(0x1234) == b"\x1b\x69\x64\x34\x12"

    def test_margin_amount_out_of_range(self):
        with pytest.raises(ValueError, match="Margin"):
            commands.margin_amount(0x10000)

    def test_blank_raster_line(self):
        assert commands.raster_line(b"\x00" * commands.LINE_LENGTH_BYTES) == b"\x5a"

    def test_raster_line_is_packbits_encoded(self):
        line = b"\xff" * 8 + b"\x00" * 8
        packed = packbits.encode(line)

        encoded = commands.raster_line(line)

        assert encoded[:1] == b"\x47"
        assert int.from_bytes(encoded[1:3], "little") == len(packed)
        assert packbits.decode(encoded[3:]) == line


class TestPTouchJobBinary:
    """Tests for PTouchJobBinary."""

    def test_preamble(self):
        assert PTouchJobBinary().get_data() == PREAMBLE

    def test_commands_appended_in_order(self):
        builder = PTouchJobBinary()
        builder.print_info(12)
        builder.mode(True)
        builder.cut_each(1)
        builder.advanced_mode(True, False)
        builder.margin(14)
        builder.compression_mode()

        assert builder.get_data() == PREAMBLE + (
            b"\x1b\x69\x7a\x84\x00\x0c\x00\x00\x00\x00\x00\x00\x00"
            b"\x1b\x69\x4d\x40"
            b"\x1b\x69\x41\x01"
            b"\x1b\x69\x4b\x0c"
            b"\x1b\x69\x64\x0e\x00"
            b"\x4d\x02"
        )

    def test_raster_image(self):
        blank = b"\x00" * 16
        full = b"\xff" * 16
        image = RasterImage([blank, full, blank])
        builder = PTouchJobBinary()

        builder.raster_image(image)

        body = builder.get_data()[len(PREAMBLE) :]
        packed = packbits.encode(full)
        assert body == b"\x5a" + b"\x47" + len(packed).to_bytes(2, "little") + packed + b"\x5a"

    def test_page_commands(self):
        builder = PTouchJobBinary()
        builder.print_page()
        builder.print_and_feed()
        assert builder.get_data().endswith(b"\x0c\x1a")

    def test_get_data_returns_copy(self):
        builder = PTouchJobBinary()
        data = builder.get_data()
        builder.print_page()
        assert data == PREAMBLE

    def test_display_hex(self):
        builder = PTouchJobBinary()
        stream = io.StringIO()

        builder.display_hex(stream)

        lines = stream.getvalue().splitlines()
        # 106 byte preamble -> 6 full rows and one partial
        assert len(lines) == 7
        assert lines[0] == "00000000  " + " ".join(["00"] * 16) + "  |................|"
        assert lines[-1].startswith("00000060  00 00 00 00 1b 40 1b 69 61 01")
        assert lines[-1].endswith("|.....@.ia.|")

    def test_display_hex_defaults_to_stdout(self, capsys):
        PTouchJobBinary().display_hex()
        assert capsys.readouterr().out.startswith("00000000")
