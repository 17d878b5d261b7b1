import pytest

from dotmatrix.gameboy.color_ram import ColorRamController
from dotmatrix.gameboy.ppu_types import Pixel, PPUMode


@pytest.mark.parametrize("value", list(range(64)) + [0x80 | i for i in range(64)])
def test_spec_round_trip(value):
    ram = ColorRamController()
    ram.write_spec(value)
    assert ram.read_spec() == value


def test_default_colors_are_opaque_black():
    ram = ColorRamController()
    assert ram.get_color(0, 0) == (0, 0, 0, 255)
    assert ram.get_color(7, 3) == (0, 0, 0, 255)


def test_auto_increment_advances_and_wraps():
    ram = ColorRamController()
    ram.write_spec(0x80 | 62)
    ram.write_data(0, PPUMode.HBLANK)
    assert ram.read_spec() == 0x80 | 63
    ram.write_data(0, PPUMode.HBLANK)
    assert ram.read_spec() == 0x80


def test_no_increment_without_flag():
    ram = ColorRamController()
    ram.write_spec(4)
    ram.write_data(0x11, PPUMode.HBLANK)
    assert ram.read_spec() == 4


def test_write_blocked_during_draw_but_index_advances():
    ram = ColorRamController()
    ram.write_spec(0x80)
    ram.write_data(0xFF, PPUMode.DRAW)
    assert ram.read_spec() == 0x81
    assert ram.data[0] == 0
    assert ram.get_color(0, 0) == (0, 0, 0, 255)


def test_white_entry():
    ram = ColorRamController()
    ram.write_spec(0x80)
    ram.write_data(0xFF, PPUMode.HBLANK)
    ram.write_data(0x7F, PPUMode.HBLANK)
    assert ram.get_color(0, 0) == (255, 255, 255, 255)


def test_pure_red_entry_in_second_palette():
    ram = ColorRamController()
    ram.write_spec(0x80 | 8)
    ram.write_data(0x1F, PPUMode.VBLANK)
    ram.write_data(0x00, PPUMode.VBLANK)
    assert ram.get_color(1, 0) == (255, 0, 0, 255)


def test_read_data_byte_lanes():
    ram = ColorRamController()
    ram.write_spec(0)
    ram.write_data(0x12, PPUMode.HBLANK)
    ram.write_spec(1)
    assert ram.read_data() == 0x12
    ram.write_spec(0)
    assert ram.read_data() == 0


def test_color_of_matches_get_color():
    ram = ColorRamController()
    ram.write_spec(0x80 | 10)
    ram.write_data(0xFF, PPUMode.OAM_SCAN)
    ram.write_data(0x7F, PPUMode.OAM_SCAN)
    pixel = Pixel(color=1, palette=1)
    assert ram.color_of(pixel) == ram.get_color(1, 1)
    assert ram.color_of(pixel) == (255, 255, 255, 255)