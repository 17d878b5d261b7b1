import pytest

from dotmatrix.gameboy.ppu_types import (
    DMGPalette,
    Pixel,
    PPUMode,
    VRAMBank,
    vram_bank_from,
)


@pytest.mark.parametrize("value", range(16))
def test_vram_bank_uses_lowest_bit(value):
    bank = vram_bank_from(value)
    assert bank is (VRAMBank.BANK1 if value & 1 else VRAMBank.BANK0)


def test_vram_bank_from_attribute_bit():
    assert vram_bank_from(0b1000 >> 3) is VRAMBank.BANK1
    assert vram_bank_from(2) is VRAMBank.BANK0


def test_ppu_mode_round_trips_through_stat_bits():
    for mode in PPUMode:
        assert PPUMode(int(mode) & 0b11) is mode
    assert PPUMode(0) is PPUMode.HBLANK
    assert PPUMode(3) is PPUMode.DRAW


def test_transparent_pixel_has_lowest_priority():
    pixel = Pixel.transparent()
    assert pixel.sprite_priority == 40
    assert pixel.color == 0
    assert pixel.background_priority is False


def test_pixel_default_and_equality():
    assert Pixel() == Pixel(0, 0, 0, False)
    assert Pixel(color=2) != Pixel(color=3)


def test_default_palette_endpoints():
    palette = DMGPalette()
    assert palette.color_of(0) == (0xFF, 0xFF, 0xFF, 0xFF)
    assert palette.color_of(3) == (0x00, 0x00, 0x00, 0xFF)


def test_default_palette_darkens_and_is_opaque():
    palette = DMGPalette()
    shades = [palette.color_of(i) for i in range(4)]
    reds = [shade[0] for shade in shades]
    assert reds == sorted(reds, reverse=True)
    assert all(shade[3] == 0xFF for shade in shades)


def test_custom_palette():
    colors = ((1, 2, 3, 4), (5, 6, 7, 8), (9, 10, 11, 12), (13, 14, 15, 16))
    palette = DMGPalette(colors)
    assert palette.color_of(2) == (9, 10, 11, 12)


@pytest.mark.parametrize("color_id", [-1, 4, 255])
def test_palette_rejects_out_of_range_ids(color_id):
    with pytest.raises(IndexError):
        DMGPalette().color_of(color_id)