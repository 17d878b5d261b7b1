import pytest

from dotmatrix.climg.img_to_colors import ColorBlock, to_colors


def _image(rows):
    return bytes(channel for row in rows for pixel in row for channel in (*pixel, 255))


def test_pairs_rows_into_blocks():
    red, green, blue, white = (255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 255)
    img = _image([[red, green], [blue, white]])
    assert to_colors(img, 2, 2) == [
        ColorBlock(top=red, bottom=blue),
        ColorBlock(top=green, bottom=white),
    ]


def test_alpha_is_ignored():
    img = bytes([1, 2, 3, 0, 4, 5, 6, 99])
    assert to_colors(img, 1, 2) == [ColorBlock(top=(1, 2, 3), bottom=(4, 5, 6))]


@pytest.mark.parametrize("width, height", [(3, 4), (3, 5), (1, 1), (4, 7)])
def test_block_count(width, height):
    img = bytes(width * height * 4)
    assert len(to_colors(img, width, height)) == width * (height // 2)


def test_odd_last_row_dropped():
    a, b, c = (1, 1, 1), (2, 2, 2), (3, 3, 3)
    img = _image([[a], [b], [c]])
    assert to_colors(img, 1, 3) == [ColorBlock(top=a, bottom=b)]


def test_default_block_is_black():
    assert ColorBlock() == ColorBlock(top=(0, 0, 0), bottom=(0, 0, 0))


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        to_colors(bytes(15), 2, 2)