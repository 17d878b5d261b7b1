import pytest

from dotmatrix.climg.escape_codes import HIDE_CURSOR, RESET_COLORS, SHOW_CURSOR, fg_rgb
from dotmatrix.climg.image_builder import ImageBuilder, ImageBuilderConfig

FULL = "\u2588"
LOWER = "\u2584"


def _solid(width, height, rgb):
    return bytes((*rgb, 255) * (width * height))


def _builder(skip=False, width=2, height=2):
    return ImageBuilder(width, height, ImageBuilderConfig(skip_unchanged=skip))


def test_build_frames_output_with_cursor_codes():
    output = _builder().build()
    assert output.startswith(HIDE_CURSOR)
    assert output.endswith(RESET_COLORS + SHOW_CURSOR)


def test_empty_builds_are_identical():
    builder = _builder()
    first = builder.build()
    builder.move_to(1, 1)
    assert builder.build() == first


def test_black_image_draws_full_blocks_without_new_colors():
    builder = _builder()
    empty = _builder().build()
    builder.draw_img(_solid(2, 2, (0, 0, 0)))
    output = builder.build()
    assert output.count(FULL) == 2
    assert output.count("38;2;") == empty.count("38;2;")


def test_white_image_sets_foreground_once():
    builder = _builder()
    builder.draw_img(_solid(2, 2, (255, 255, 255)))
    output = builder.build()
    assert output.count(FULL) == 2
    assert output.count(fg_rgb((255, 255, 255))) == 1


def test_two_tone_cell_uses_lower_half_block():
    builder = _builder(width=1, height=2)
    builder.draw_img(bytes([255, 0, 0, 255, 0, 0, 255, 255]))
    output = builder.build()
    assert LOWER in output
    assert fg_rgb((0, 0, 255)) in output


def test_skip_unchanged_redraws_only_changes():
    builder = _builder(skip=True)
    image = _solid(2, 2, (255, 255, 255))
    builder.draw_img(image)
    assert builder.build().count(FULL) == 2
    builder.draw_img(image)
    assert FULL not in builder.build()


def test_without_skip_every_frame_is_drawn():
    builder = _builder(skip=False)
    image = _solid(2, 2, (255, 255, 255))
    builder.draw_img(image)
    builder.build()
    builder.draw_img(image)
    assert builder.build().count(FULL) == 2


def test_move_to_emits_position():
    builder = _builder(width=4, height=4)
    builder.move_to(3, 2)
    assert "\x1b[2;3f" in builder.build()


def test_write_wraps_to_next_row():
    builder = _builder(width=2, height=4)
    builder.write("a")
    builder.write("b")
    assert (builder.cursor_x, builder.cursor_y) == (1, 2)
    assert "\x1b[2;1f" in builder.build()


def test_wrong_image_size_raises():
    with pytest.raises(ValueError):
        _builder().draw_img(bytes(3))