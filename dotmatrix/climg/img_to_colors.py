"""Pairing RGBA image rows into half-block colour cells."""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

Color = Tuple[int, int, int]
_BLACK: Color = (0, 0, 0)


@dataclass(frozen=True)
class ColorBlock:
    """One character cell: the colour of its upper and lower half."""

    top: Color = _BLACK
    bottom: Color = _BLACK


def to_colors(img: Sequence[int], width: int, height: int) -> List[ColorBlock]:
    """Turn RGBA bytes into cells, pairing each even row with the one below.

    An odd last row is dropped.
    """
    if len(img) != width * height * 4:
        raise ValueError("Image dimensions do not match data length")

    pixels = [tuple(img[i : i + 3]) for i in range(0, len(img), 4)]
    return [
        ColorBlock(top=pixels[base + i], bottom=pixels[base + width + i])
        for base in range(0, (height // 2) * 2 * width, 2 * width)
        for i in range(width)
    ]