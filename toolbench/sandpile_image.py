"""Four-bit palette BMP rendering of a sandpile."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Iterator, List

from toolbench.sandpile import MAX_STABLE, Sandpile

_FILE_HEADER_SIZE = 14
_INFO_HEADER_SIZE = 40
_PALETTE = bytes(
    [
        255, 255, 255, 0,
        0, 255, 0, 0,
        0, 255, 255, 0,
        255, 0, 255, 0,
        0, 0, 0, 0,
    ]
)
_DATA_OFFSET = _FILE_HEADER_SIZE + _INFO_HEADER_SIZE + len(_PALETTE)
_OVERFLOW_COLOR = 4
_BITS_PER_PIXEL = 4
_COLORS_USED = 5


def _color(value: int) -> int:
    return _OVERFLOW_COLOR if value > MAX_STABLE else value


def _row_bytes(row: List[int]) -> Iterator[int]:
    padded_width = len(row) + (-len(row)) % 8
    colors = [_color(v) for v in row] + [0] * (padded_width - len(row))
    for high, low in zip(colors[::2], colors[1::2]):
        yield (high << 4) | low


def encode_bmp(sandpile: Sandpile) -> bytes:
    """Encode the pile as a bottom-up 4-bit BMP; grid row 0 is the bottom."""
    pixels = b"".join(bytes(_row_bytes(row)) for row in sandpile.grid)
    file_size = _DATA_OFFSET + len(pixels)
    file_header = struct.pack("<2sIHHI", b"BM", file_size, 0, 0, _DATA_OFFSET)
    info_header = struct.pack(
        "<IiiHHIIiiII",
        _INFO_HEADER_SIZE,
        sandpile.width,
        sandpile.height,
        1,
        _BITS_PER_PIXEL,
        0,
        0,
        0,
        0,
        _COLORS_USED,
        0,
    )
    return file_header + info_header + _PALETTE + pixels


def write_bmp(sandpile: Sandpile, prefix, number: int) -> Path:
    """Write the pile to ``<prefix><number>.bmp`` and return that path."""
    path = Path(f"{prefix}{number}.bmp")
    path.write_bytes(encode_bmp(sandpile))
    return path