import struct

from toolbench.sandpile import Sandpile
from toolbench.sandpile_image import encode_bmp, write_bmp


def _decode(data):
    offset = struct.unpack_from("<I", data, 10)[0]
    width, height = struct.unpack_from("<ii", data, 18)
    row_len = (len(data) - offset) // height
    grid = []
    for r in range(height):
        row_data = data[offset + r * row_len: offset + (r + 1) * row_len]
        nibbles = []
        for byte in row_data:
            nibbles.extend((byte >> 4, byte & 0x0F))
        grid.append(nibbles[:width])
    return grid


def test_headers():
    pile = Sandpile([[0, 1, 2], [3, 4, 0]])
    data = encode_bmp(pile)
    assert data[:2] == b"BM"
    assert struct.unpack_from("<I", data, 2)[0] == len(data)
    assert struct.unpack_from("<I", data, 10)[0] == 74
    assert struct.unpack_from("<I", data, 14)[0] == 40
    assert struct.unpack_from("<ii", data, 18) == (pile.width, pile.height)
    assert struct.unpack_from("<HH", data, 26) == (1, 4)
    assert struct.unpack_from("<I", data, 46)[0] == 5


def test_palette_bytes():
    data = encode_bmp(Sandpile([[0]]))
    assert data[54:74] == bytes(
        [255, 255, 255, 0, 0, 255, 0, 0, 0, 255, 255, 0, 255, 0, 255, 0, 0, 0, 0, 0]
    )


def test_rows_padded_to_four_bytes():
    for width in range(1, 20):
        pile = Sandpile([[1] * width, [2] * width, [3] * width])
        data = encode_bmp(pile)
        pixel_bytes = len(data) - 74
        assert pixel_bytes % pile.height == 0
        row_len = pixel_bytes // pile.height
        assert row_len % 4 == 0
        assert row_len * 2 >= width


def test_pixel_round_trip_clamps_overflow():
    grid = [[0, 1, 2, 3, 5], [7, 3, 0, 1, 4], [2, 2, 9, 0, 1]]
    decoded = _decode(encode_bmp(Sandpile(grid)))
    assert decoded == [[min(v, 4) if v > 3 else v for v in row] for row in grid]


def test_single_row_bytes():
    data = encode_bmp(Sandpile([[0, 1, 2, 3, 5]]))
    assert data[74:] == bytes([0x01, 0x23, 0x40, 0x00])


def test_write_bmp(tmp_path):
    pile = Sandpile([[1, 2], [3, 0]])
    path = write_bmp(pile, tmp_path / "out", 3)
    assert path == tmp_path / "out3.bmp"
    assert path.read_bytes() == encode_bmp(pile)