"""Test the ESC * bit-image encoder

Covered:

- band splitting and zero padding of the last band
- column-major transposition, MSB = topmost dot
- frame header (mode selector, little-endian column count)
- head width limit
"""
# Standard imports
import logging

# Custom imports
import pytest

# Local imports
from tlprint.commons import DEFAULT_MAX_COLUMNS
from tlprint.errors import InvalidRaster
from tlprint.protocol import (
    BitImageMode,
    Raster,
    band_count,
    encode_bit_image,
    encode_bit_image_bytes,
    iter_bands,
    mode_spec,
    transpose_band,
    unpack_band,
    write_bit_image,
)
from tlprint.transport import BufferSink
from .misc import BIT_IMAGE, HEADER_SIZE, THERMAL_TXT
from .misc import padded_band, random_raster, text_to_raster

ALL_MODES = list(BitImageMode)
MODE_IDS = [mode.name for mode in ALL_MODES]


def reference_bitimage(text, inverted, bank):
    """Straightforward per-dot conversion of a 0/1 drawing, band after band"""
    lines = text.strip().split("\n")
    width = len(lines[0])
    banks = (len(lines) + bank - 1) // bank
    out = bytearray()
    for i in range(banks):
        for j in range(width):
            byte = 0
            for k in range(bank):
                line_no = i * bank + k
                # Padding lines are always 0
                if line_no < len(lines):
                    char = lines[line_no][j]
                    if char == ("0" if inverted else "1"):
                        byte |= 0x80 >> (k % 8)
                if k % 8 == 7:
                    out.append(byte)
                    byte = 0
    return bytes(out)


def test_all_dark_8x8_single_density():
    """8x8 dark square in 8-dot single density is one frame of 0xFF bytes"""
    raster = Raster((1,) * 64, 8)

    frames = list(encode_bit_image(raster, BitImageMode.DOTS_8_SINGLE))

    assert frames == [b"\x1b*\x00\x08\x00" + b"\xff" * 8]


def test_single_dot_24_double_density():
    """One dark dot gives its top bit set and 23 blank padding rows"""
    raster = Raster((1,), 1)

    frames = list(encode_bit_image(raster, BitImageMode.DOTS_24_DOUBLE))

    assert frames == [b"\x1b*\x21\x01\x00" + b"\x80\x00\x00"]


def test_diagonal_bit_order():
    """Dot on row r of column r must land on bit 7 - r"""
    raster = Raster.from_rows([[1 if row == column else 0 for column in range(8)] for row in range(8)])

    (frame,) = encode_bit_image(raster, BitImageMode.DOTS_8_DOUBLE)

    assert frame[HEADER_SIZE:] == bytes([0x80, 0x40, 0x20, 0x10, 0x08, 0x04, 0x02, 0x01])


def test_24_dot_byte_order():
    """First byte of a column holds the topmost 8 dots"""
    rows = [[0, 0] for _ in range(24)]
    rows[9][0] = 1
    rows[23][1] = 1
    raster = Raster.from_rows(rows)

    (frame,) = encode_bit_image(raster, BitImageMode.DOTS_24_SINGLE)

    assert frame[HEADER_SIZE:] == b"\x00\x40\x00" + b"\x00\x00\x01"


@pytest.mark.parametrize(
    "mode, selector",
    [
        (BitImageMode.DOTS_8_SINGLE, 0x00),
        (BitImageMode.DOTS_8_DOUBLE, 0x01),
        (BitImageMode.DOTS_24_SINGLE, 0x20),
        (BitImageMode.DOTS_24_DOUBLE, 0x21),
    ],
    ids=MODE_IDS,
)
def test_frame_header(mode, selector):
    """Header is ESC * m nL nH with the column count in little endian"""
    raster = Raster.blank(300, 1)

    (frame,) = encode_bit_image(raster, mode)

    assert frame[:HEADER_SIZE] == BIT_IMAGE + bytes([selector, 0x2C, 0x01])
    assert len(frame) == HEADER_SIZE + 300 * mode_spec(mode).bytes_per_column


@pytest.mark.parametrize("mode", ALL_MODES, ids=MODE_IDS)
@pytest.mark.parametrize("height", [1, 7, 8, 9, 23, 24, 25, 48, 100])
def test_frame_count_and_size(mode, height):
    """ceil(height / pitch) frames, each carrying width * pitch / 8 bytes"""
    pitch = mode_spec(mode).pitch
    raster = random_raster(13, height, seed=height)

    frames = list(encode_bit_image(raster, mode))

    assert len(frames) == -(-height // pitch) == band_count(height, pitch)
    for frame in frames:
        assert len(frame) - HEADER_SIZE == 13 * pitch // 8


@pytest.mark.parametrize("mode", ALL_MODES, ids=MODE_IDS)
def test_empty_raster(mode):
    """No rows, no frames, no error"""
    raster = Raster.blank(16, 0)

    assert list(encode_bit_image(raster, mode)) == []
    assert encode_bit_image_bytes(raster, mode) == b""


@pytest.mark.parametrize("mode", ALL_MODES, ids=MODE_IDS)
def test_round_trip(mode):
    """Unpacking every band gives back the padded source rows"""
    pitch = mode_spec(mode).pitch
    raster = random_raster(37, 53, seed=7)

    frames = list(encode_bit_image(raster, mode))
    tops = list(iter_bands(raster, pitch))

    assert len(frames) == len(tops)
    for frame, top in zip(frames, tops):
        assert unpack_band(frame[HEADER_SIZE:], raster.width, pitch) == padded_band(raster, top, pitch)


@pytest.mark.parametrize("mode", ALL_MODES, ids=MODE_IDS)
def test_idempotence(mode):
    raster = random_raster(40, 30, seed=3)

    assert list(encode_bit_image(raster, mode)) == list(encode_bit_image(raster, mode))


@pytest.mark.parametrize(
    "mode", [BitImageMode.DOTS_8_SINGLE, BitImageMode.DOTS_24_DOUBLE], ids=["8_dots", "24_dots"]
)
def test_exact_multiple_has_no_padded_band(mode):
    """pitch rows give one full band; one more row adds a band of 1 real row"""
    pitch = mode_spec(mode).pitch
    groups = pitch // 8
    exact = Raster((1,) * (3 * pitch), 3)
    taller = Raster((1,) * (3 * (pitch + 1)), 3)

    exact_frames = list(encode_bit_image(exact, mode))
    taller_frames = list(encode_bit_image(taller, mode))

    assert len(exact_frames) == 1
    assert exact_frames[0][HEADER_SIZE:] == b"\xff" * (3 * groups)
    assert len(taller_frames) == 2
    assert taller_frames[0] == exact_frames[0]
    # Only the top dot of each column is set, the pitch - 1 rows below are padding
    last_column = b"\x80" + b"\x00" * (groups - 1)
    assert taller_frames[1][HEADER_SIZE:] == last_column * 3


def test_width_limit():
    """Widest raster passes, one more column is rejected before any frame"""
    widest = Raster.blank(DEFAULT_MAX_COLUMNS, 1)
    too_wide = Raster.blank(DEFAULT_MAX_COLUMNS + 1, 1)

    assert len(list(encode_bit_image(widest, BitImageMode.DOTS_8_SINGLE))) == 1
    # Raised on call, not on first iteration
    with pytest.raises(InvalidRaster, match=r"width exceeds max"):
        encode_bit_image(too_wide, BitImageMode.DOTS_8_SINGLE)


def test_custom_width_limit():
    raster = Raster.blank(385, 1)

    with pytest.raises(InvalidRaster):
        encode_bit_image(raster, BitImageMode.DOTS_24_SINGLE, max_columns=384)


def test_invalid_raster_reaches_no_sink():
    sink = BufferSink()

    with pytest.raises(InvalidRaster):
        write_bit_image(Raster.blank(DEFAULT_MAX_COLUMNS + 1, 30), BitImageMode.DOTS_8_SINGLE, sink)

    assert sink.frames == []


def test_write_bit_image_order():
    """Bands reach the sink top to bottom"""
    rows = [[0] * 4 for _ in range(24)]
    rows[0] = [1] * 4
    rows[16] = [1, 0, 0, 0]
    raster = Raster.from_rows(rows)
    sink = BufferSink()

    count = write_bit_image(raster, BitImageMode.DOTS_8_SINGLE, sink)

    assert count == 3
    assert [frame[HEADER_SIZE:] for frame in sink.frames] == [
        b"\x80" * 4,
        b"\x00" * 4,
        b"\x80\x00\x00\x00",
    ]


@pytest.mark.parametrize(
    "modes, bank",
    [
        ((BitImageMode.DOTS_8_SINGLE, BitImageMode.DOTS_8_DOUBLE), 8),
        ((BitImageMode.DOTS_24_SINGLE, BitImageMode.DOTS_24_DOUBLE), 24),
    ],
    ids=["8_dots", "24_dots"],
)
def test_drawing_against_reference(modes, bank):
    """Both densities of a pitch share the same packed data"""
    raster = text_to_raster(THERMAL_TXT, inverted=True)
    expected = reference_bitimage(THERMAL_TXT, True, bank)

    for mode in modes:
        frames = list(encode_bit_image(raster, mode))
        data = b"".join(frame[HEADER_SIZE:] for frame in frames)
        assert data == expected


def test_transpose_band_short_band():
    """Rows past the raster height are blank"""
    pixels = (1, 1, 1, 1)

    assert transpose_band(pixels, 2, 2, 0, 8) == b"\xc0\xc0"
    assert transpose_band(pixels, 2, 2, 1, 8) == b"\x80\x80"


def test_unpack_band_wrong_size():
    with pytest.raises(ValueError, match=r"Band data must be 6 bytes"):
        unpack_band(b"\x00" * 5, 2, 24)


def test_encoder_logs_bands(caplog):
    """Band count shows up at DEBUG level"""
    caplog.set_level(logging.DEBUG, logger="tlprint")

    list(encode_bit_image(Raster.blank(8, 17), BitImageMode.DOTS_8_SINGLE))

    assert "8x17 raster in 8-dot single density: 3 band(s)" in caplog.text


def test_column_count_limit():
    """nL nH can't announce more than 0xFFFF columns, whatever max_columns says"""
    widest = Raster.blank(0xFFFF, 1)
    too_wide = Raster.blank(0x10000, 1)

    (frame,) = encode_bit_image(widest, BitImageMode.DOTS_8_SINGLE, max_columns=0x20000)

    assert frame[:HEADER_SIZE] == b"\x1b*\x00\xff\xff"
    with pytest.raises(InvalidRaster, match=r"65536 > 65535 columns"):
        encode_bit_image(too_wide, BitImageMode.DOTS_8_SINGLE, max_columns=0x20000)


def test_source_list_mutation_after_encoding_starts():
    """Frames only depend on the raster as it was built"""
    pixels = [1] * 16
    raster = Raster(pixels, 1)
    frames = encode_bit_image(raster, BitImageMode.DOTS_8_SINGLE)

    first = next(frames)
    del pixels[-3:]

    assert first == b"\x1b*\x00\x01\x00\xff"
    assert list(frames) == [b"\x1b*\x00\x01\x00\xff"]
