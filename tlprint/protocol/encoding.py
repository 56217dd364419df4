from __future__ import annotations

from typing import Iterator, List, Sequence

from ..commons import DEFAULT_MAX_COLUMNS, MAX_COLUMN_COUNT, logger
from ..errors import InvalidRaster
from .commands import bit_image_header
from .modes import mode_spec
from .types import BitImageMode, Raster

LOGGER = logger()


def band_count(height: int, pitch: int) -> int:
    """Return the number of bands, the last one possibly padded."""
    return (height + pitch - 1) // pitch


def iter_bands(raster: Raster, pitch: int) -> Iterator[int]:
    """Yield the top row of every band, top to bottom."""
    for band in range(band_count(raster.height, pitch)):
        yield band * pitch


def transpose_band(pixels: Sequence[int], width: int, height: int, top: int, pitch: int) -> bytes:
    """Pack rows top..top+pitch of a row-major bitmap into column-major dot groups.

    Each column becomes pitch // 8 bytes, MSB first, the first byte holding the
    topmost 8 dots. Rows at or past `height` read as blank.
    """
    groups = pitch // 8
    out = bytearray(width * groups)
    for dot in range(pitch):
        row = top + dot
        if row >= height:
            break
        offset = row * width
        group = dot // 8
        mask = 0x80 >> (dot % 8)
        for column in range(width):
            if pixels[offset + column]:
                out[column * groups + group] |= mask
    return bytes(out)


def unpack_band(data: bytes, width: int, pitch: int) -> List[List[int]]:
    """Inverse of transpose_band: return `pitch` rows of `width` pixels."""
    groups = pitch // 8
    if len(data) != width * groups:
        raise ValueError(f"Band data must be {width * groups} bytes, got {len(data)}")
    rows = [[0] * width for _ in range(pitch)]
    for column in range(width):
        for dot in range(pitch):
            if data[column * groups + dot // 8] & (0x80 >> (dot % 8)):
                rows[dot][column] = 1
    return rows


def check_raster(raster: Raster, max_columns: int = DEFAULT_MAX_COLUMNS) -> None:
    """Reject rasters the printer head can't print."""
    raster.validate()
    # nL nH can't announce more columns, whatever the model allows
    limit = min(max_columns, MAX_COLUMN_COUNT)
    if raster.width > limit:
        raise InvalidRaster(f"Raster width exceeds max: {raster.width} > {limit} columns")


def encode_bit_image(
    raster: Raster,
    mode: BitImageMode,
    max_columns: int = DEFAULT_MAX_COLUMNS,
) -> Iterator[bytes]:
    """Return an iterator over the ESC * frames of a raster, one per band.

    The raster is checked before the iterator is returned, so an invalid one
    never produces a partial job.
    """
    check_raster(raster, max_columns)
    spec = mode_spec(mode)
    LOGGER.debug(
        "Encoding %dx%d raster in %s: %d band(s)",
        raster.width,
        raster.height,
        mode.value,
        band_count(raster.height, spec.pitch),
    )
    return _iter_frames(raster, mode, spec.pitch)


def _iter_frames(raster: Raster, mode: BitImageMode, pitch: int) -> Iterator[bytes]:
    header = bit_image_header(mode, raster.width)
    height = raster.height
    for top in iter_bands(raster, pitch):
        yield header + transpose_band(raster.pixels, raster.width, height, top, pitch)


def encode_bit_image_bytes(
    raster: Raster,
    mode: BitImageMode,
    max_columns: int = DEFAULT_MAX_COLUMNS,
) -> bytes:
    """Return all frames of a raster joined together."""
    return b"".join(encode_bit_image(raster, mode, max_columns))
