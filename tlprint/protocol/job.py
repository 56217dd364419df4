from __future__ import annotations

from typing import Iterable

from ..commons import DEFAULT_MAX_COLUMNS, logger
from ..transport.sink import FrameSink
from .commands import cut_cmd
from .encoding import encode_bit_image
from .types import BitImageMode, CutKind, Raster

LOGGER = logger()


def write_frames(frames: Iterable[bytes], sink: FrameSink) -> int:
    """Hand frames to the sink in order and return how many were written."""
    count = 0
    for frame in frames:
        sink.write(frame)
        count += 1
    return count


def write_bit_image(
    raster: Raster,
    mode: BitImageMode,
    sink: FrameSink,
    max_columns: int = DEFAULT_MAX_COLUMNS,
) -> int:
    """Encode a raster and stream its bands to the sink, top to bottom."""
    frames = encode_bit_image(raster, mode, max_columns)
    count = write_frames(frames, sink)
    LOGGER.debug("Streamed %d bit-image frame(s)", count)
    return count


def write_cut(kind: CutKind, sink: FrameSink) -> int:
    return write_frames([cut_cmd(kind)], sink)
