from .commands import (
    bit_image_header,
    cut_cmd,
    density_cmd,
    emit_cut,
    print_and_feed_cmd,
    print_cmd,
    speed_cmd,
)
from .encoding import (
    band_count,
    check_raster,
    encode_bit_image,
    encode_bit_image_bytes,
    iter_bands,
    transpose_band,
    unpack_band,
)
from .job import write_bit_image, write_cut, write_frames
from .modes import MODE_TABLE, ModeSpec, mode_spec
from .types import BitImageMode, CommandFrame, CutKind, Density, FeedUnit, Raster, Speed

__all__ = [
    "band_count",
    "bit_image_header",
    "BitImageMode",
    "check_raster",
    "CommandFrame",
    "cut_cmd",
    "CutKind",
    "Density",
    "density_cmd",
    "emit_cut",
    "encode_bit_image",
    "encode_bit_image_bytes",
    "FeedUnit",
    "iter_bands",
    "MODE_TABLE",
    "mode_spec",
    "ModeSpec",
    "print_and_feed_cmd",
    "print_cmd",
    "Raster",
    "Speed",
    "speed_cmd",
    "transpose_band",
    "unpack_band",
    "write_bit_image",
    "write_cut",
    "write_frames",
]
