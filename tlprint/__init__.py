from .errors import InvalidRaster, PrinterError, SinkError
from .models import DEFAULT_MODEL, PrinterModel
from .print_job import PrintJobBuilder, PrintSettings
from .protocol import (
    BitImageMode,
    CutKind,
    Density,
    FeedUnit,
    Raster,
    Speed,
    cut_cmd,
    emit_cut,
    encode_bit_image,
    write_bit_image,
)
from .transport import BufferSink, StreamSink

__version__ = "0.1.0"

__all__ = [
    "BitImageMode",
    "BufferSink",
    "cut_cmd",
    "CutKind",
    "DEFAULT_MODEL",
    "Density",
    "emit_cut",
    "encode_bit_image",
    "FeedUnit",
    "InvalidRaster",
    "PrinterError",
    "PrinterModel",
    "PrintJobBuilder",
    "PrintSettings",
    "Raster",
    "SinkError",
    "Speed",
    "StreamSink",
    "write_bit_image",
]
