from __future__ import annotations


class PrinterError(Exception):
    """Base class of the errors raised by tlprint."""


class InvalidRaster(PrinterError, ValueError):
    """Raster dimensions can't be printed (empty width, width above the head limit)."""


class SinkError(PrinterError, RuntimeError):
    """Frames could not be written to the underlying stream."""
