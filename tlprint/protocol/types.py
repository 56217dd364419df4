from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

from ..errors import InvalidRaster

CommandFrame = bytes


class BitImageMode(Enum):
    """Bit-image densities understood by the ESC * command."""

    DOTS_8_SINGLE = "8-dot single density"
    DOTS_8_DOUBLE = "8-dot double density"
    DOTS_24_SINGLE = "24-dot single density"
    DOTS_24_DOUBLE = "24-dot double density"


class CutKind(Enum):
    FULL = "full"
    # Only honoured by the models with a partial cutter
    PARTIAL = "partial"


class FeedUnit(Enum):
    INCHES = "inches"
    LINES = "lines"


class Speed(Enum):
    HIGH = 0
    NORMAL = 1
    LOW = 2


class Density(Enum):
    MINUS_50 = 0
    MINUS_25 = 1
    ZERO = 2
    PLUS_25 = 3
    PLUS_50 = 4


@dataclass(frozen=True)
class Raster:
    """Row-major 0/1 pixel buffer used by the bit-image encoder.

    1 is a dark dot, row 0 is the top of the image.
    """

    pixels: Sequence[int]
    width: int

    def __post_init__(self) -> None:
        # Own an immutable 0/1 copy, whatever sequence the caller passed
        object.__setattr__(self, "pixels", tuple(1 if pix else 0 for pix in self.pixels))

    def validate(self) -> None:
        """Validate dimensions for protocol encoding."""
        if self.width <= 0:
            raise InvalidRaster("Width must be greater than zero")
        if len(self.pixels) % self.width != 0:
            raise InvalidRaster("Pixels length must be a multiple of width")

    @property
    def height(self) -> int:
        """Return raster height computed from width and pixel count."""
        self.validate()
        return len(self.pixels) // self.width

    def pixel(self, row: int, column: int) -> int:
        if not 0 <= column < self.width:
            raise IndexError(f"Column {column} out of range")
        if not 0 <= row < self.height:
            raise IndexError(f"Row {row} out of range")
        return 1 if self.pixels[row * self.width + column] else 0

    def row(self, index: int) -> Tuple[int, ...]:
        if not 0 <= index < self.height:
            raise IndexError(f"Row {index} out of range")
        start = index * self.width
        return tuple(1 if pix else 0 for pix in self.pixels[start : start + self.width])

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]], width: Optional[int] = None) -> "Raster":
        rows = list(rows)
        if width is None:
            if not rows:
                raise InvalidRaster("Width is required for a raster without rows")
            width = len(rows[0])
        pixels = []
        for index, line in enumerate(rows):
            if len(line) != width:
                raise InvalidRaster(f"Row {index} has {len(line)} pixels, expected {width}")
            pixels.extend(1 if pix else 0 for pix in line)
        raster = cls(tuple(pixels), width)
        raster.validate()
        return raster

    @classmethod
    def from_bitmap(cls, width: int, height: int, data: bytes) -> "Raster":
        """Unpack a 1 bpp bitmap, MSB first, each row padded to a whole byte."""
        if width <= 0:
            raise InvalidRaster("Width must be greater than zero")
        if height < 0:
            raise InvalidRaster("Height can't be negative")
        stride = (width + 7) // 8
        if len(data) < stride * height:
            raise InvalidRaster(f"Bitmap holds {len(data)} bytes, expected {stride * height}")
        pixels = []
        for row in range(height):
            line = data[row * stride : (row + 1) * stride]
            for column in range(width):
                pixels.append(1 if line[column // 8] & (0x80 >> (column % 8)) else 0)
        return cls(tuple(pixels), width)

    @classmethod
    def blank(cls, width: int, height: int) -> "Raster":
        if height < 0:
            raise InvalidRaster("Height can't be negative")
        raster = cls((0,) * (width * height), width)
        raster.validate()
        return raster
