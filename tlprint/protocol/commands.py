from __future__ import annotations

from ..commons import MAX_COLUMN_COUNT
from .modes import mode_spec
from .types import BitImageMode, CutKind, Density, FeedUnit, Speed

ESC = 0x1B
GS = 0x1D

# Printing commands
PRINT = bytes([0x0A])
PRINT_FEED_INCHES = bytes([ESC, 0x4A])
PRINT_FEED_LINES = bytes([ESC, 0x64])
SPEED_QUALITY = bytes([ESC, 0x78])
DENSITY = bytes([GS, 0x7C])
# Bit-image commands
BIT_IMAGE = bytes([ESC, 0x2A])
# Mechanism control commands
CUT = bytes([ESC])
CUT_SELECTORS = {
    CutKind.FULL: 0x69,
    CutKind.PARTIAL: 0x6D,
}


def cut_cmd(kind: CutKind) -> bytes:
    """Build the full or partial paper cut command."""
    return CUT + bytes([CUT_SELECTORS[kind]])


emit_cut = cut_cmd


def print_cmd() -> bytes:
    """Build the print-and-line-feed command."""
    return PRINT


def print_and_feed_cmd(unit: FeedUnit, amount: int) -> bytes:
    """Build the print and feed command, by motion units or by lines."""
    if not 0 <= amount <= 0xFF:
        raise ValueError(f"Feed amount must be in 0..255, got {amount}")
    prefix = PRINT_FEED_INCHES if unit is FeedUnit.INCHES else PRINT_FEED_LINES
    return prefix + bytes([amount])


def speed_cmd(speed: Speed) -> bytes:
    """Build the speed / quality selection command."""
    return SPEED_QUALITY + bytes([speed.value])


def density_cmd(density: Density) -> bytes:
    """Build the printing density command."""
    return DENSITY + bytes([density.value])


def bit_image_header(mode: BitImageMode, width: int) -> bytes:
    """Build the ESC * header announcing `width` columns in `mode`."""
    if not 0 <= width <= MAX_COLUMN_COUNT:
        raise ValueError(f"Column count must be in 0..{MAX_COLUMN_COUNT}, got {width}")
    spec = mode_spec(mode)
    return BIT_IMAGE + bytes([spec.selector, width & 0xFF, width >> 8])
