from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .types import BitImageMode


@dataclass(frozen=True)
class ModeSpec:
    """Fixed parameters of a bit-image mode."""

    pitch: int
    double_density: bool
    selector: int

    @property
    def bytes_per_column(self) -> int:
        return self.pitch // 8


MODE_TABLE: Mapping[BitImageMode, ModeSpec] = MappingProxyType(
    {
        BitImageMode.DOTS_8_SINGLE: ModeSpec(pitch=8, double_density=False, selector=0x00),
        BitImageMode.DOTS_8_DOUBLE: ModeSpec(pitch=8, double_density=True, selector=0x01),
        BitImageMode.DOTS_24_SINGLE: ModeSpec(pitch=24, double_density=False, selector=0x20),
        BitImageMode.DOTS_24_DOUBLE: ModeSpec(pitch=24, double_density=True, selector=0x21),
    }
)


def mode_spec(mode: BitImageMode) -> ModeSpec:
    """Return pitch, density flag and selector byte of a mode."""
    return MODE_TABLE[mode]
