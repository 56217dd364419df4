from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from PIL import Image

from .commons import logger
from .models import DEFAULT_MODEL, PrinterModel
from .protocol import (
    BitImageMode,
    CutKind,
    Density,
    FeedUnit,
    Raster,
    Speed,
    cut_cmd,
    density_cmd,
    encode_bit_image,
    print_and_feed_cmd,
    print_cmd,
    speed_cmd,
    write_frames,
)
from .rendering import image_to_raster
from .transport import FrameSink

DEFAULT_FEED_LINES = 10

LOGGER = logger()


@dataclass
class PrintSettings:
    mode: BitImageMode = BitImageMode.DOTS_24_DOUBLE
    feed_lines: int = DEFAULT_FEED_LINES
    cut: CutKind = CutKind.FULL


class PrintJobBuilder:
    """Collect command frames for one or more jobs, then send them to a sink.

    Every method except build() and run() returns the builder so calls chain::

        PrintJobBuilder().bit_image(logo).print_line().cut_paper().run(sink)
    """

    def __init__(self, model: PrinterModel = DEFAULT_MODEL, settings: Optional[PrintSettings] = None) -> None:
        model.validate()
        self.model = model
        self.settings = settings or PrintSettings()
        self._frames: List[bytes] = []

    @property
    def frames(self) -> List[bytes]:
        return list(self._frames)

    def bit_image(self, raster: Raster, mode: Optional[BitImageMode] = None) -> "PrintJobBuilder":
        mode = mode or self.settings.mode
        # Extend only once every band is encoded
        self._frames.extend(list(encode_bit_image(raster, mode, self.model.max_columns)))
        return self

    def image(self, img: Image.Image, mode: Optional[BitImageMode] = None, threshold: int = 0) -> "PrintJobBuilder":
        return self.bit_image(image_to_raster(img, threshold), mode)

    def print_line(self) -> "PrintJobBuilder":
        self._frames.append(print_cmd())
        return self

    def print_and_feed(self, unit: FeedUnit, amount: int) -> "PrintJobBuilder":
        self._frames.append(print_and_feed_cmd(unit, amount))
        return self

    def cut_paper(self, kind: Optional[CutKind] = None) -> "PrintJobBuilder":
        kind = kind or self.settings.cut
        if kind is CutKind.PARTIAL and not self.model.supports_partial_cut:
            LOGGER.warning("Model %s has no partial cutter", self.model.name)
        self._frames.append(cut_cmd(kind))
        return self

    def speed(self, speed: Speed) -> "PrintJobBuilder":
        self._frames.append(speed_cmd(speed))
        return self

    def density(self, density: Density) -> "PrintJobBuilder":
        self._frames.append(density_cmd(density))
        return self

    def finish(self) -> "PrintJobBuilder":
        """Feed the paper past the cutter and cut it."""
        return self.print_and_feed(FeedUnit.LINES, self.settings.feed_lines).cut_paper()

    def build(self) -> bytes:
        return b"".join(self._frames)

    def clear(self) -> "PrintJobBuilder":
        self._frames.clear()
        return self

    def run(self, sink: FrameSink) -> "PrintJobBuilder":
        """Write pending frames to the sink; they are dropped only if all were written."""
        count = write_frames(self._frames, sink)
        LOGGER.info("Sent %d frame(s), %d byte(s) to %s", count, len(self.build()), self.model.name)
        self._frames.clear()
        return self
