from __future__ import annotations

from contextlib import contextmanager
from typing import BinaryIO, Iterator, List, Protocol

from ..commons import logger
from ..errors import SinkError

LOGGER = logger()


class FrameSink(Protocol):
    """Anything accepting complete command frames, in order."""

    def write(self, frame: bytes) -> None:
        ...


class BufferSink:
    """Keep frames in memory, e.g. to hand them to a spooler later."""

    def __init__(self) -> None:
        self.frames: List[bytes] = []

    def write(self, frame: bytes) -> None:
        self.frames.append(bytes(frame))

    @property
    def data(self) -> bytes:
        return b"".join(self.frames)

    def clear(self) -> None:
        self.frames.clear()


class StreamSink:
    """Write frames to a binary file object such as an opened /dev/usb/lp0."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream

    @classmethod
    @contextmanager
    def open(cls, path: str) -> Iterator["StreamSink"]:
        try:
            stream = open(path, "wb")
        except OSError as exc:
            raise SinkError(f"Cannot open {path}: {exc}") from exc
        with stream:
            yield cls(stream)

    def write(self, frame: bytes) -> None:
        try:
            self._stream.write(frame)
            self._stream.flush()
        except OSError as exc:
            LOGGER.error("Write of %d byte(s) failed: %s", len(frame), exc)
            raise SinkError(f"Stream write failed: {exc}") from exc
        LOGGER.debug("Wrote %d byte(s)", len(frame))
