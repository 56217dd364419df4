from .sink import BufferSink, FrameSink, StreamSink

__all__ = ["BufferSink", "FrameSink", "StreamSink"]
