"""Sink construction and the built-in stream handler."""

from .factory import SinkDescriptor, coerce_sink_config, create_sink
from .handler import StreamHandler

__all__ = [
    "SinkDescriptor",
    "StreamHandler",
    "coerce_sink_config",
    "create_sink",
]
