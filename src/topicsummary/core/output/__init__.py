"""Report output destinations."""

from .sink import Sink, describe_sink, write_report

__all__ = ["Sink", "describe_sink", "write_report"]
