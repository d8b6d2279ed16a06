"""
Destination handling for rendered reports.

A sink is either a filesystem path or an open text stream. The report text is
written in one operation followed by exactly one trailing newline.
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO, Union

from topicsummary.core.errors import SinkWriteError
from topicsummary.core.utils.artifact_writer import write_text
from topicsummary.core.utils.logger import log_error, log_file_operation

Sink = Union[str, Path, TextIO]


def describe_sink(sink: Sink) -> str:
    """Return a readable name for a sink, used in logs and errors."""
    if isinstance(sink, (str, Path)):
        return str(sink)
    name = getattr(sink, "name", None)
    if isinstance(name, str):
        return name
    return f"<{type(sink).__name__}>"


def write_report(text: str, sink: Sink) -> None:
    """
    Write report text plus one trailing newline to a sink.

    Paths are written atomically (temporary file, then replace), creating
    parent directories as needed. Streams receive a single write() call.

    Raises:
        SinkWriteError: If the destination cannot accept the output
    """
    payload = text + "\n"
    target = describe_sink(sink)
    try:
        if isinstance(sink, (str, Path)):
            write_text(sink, payload)
            log_file_operation("write", target, True)
        else:
            sink.write(payload)
            flush = getattr(sink, "flush", None)
            if flush is not None:
                flush()
    except (OSError, ValueError) as e:
        log_file_operation("write", target, False, str(e))
        log_error("OUTPUT", f"Report write failed: {e}", context=target)
        raise SinkWriteError(target, e) from e
