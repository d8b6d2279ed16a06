"""
Error types for topicsummary.

Every failure raised by the reporting layer derives from TopicSummaryError so
callers can catch the whole family, while the concrete classes also inherit
from the matching builtin (KeyError, OSError, ...) for code that only knows
about those.
"""

from typing import Any, Dict, Optional


class TopicSummaryError(Exception):
    """Base exception for topicsummary errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        """
        Initialize the error.

        Args:
            message: Error message
            context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class VocabularyLookupError(TopicSummaryError, KeyError):
    """A word id in a topic's ranking has no vocabulary entry."""

    def __init__(self, word_id: Any, topic: Optional[int] = None):
        context: Dict[str, Any] = {"word_id": word_id}
        message = f"No vocabulary entry for word id {word_id!r}"
        if topic is not None:
            context["topic"] = topic
            message += f" (topic {topic})"
        super().__init__(message, context)
        self.word_id = word_id
        self.topic = topic


class SinkWriteError(TopicSummaryError, OSError):
    """The destination could not accept the report text."""

    def __init__(self, sink: str, cause: Optional[BaseException] = None):
        message = f"Failed to write report to {sink}"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message, {"sink": sink})
        self.sink = sink


class ReportNotImplementedError(TopicSummaryError, NotImplementedError):
    """The requested report kind exists in the contract but has no renderer."""

    def __init__(self, report_name: str):
        super().__init__(
            f"Report '{report_name}' is not implemented",
            {"report": report_name},
        )
        self.report_name = report_name


class UnknownReportError(TopicSummaryError, KeyError):
    """No report is registered under the requested name."""

    def __init__(self, report_name: str, known: Optional[list] = None):
        message = f"Unknown report '{report_name}'"
        if known:
            message += f" (expected one of: {', '.join(known)})"
        super().__init__(message, {"report": report_name})
        self.report_name = report_name


class ModelSnapshotError(TopicSummaryError, ValueError):
    """A serialized model snapshot is missing fields or malformed."""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message, {"source": source} if source else None)
        self.source = source
