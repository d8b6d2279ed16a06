"""Topic model reports."""

from .base import TopicReport, resolve_num_words
from .registry import REPORTS, available_reports, get_report
from .summary import (
    SummaryReport,
    build_topic_summaries,
    format_number,
    serialize,
    serialize_topics,
    write_summary,
)
from .topic_keys import TopicKeysReport
from .unsupported import UnsupportedReport

__all__ = [
    "REPORTS",
    "SummaryReport",
    "TopicKeysReport",
    "TopicReport",
    "UnsupportedReport",
    "available_reports",
    "build_topic_summaries",
    "format_number",
    "get_report",
    "resolve_num_words",
    "serialize",
    "serialize_topics",
    "write_summary",
]
