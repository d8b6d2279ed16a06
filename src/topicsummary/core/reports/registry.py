"""Lookup of report kinds by name."""

from __future__ import annotations

from typing import Any, Dict, List, Type

from topicsummary.core.errors import UnknownReportError
from topicsummary.core.reports.base import TopicReport
from topicsummary.core.reports.summary import SummaryReport
from topicsummary.core.reports.topic_keys import TopicKeysReport
from topicsummary.core.reports.unsupported import (
    DocumentTopicsReport,
    SamplingStateReport,
    TopicDocumentMatrixReport,
    TopicPhraseReport,
    TypeTopicCountsReport,
)

REPORTS: Dict[str, Type[TopicReport]] = {
    report.name: report
    for report in (
        SummaryReport,
        TopicKeysReport,
        SamplingStateReport,
        DocumentTopicsReport,
        TopicDocumentMatrixReport,
        TypeTopicCountsReport,
        TopicPhraseReport,
    )
}


def get_report(name: str, **options: Any) -> TopicReport:
    """
    Instantiate the report registered under ``name``.

    Raises:
        UnknownReportError: If no report has that name
    """
    key = name.strip().lower()
    try:
        report_cls = REPORTS[key]
    except KeyError:
        raise UnknownReportError(name, sorted(REPORTS)) from None
    return report_cls(**options)


def available_reports() -> List[Dict[str, Any]]:
    """Describe every registered report kind."""
    return [
        {
            "name": name,
            "implemented": report_cls.implemented,
            "description": report_cls.description,
        }
        for name, report_cls in REPORTS.items()
    ]
