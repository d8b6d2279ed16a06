"""
Report kinds that belong to the reporting contract but have no renderer.

They are registered so callers can discover them, and they fail loudly with
ReportNotImplementedError instead of writing an empty file.
"""

from __future__ import annotations

from typing import Any, Optional

from topicsummary.core.errors import ReportNotImplementedError
from topicsummary.core.model import TopicModel
from topicsummary.core.reports.base import TopicReport


class UnsupportedReport(TopicReport):
    implemented = False

    def __init__(self, **options: Any):
        """Accept and ignore the options of implemented report kinds."""

    def render(self, model: TopicModel, num_words: Optional[int] = None) -> str:
        raise ReportNotImplementedError(self.name)


class SamplingStateReport(UnsupportedReport):
    name = "state"
    description = "Per-token topic assignments of the sampler"


class DocumentTopicsReport(UnsupportedReport):
    name = "doc-topics"
    description = "Topic proportions per document"


class TopicDocumentMatrixReport(UnsupportedReport):
    name = "topic-document-matrix"
    description = "Dense topic by document weight matrix"


class TypeTopicCountsReport(UnsupportedReport):
    name = "word-topic-counts"
    description = "Sparse word type by topic assignment counts"


class TopicPhraseReport(UnsupportedReport):
    name = "topic-phrases"
    description = "Top words and phrases per topic"
