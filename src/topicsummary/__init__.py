"""
topicsummary - Topic Model Reporting Toolkit

Renders the results of a fitted topic model (per-topic ranked words with
weights and a smoothing coefficient per topic) into text reports.

Package Structure:
- core/model.py: Read-only model views (TopicModel, Vocabulary, TopicModelView)
- core/adapters.py: Views over weight matrices, scikit-learn estimators and JSON snapshots
- core/reports/: Report kinds (summary, topic keys) and the report registry
- core/output/: Report destinations (paths and streams)
- core/utils/: Configuration and logging
- cli/: Typer command-line interface
"""

__version__ = "0.1.0"

from topicsummary.core.model import TopicModel, TopicModelView, Vocabulary
from topicsummary.core.reports import (
    get_report,
    serialize,
    serialize_topics,
    write_summary,
)

__all__ = [
    "TopicModel",
    "TopicModelView",
    "Vocabulary",
    "get_report",
    "serialize",
    "serialize_topics",
    "write_summary",
]
