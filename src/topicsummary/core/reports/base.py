"""
Base class for topic model reports.

Each report kind renders a TopicModel into text. Writing is shared: the whole
document is rendered first and handed to the sink in a single write.
"""

from __future__ import annotations

import numbers
import time
from abc import ABC, abstractmethod
from typing import Optional

from topicsummary.core.errors import TopicSummaryError
from topicsummary.core.model import TopicModel
from topicsummary.core.output import Sink, describe_sink, write_report
from topicsummary.core.utils.config import get_config
from topicsummary.core.utils.logger import log_error, log_info, log_performance


def resolve_num_words(num_words: Optional[int]) -> int:
    """
    Return the per-topic word cap, falling back to the configured default.

    Raises:
        ValueError: If num_words is not a non-negative integer
    """
    if num_words is None:
        num_words = get_config().report.num_words
    if isinstance(num_words, bool) or not isinstance(num_words, numbers.Integral):
        raise ValueError(f"num_words must be an integer, got {num_words!r}")
    if num_words < 0:
        raise ValueError(f"num_words must be non-negative, got {num_words}")
    return int(num_words)


class TopicReport(ABC):
    """One output format of the topic reporting contract."""

    name: str = ""
    description: str = ""
    implemented: bool = True

    @abstractmethod
    def render(self, model: TopicModel, num_words: Optional[int] = None) -> str:
        """Render the report as text, without a trailing newline."""

    def write(
        self, model: TopicModel, sink: Sink, num_words: Optional[int] = None
    ) -> None:
        """
        Render the report and write it to ``sink`` with one trailing newline.

        Raises:
            TopicSummaryError: Rendering or writing failed; nothing is retried
        """
        start_time = time.perf_counter()
        target = describe_sink(sink)
        try:
            text = self.render(model, num_words)
        except TopicSummaryError as e:
            log_error("REPORTS", f"{self.name} report failed: {e}", context=target)
            raise
        write_report(text, sink)
        log_info(
            "REPORTS",
            f"Wrote {self.name} report for {model.num_topics} topics",
            context=target,
        )
        log_performance(f"{self.name} report", time.perf_counter() - start_time)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
