r"""
Topic keys report: a tab-separated listing of each topic's top words.

Default layout, one line per topic (each token followed by a space):

    0\t5\tcat dog
    1\t5\tfish

With ``new_lines=True`` each topic gets a header line and one
``token\tweight`` line per word.
"""

from __future__ import annotations

from typing import Optional

from topicsummary.core.model import TopicModel
from topicsummary.core.reports.base import TopicReport, resolve_num_words
from topicsummary.core.reports.summary import build_topic_summaries


def format_short_number(value: float) -> str:
    """
    At most five decimals with trailing zeros dropped (5.0 -> '5').

    Thousands are grouped with commas (1234.5 -> '1,234.5').
    """
    text = f"{value:,.5f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class TopicKeysReport(TopicReport):
    """Top words per topic as tab-separated lines."""

    name = "topic-keys"
    description = "Tab-separated top words per topic with smoothing"

    def __init__(self, new_lines: bool = False):
        self.new_lines = new_lines

    def render(self, model: TopicModel, num_words: Optional[int] = None) -> str:
        summaries = build_topic_summaries(
            model.num_topics,
            model.smoothing,
            model.ranked_words,
            model.vocabulary,
            resolve_num_words(num_words),
        )
        lines = []
        for summary in summaries:
            header = f"{summary.topic}\t{format_short_number(summary.smoothing)}"
            if self.new_lines:
                lines.append(header)
                lines.extend(
                    f"{token}\t{format_short_number(weight)}"
                    for token, weight in summary.words
                )
            else:
                keys = "".join(f"{token} " for token, _ in summary.words)
                lines.append(f"{header}\t{keys}")
        return "\n".join(lines)
