"""
Topic summary report.

Renders every topic as a small record holding its index, its smoothing
coefficient and its top words, all in one list-shaped line:

    [{"topic":0, "smoothing":5.000000, "words":{"cat": 0.300000}},{"topic":1, ...}]

Numbers always carry six fixed-point decimals. Tokens are written verbatim
unless escaping is switched on, in which case each token becomes a JSON
string literal and the whole line parses as JSON.
"""

from __future__ import annotations

import json
from itertools import islice
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from topicsummary.core.errors import VocabularyLookupError
from topicsummary.core.model import TopicModel, TopicSummary
from topicsummary.core.output import Sink
from topicsummary.core.reports.base import TopicReport, resolve_num_words
from topicsummary.core.utils.config import get_config

RankedWords = Callable[[int], Iterable[Tuple[int, float]]]


def format_number(value: float) -> str:
    """Fixed-point with six decimals, never scientific notation."""
    return f"{value:.6f}"


def format_token(token: str, escape: bool = False) -> str:
    if escape:
        return json.dumps(token, ensure_ascii=False)
    return f'"{token}"'


def top_words(
    ranked: Iterable[Tuple[int, float]],
    vocabulary,
    num_words: int,
    topic: Optional[int] = None,
) -> Tuple[Tuple[str, float], ...]:
    """
    Resolve the first ``num_words`` ranked entries to (token, weight).

    The model's order is kept as is. Lookup failures of any vocabulary
    implementation surface as VocabularyLookupError tagged with the topic.
    """
    words = []
    for word_id, weight in islice(ranked, num_words):
        try:
            token = vocabulary.lookup(word_id)
        except (KeyError, IndexError) as e:
            raise VocabularyLookupError(word_id, topic) from e
        words.append((token, weight))
    return tuple(words)


def build_topic_summaries(
    num_topics: int,
    smoothing: Sequence[float],
    ranked_words: RankedWords,
    vocabulary,
    num_words: int,
) -> List[TopicSummary]:
    """Collect a TopicSummary for each topic index in ascending order."""
    num_words = resolve_num_words(num_words)
    return [
        TopicSummary(
            topic=topic,
            smoothing=smoothing[topic],
            words=top_words(ranked_words(topic), vocabulary, num_words, topic),
        )
        for topic in range(num_topics)
    ]


def serialize_topics(
    num_topics: int,
    smoothing: Sequence[float],
    ranked_words: RankedWords,
    vocabulary,
    num_words: int,
    escape_tokens: bool = False,
) -> str:
    """
    Serialize topic summaries from explicit read-only views.

    Args:
        num_topics: Number of topics
        smoothing: Smoothing coefficient per topic index
        ranked_words: Topic index -> (word_id, weight) pairs in rank order
        vocabulary: Object with ``lookup(word_id) -> str``
        num_words: Maximum words per topic; larger values are clamped
        escape_tokens: Render tokens as JSON string literals

    Returns:
        The summary text, without a trailing newline
    """
    records = []
    for summary in build_topic_summaries(
        num_topics, smoothing, ranked_words, vocabulary, num_words
    ):
        entries = ", ".join(
            f"{format_token(token, escape_tokens)}: {format_number(weight)}"
            for token, weight in summary.words
        )
        records.append(
            f'{{"topic":{summary.topic}, '
            f'"smoothing":{format_number(summary.smoothing)}, '
            f'"words":{{{entries}}}}}'
        )
    return "[" + ",".join(records) + "]"


def serialize(
    model: TopicModel, num_words: int, escape_tokens: bool = False
) -> str:
    """Serialize the summary of every topic in ``model``."""
    return serialize_topics(
        model.num_topics,
        model.smoothing,
        model.ranked_words,
        model.vocabulary,
        num_words,
        escape_tokens=escape_tokens,
    )


class SummaryReport(TopicReport):
    """Smoothing and top words of every topic on one line."""

    name = "summary"
    description = "Smoothing and top weighted words for every topic"

    def __init__(self, escape_tokens: Optional[bool] = None):
        if escape_tokens is None:
            escape_tokens = get_config().report.escape_tokens
        self.escape_tokens = escape_tokens

    def render(self, model: TopicModel, num_words: Optional[int] = None) -> str:
        return serialize(
            model, resolve_num_words(num_words), escape_tokens=self.escape_tokens
        )


def write_summary(
    model: TopicModel,
    sink: Sink,
    num_words: Optional[int] = None,
    escape_tokens: Optional[bool] = None,
) -> None:
    """Serialize ``model`` and write it to ``sink`` followed by a newline."""
    SummaryReport(escape_tokens=escape_tokens).write(model, sink, num_words)
