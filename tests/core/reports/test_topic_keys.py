"""Tests for the tab-separated topic keys report."""

import io

import pytest

from topicsummary.core.model import TopicModelView
from topicsummary.core.reports.topic_keys import TopicKeysReport, format_short_number


@pytest.mark.parametrize(
    "value, expected",
    [
        (5.0, "5"),
        (0.5, "0.5"),
        (0.012345678, "0.01235"),
        (0.0, "0"),
        (12.25, "12.25"),
        (1234.5, "1,234.5"),
        (12345.0, "12,345"),
        (-1000000.000001, "-1,000,000"),
    ],
)
def test_format_short_number(value, expected):
    assert format_short_number(value) == expected


def test_one_line_per_topic(two_topic_model):
    text = TopicKeysReport().render(two_topic_model, num_words=5)
    assert text == "0\t5\tcat dog \n1\t5\tfish "


def test_word_cap(two_topic_model):
    text = TopicKeysReport().render(two_topic_model, num_words=1)
    assert text.splitlines() == ["0\t5\tcat ", "1\t5\tfish "]


def test_new_lines_layout(two_topic_model):
    text = TopicKeysReport(new_lines=True).render(two_topic_model, num_words=2)
    assert text.splitlines() == [
        "0\t5",
        "cat\t0.3",
        "dog\t0.1",
        "1\t5",
        "fish\t0.7",
    ]


def test_empty_topic_keeps_header():
    model = TopicModelView(smoothing=[0.25], topic_words=[[]], vocabulary=[])
    assert TopicKeysReport().render(model, num_words=3) == "0\t0.25\t"


def test_write_appends_newline(two_topic_model):
    buffer = io.StringIO()
    TopicKeysReport().write(two_topic_model, buffer, num_words=1)
    assert buffer.getvalue() == "0\t5\tcat \n1\t5\tfish \n"


def test_large_counts_are_grouped():
    model = TopicModelView(
        smoothing=[1234.5], topic_words=[[(0, 12345.0)]], vocabulary=["w"]
    )
    text = TopicKeysReport(new_lines=True).render(model, num_words=1)
    assert text == "0\t1,234.5\nw\t12,345"
