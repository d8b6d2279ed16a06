"""
Read-only views of a fitted topic model.

The reporting layer never trains or mutates a model. It reads four things:
the topic count, one smoothing coefficient per topic, a ranked list of
(word_id, weight) pairs per topic and a vocabulary mapping ids to tokens.
TopicModel describes that surface; TopicModelView is the concrete frozen
implementation the adapters build.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import (
    Iterable,
    Iterator,
    Mapping,
    NamedTuple,
    Protocol,
    Sequence,
    Tuple,
    Union,
    runtime_checkable,
)

from topicsummary.core.errors import VocabularyLookupError


class RankedWord(NamedTuple):
    """One entry of a topic's ranking."""

    word_id: int
    weight: float


class Vocabulary:
    """
    Mapping from integer word ids to string tokens.

    Built either from a sequence (the id is the position) or from an explicit
    id -> token mapping. Lookups of unknown ids raise VocabularyLookupError.
    """

    def __init__(self, tokens: Union[Sequence[str], Mapping[int, str]]):
        if isinstance(tokens, Mapping):
            self._tokens = {int(word_id): str(token) for word_id, token in tokens.items()}
        else:
            self._tokens = {word_id: str(token) for word_id, token in enumerate(tokens)}

    def lookup(self, word_id: int) -> str:
        try:
            return self._tokens[word_id]
        except (KeyError, TypeError):
            raise VocabularyLookupError(word_id) from None

    def __contains__(self, word_id: object) -> bool:
        return word_id in self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[int]:
        return iter(self._tokens)

    def __repr__(self) -> str:
        return f"Vocabulary(size={len(self)})"


@runtime_checkable
class TopicModel(Protocol):
    """The read-only surface a topic report needs from a model."""

    @property
    def num_topics(self) -> int: ...

    @property
    def smoothing(self) -> Sequence[float]: ...

    @property
    def vocabulary(self) -> Vocabulary: ...

    def ranked_words(self, topic: int) -> Sequence[Tuple[int, float]]: ...


@dataclass(frozen=True)
class TopicModelView:
    """
    Concrete, immutable TopicModel over explicit per-topic data.

    Args:
        smoothing: One coefficient per topic
        topic_words: Per topic, (word_id, weight) pairs already in rank order
        vocabulary: Id -> token lookup covering every id in topic_words
    """

    smoothing: Tuple[float, ...]
    topic_words: Tuple[Tuple[RankedWord, ...], ...]
    vocabulary: Vocabulary = field(compare=False)

    def __init__(
        self,
        smoothing: Iterable[float],
        topic_words: Iterable[Iterable[Tuple[int, float]]],
        vocabulary: Union[Vocabulary, Sequence[str], Mapping[int, str]],
    ):
        smoothing = tuple(float(value) for value in smoothing)
        topic_words = tuple(
            tuple(RankedWord(int(word_id), float(weight)) for word_id, weight in words)
            for words in topic_words
        )
        if len(smoothing) != len(topic_words):
            raise ValueError(
                f"Expected one smoothing value per topic, got {len(smoothing)} "
                f"for {len(topic_words)} topics"
            )
        if not isinstance(vocabulary, Vocabulary):
            vocabulary = Vocabulary(vocabulary)
        object.__setattr__(self, "smoothing", smoothing)
        object.__setattr__(self, "topic_words", topic_words)
        object.__setattr__(self, "vocabulary", vocabulary)

    @property
    def num_topics(self) -> int:
        return len(self.topic_words)

    def ranked_words(self, topic: int) -> Tuple[RankedWord, ...]:
        if not 0 <= topic < self.num_topics:
            raise IndexError(f"Topic {topic} out of range [0, {self.num_topics})")
        return self.topic_words[topic]


@dataclass(frozen=True)
class TopicSummary:
    """The top words of one topic, resolved to tokens."""

    topic: int
    smoothing: float
    words: Tuple[Tuple[str, float], ...] = ()
