"""
Adapters that expose fitted topic models as TopicModelView.

Supported sources:
- a dense (n_topics, n_words) weight matrix plus a vocabulary
- a fitted scikit-learn decomposition (LatentDirichletAllocation, NMF)
- a JSON snapshot written by another tool
"""

from __future__ import annotations

import json
import numbers
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

import numpy as np
from sklearn.exceptions import NotFittedError
from sklearn.utils.validation import check_is_fitted

from topicsummary.core.errors import ModelSnapshotError
from topicsummary.core.model import TopicModelView, Vocabulary
from topicsummary.core.ranking import rank_topic_matrix
from topicsummary.core.utils.logger import log_debug

SmoothingLike = Union[float, Sequence[float], np.ndarray, None]


def _expand_smoothing(smoothing: SmoothingLike, num_topics: int) -> list[float]:
    """Broadcast a scalar smoothing value or check a per-topic sequence."""
    if smoothing is None:
        return [0.0] * num_topics
    if isinstance(smoothing, numbers.Real):
        return [float(smoothing)] * num_topics
    values = [float(value) for value in np.asarray(smoothing, dtype=np.float64).ravel()]
    if len(values) != num_topics:
        raise ValueError(
            f"Expected {num_topics} smoothing values, got {len(values)}"
        )
    return values


def from_weights(
    weights: Any,
    vocabulary: Union[Vocabulary, Sequence[str], Mapping[int, str]],
    smoothing: SmoothingLike = None,
) -> TopicModelView:
    """
    Build a model view from a topic-word weight matrix.

    Args:
        weights: Array-like of shape (n_topics, n_words)
        vocabulary: Tokens for column ids
        smoothing: Scalar applied to every topic, or one value per topic

    Returns:
        TopicModelView with rows ranked by descending weight
    """
    topic_words = rank_topic_matrix(weights)
    return TopicModelView(
        smoothing=_expand_smoothing(smoothing, len(topic_words)),
        topic_words=topic_words,
        vocabulary=vocabulary,
    )


def from_sklearn(
    estimator: Any,
    feature_names: Union[Sequence[str], np.ndarray],
    smoothing: SmoothingLike = None,
) -> TopicModelView:
    """
    Build a model view from a fitted scikit-learn topic estimator.

    Works with any fitted decomposition that exposes ``components_``.
    ``feature_names`` usually comes from the vectorizer's
    ``get_feature_names_out()``.

    Args:
        estimator: Fitted LatentDirichletAllocation, NMF, ...
        feature_names: Token for each column of ``components_``
        smoothing: Overrides the estimator's ``doc_topic_prior_``

    Raises:
        ValueError: If the estimator is not fitted or the vocabulary size
            does not match the number of components' columns
    """
    try:
        check_is_fitted(estimator, "components_")
    except NotFittedError as e:
        raise ValueError(f"Estimator is not fitted: {e}") from e

    components = np.asarray(estimator.components_, dtype=np.float64)
    tokens = [str(token) for token in feature_names]
    if components.shape[1] != len(tokens):
        raise ValueError(
            f"Estimator has {components.shape[1]} word columns but "
            f"{len(tokens)} feature names were given"
        )

    if smoothing is None:
        smoothing = getattr(estimator, "doc_topic_prior_", None)

    log_debug(
        "ADAPTERS",
        f"Adapting {type(estimator).__name__} with {components.shape[0]} topics",
    )
    return from_weights(components, tokens, smoothing)


def _snapshot_words(topic: Any, index: int, source: Optional[str]) -> list:
    words = topic.get("words", [])
    if not isinstance(words, list):
        raise ModelSnapshotError(f"Topic {index}: 'words' must be a list", source)
    pairs = []
    for entry in words:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ModelSnapshotError(
                f"Topic {index}: word entries must be [word_id, weight] pairs", source
            )
        word_id, weight = entry
        if isinstance(word_id, bool) or not isinstance(word_id, int):
            raise ModelSnapshotError(
                f"Topic {index}: word id {word_id!r} is not an integer", source
            )
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise ModelSnapshotError(
                f"Topic {index}: weight {weight!r} is not a number", source
            )
        pairs.append((word_id, weight))
    return pairs


def from_snapshot(payload: Any, source: Optional[str] = None) -> TopicModelView:
    """
    Build a model view from a decoded JSON snapshot.

    Expected layout::

        {
            "vocabulary": ["cat", "dog", "fish"],
            "topics": [
                {"smoothing": 5.0, "words": [[0, 0.3], [1, 0.1]]},
                {"smoothing": 5.0, "words": [[2, 0.7]]}
            ]
        }

    ``vocabulary`` may also be an object keyed by word id. Word lists are
    kept in the given order.

    Raises:
        ModelSnapshotError: If required fields are missing or malformed
    """
    if not isinstance(payload, dict):
        raise ModelSnapshotError("Snapshot must be a JSON object", source)
    if "vocabulary" not in payload or "topics" not in payload:
        raise ModelSnapshotError(
            "Snapshot requires 'vocabulary' and 'topics' fields", source
        )

    raw_vocabulary = payload["vocabulary"]
    if isinstance(raw_vocabulary, dict):
        try:
            vocabulary = Vocabulary(
                {int(word_id): token for word_id, token in raw_vocabulary.items()}
            )
        except ValueError as e:
            raise ModelSnapshotError(f"Invalid vocabulary key: {e}", source) from e
    elif isinstance(raw_vocabulary, list):
        vocabulary = Vocabulary(raw_vocabulary)
    else:
        raise ModelSnapshotError("'vocabulary' must be a list or object", source)

    topics = payload["topics"]
    if not isinstance(topics, list):
        raise ModelSnapshotError("'topics' must be a list", source)

    smoothing = []
    topic_words = []
    for index, topic in enumerate(topics):
        if not isinstance(topic, dict):
            raise ModelSnapshotError(f"Topic {index} must be an object", source)
        value = topic.get("smoothing", 0.0)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ModelSnapshotError(
                f"Topic {index}: smoothing {value!r} is not a number", source
            )
        smoothing.append(value)
        topic_words.append(_snapshot_words(topic, index, source))

    return TopicModelView(
        smoothing=smoothing, topic_words=topic_words, vocabulary=vocabulary
    )


def load_snapshot(path: Union[str, Path]) -> TopicModelView:
    """Read and adapt a JSON snapshot file."""
    path = Path(path)
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ModelSnapshotError(f"Invalid JSON: {e}", str(path)) from e
    except OSError as e:
        raise ModelSnapshotError(f"Cannot read snapshot: {e}", str(path)) from e
    return from_snapshot(payload, source=str(path))
