"""Word ranking helpers for adapters that start from dense weights."""

from __future__ import annotations

from typing import Any, List, Tuple

import numpy as np

from topicsummary.core.model import RankedWord


def _safe_numpy_array(values: Any, dtype=np.float64) -> np.ndarray:
    """Convert values (lists, numpy or scipy sparse rows) to a dense array."""
    if hasattr(values, "toarray"):
        values = values.toarray()
    return np.asarray(values, dtype=dtype)


def rank_word_weights(
    weights: Any, drop_zero: bool = True
) -> Tuple[RankedWord, ...]:
    """
    Rank one topic's word weights.

    Words are ordered by descending weight; equal weights are ordered by
    ascending word id so the ranking is a total order.

    Args:
        weights: 1-D sequence of weights indexed by word id
        drop_zero: Leave out words whose weight is exactly zero

    Returns:
        Tuple of RankedWord in rank order
    """
    row = _safe_numpy_array(weights).ravel()
    if row.size == 0:
        return ()
    if np.isnan(row).any():
        raise ValueError("Topic weights contain NaN")
    word_ids = np.arange(row.size)
    # lexsort uses the last key as the primary one
    order = np.lexsort((word_ids, -row))
    if drop_zero:
        order = order[row[order] != 0.0]
    return tuple(RankedWord(int(word_id), float(row[word_id])) for word_id in order)


def rank_topic_matrix(
    weights: Any, drop_zero: bool = True
) -> List[Tuple[RankedWord, ...]]:
    """
    Rank every row of a (n_topics, n_words) weight matrix.

    Raises:
        ValueError: If the matrix is not two-dimensional
    """
    matrix = _safe_numpy_array(weights)
    if matrix.ndim != 2:
        raise ValueError(
            f"Expected a (n_topics, n_words) matrix, got shape {matrix.shape}"
        )
    return [rank_word_weights(row, drop_zero=drop_zero) for row in matrix]
