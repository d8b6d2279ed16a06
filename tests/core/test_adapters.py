"""
Tests for building model views from weights, scikit-learn and snapshots.
"""

import json

import numpy as np
import pytest
from sklearn.decomposition import NMF, LatentDirichletAllocation
from sklearn.feature_extraction.text import CountVectorizer

from topicsummary.core.adapters import (
    from_sklearn,
    from_snapshot,
    from_weights,
    load_snapshot,
)
from topicsummary.core.errors import ModelSnapshotError
from topicsummary.core.reports.summary import serialize

EXAMPLE_OUTPUT = (
    '[{"topic":0, "smoothing":5.000000, "words":{"cat": 0.300000}},'
    '{"topic":1, "smoothing":5.000000, "words":{"fish": 0.700000}}]'
)


@pytest.fixture
def corpus():
    return [
        "cats and dogs are pets",
        "dogs chase cats",
        "fish swim in the sea",
        "the sea is full of fish",
        "pets like cats and dogs",
        "sharks are fish of the sea",
    ]


class TestFromWeights:
    def test_matches_reference_summary(self):
        weights = np.array([[0.3, 0.1, 0.0], [0.0, 0.0, 0.7]])
        model = from_weights(weights, ["cat", "dog", "fish"], smoothing=5.0)
        assert serialize(model, 1) == EXAMPLE_OUTPUT

    def test_per_topic_smoothing(self):
        model = from_weights([[1.0], [2.0]], ["a"], smoothing=[0.1, 0.2])
        assert model.smoothing == (0.1, 0.2)

    def test_smoothing_defaults_to_zero(self):
        assert from_weights([[1.0]], ["a"]).smoothing == (0.0,)

    def test_smoothing_length_mismatch(self):
        with pytest.raises(ValueError):
            from_weights([[1.0], [2.0]], ["a"], smoothing=[0.1])


class TestFromSklearn:
    def test_lda(self, corpus):
        vectorizer = CountVectorizer()
        counts = vectorizer.fit_transform(corpus)
        lda = LatentDirichletAllocation(n_components=2, random_state=0, max_iter=5)
        lda.fit(counts)

        model = from_sklearn(lda, vectorizer.get_feature_names_out())

        assert model.num_topics == 2
        # doc_topic_prior_ defaults to 1 / n_components
        assert model.smoothing == (0.5, 0.5)
        for topic in range(model.num_topics):
            weights = [word.weight for word in model.ranked_words(topic)]
            assert weights == sorted(weights, reverse=True)
            best = model.ranked_words(topic)[0]
            assert best.weight == pytest.approx(lda.components_[topic].max())

        parsed = json.loads(serialize(model, 3, escape_tokens=True))
        assert [len(entry["words"]) for entry in parsed] == [3, 3]

    def test_nmf_with_explicit_smoothing(self, corpus):
        vectorizer = CountVectorizer()
        counts = vectorizer.fit_transform(corpus)
        nmf = NMF(n_components=2, init="nndsvda", random_state=0, max_iter=200)
        nmf.fit(counts)

        model = from_sklearn(nmf, vectorizer.get_feature_names_out(), smoothing=1.5)
        assert model.smoothing == (1.5, 1.5)

    def test_unfitted_estimator(self):
        with pytest.raises(ValueError):
            from_sklearn(LatentDirichletAllocation(n_components=2), ["a", "b"])

    def test_feature_name_mismatch(self, corpus):
        vectorizer = CountVectorizer()
        lda = LatentDirichletAllocation(n_components=2, random_state=0, max_iter=2)
        lda.fit(vectorizer.fit_transform(corpus))
        with pytest.raises(ValueError):
            from_sklearn(lda, ["only", "two"])


class TestSnapshot:
    def test_round_trip_of_reference(self, snapshot_data):
        assert serialize(from_snapshot(snapshot_data), 1) == EXAMPLE_OUTPUT

    def test_words_keep_given_order(self):
        model = from_snapshot(
            {
                "vocabulary": ["a", "b"],
                "topics": [{"smoothing": 1, "words": [[0, 0.1], [1, 0.9]]}],
            }
        )
        assert [w.word_id for w in model.ranked_words(0)] == [0, 1]

    def test_vocabulary_object(self):
        model = from_snapshot(
            {"vocabulary": {"7": "tree"}, "topics": [{"words": [[7, 1.0]]}]}
        )
        assert model.vocabulary.lookup(7) == "tree"
        assert model.smoothing == (0.0,)

    @pytest.mark.parametrize(
        "payload",
        [
            [],
            {"topics": []},
            {"vocabulary": "abc", "topics": []},
            {"vocabulary": [], "topics": {}},
            {"vocabulary": [], "topics": ["nope"]},
            {"vocabulary": [], "topics": [{"smoothing": "x"}]},
            {"vocabulary": [], "topics": [{"words": [[0]]}]},
            {"vocabulary": [], "topics": [{"words": [["0", 1.0]]}]},
            {"vocabulary": [], "topics": [{"words": [[0, "heavy"]]}]},
            {"vocabulary": {"x": "tree"}, "topics": []},
        ],
    )
    def test_malformed_payloads(self, payload):
        with pytest.raises(ModelSnapshotError):
            from_snapshot(payload)

    def test_load_snapshot_file(self, snapshot_file):
        assert serialize(load_snapshot(snapshot_file), 1) == EXAMPLE_OUTPUT

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(ModelSnapshotError) as exc_info:
            load_snapshot(path)
        assert exc_info.value.source == str(path)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(ModelSnapshotError):
            load_snapshot(tmp_path / "missing.json")
