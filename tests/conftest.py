"""
Shared pytest fixtures and configuration for topicsummary tests.

This module provides common fixtures used across the test suite: small
topic models, snapshot files, and isolation of the global config and logger.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# Put `src/` first so `import topicsummary` uses workspace code.
_REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_REPO_ROOT / "src"))

from topicsummary.core.model import TopicModelView  # noqa: E402
from topicsummary.core.utils.config import reset_config  # noqa: E402
from topicsummary.core.utils.logger import reset_logging  # noqa: E402


# ============================================================================
# Isolation Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Clear TOPICSUMMARY_* variables and reset global config and logging."""
    for name in list(os.environ):
        if name.startswith("TOPICSUMMARY_"):
            monkeypatch.delenv(name, raising=False)
    reset_config()
    reset_logging()
    yield
    reset_config()
    reset_logging()


# ============================================================================
# Model Fixtures
# ============================================================================

@pytest.fixture
def two_topic_model() -> TopicModelView:
    """Two topics: cat/dog and fish, both with smoothing 5.0."""
    return TopicModelView(
        smoothing=[5.0, 5.0],
        topic_words=[[(0, 0.3), (1, 0.1)], [(2, 0.7)]],
        vocabulary=["cat", "dog", "fish"],
    )


@pytest.fixture
def empty_model() -> TopicModelView:
    """A model with no topics at all."""
    return TopicModelView(smoothing=[], topic_words=[], vocabulary=[])


@pytest.fixture
def snapshot_data() -> Dict[str, Any]:
    """Snapshot payload equivalent to two_topic_model."""
    return {
        "vocabulary": ["cat", "dog", "fish"],
        "topics": [
            {"smoothing": 5.0, "words": [[0, 0.3], [1, 0.1]]},
            {"smoothing": 5.0, "words": [[2, 0.7]]},
        ],
    }


@pytest.fixture
def snapshot_file(tmp_path: Path, snapshot_data: Dict[str, Any]) -> Path:
    """Write the snapshot payload to a temporary JSON file."""
    file_path = tmp_path / "model.json"
    file_path.write_text(json.dumps(snapshot_data, indent=2))
    return file_path
