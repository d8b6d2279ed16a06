"""
Atomic file writer utilities for report files.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def _ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _atomic_replace(src: Path, dest: Path) -> None:
    """
    Replace destination atomically where possible.
    Uses os.replace for cross-platform atomic replace semantics.
    """
    try:
        os.replace(src, dest)
    except OSError:
        src.unlink(missing_ok=True)
        raise


def write_bytes(path: str | Path, data: bytes) -> Path:
    target = Path(path)
    _ensure_parent_dir(target)
    with tempfile.NamedTemporaryFile(delete=False, dir=str(target.parent)) as tmp:
        tmp.write(data)
        tmp.flush()
        os.fsync(tmp.fileno())
        tmp_path = Path(tmp.name)
    _atomic_replace(tmp_path, target)
    return target


def write_text(path: str | Path, text: str, encoding: str = "utf-8") -> Path:
    return write_bytes(path, text.encode(encoding))
