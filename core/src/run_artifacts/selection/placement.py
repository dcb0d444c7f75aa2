from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path


def requires_isolation(names: Sequence[str], patterns: Sequence[str]) -> bool:
    """Decide whether each artifact gets its own subdirectory under the destination root."""
    if patterns:
        # Patterns can match multiple artifacts
        return True
    if not names:
        # Everything is wanted, whatever it is named
        return True
    if len(names) > 1:
        return True
    return False


def filepath_descends_from(candidate: str | Path, root: str | Path) -> bool:
    """
    Return True when candidate is root or lies beneath it.

    Both paths are made absolute and normalized lexically; symlinks are not followed.
    """
    candidate_path = Path(os.path.abspath(candidate))
    root_path = Path(os.path.abspath(root))
    return candidate_path == root_path or root_path in candidate_path.parents
