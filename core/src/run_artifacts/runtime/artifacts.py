from __future__ import annotations

import os
import tempfile
from pathlib import Path

_ENV_ARTIFACT_ROOT = "RUN_ARTIFACTS_ROOT"
_LOCAL_ARTIFACT_DIRNAME = ".artifacts"
_TEMP_ARTIFACT_DIRNAME = "run-artifacts"
_RUNS_DIRNAME = "runs"


def resolve_artifact_root() -> Path:
    """Resolve the first existing, readable artifact store root."""
    candidates: list[Path] = []

    env_value = os.environ.get(_ENV_ARTIFACT_ROOT)
    if env_value:
        candidates.append(Path(env_value).expanduser())

    candidates.append(Path.cwd() / _LOCAL_ARTIFACT_DIRNAME)
    candidates.append(Path(tempfile.gettempdir()) / _TEMP_ARTIFACT_DIRNAME)

    for candidate in candidates:
        if _is_readable_dir(candidate):
            return candidate

    raise RuntimeError("Unable to resolve an artifact store root directory.")


def runs_dir(artifact_root: Path) -> Path:
    return artifact_root / _RUNS_DIRNAME


def run_artifact_dir(run_id: str, *, artifact_root: Path | None = None) -> Path:
    """Return the per-run artifact directory for a run id."""
    if not run_id or run_id in {".", ".."} or "/" in run_id or os.sep in run_id:
        raise ValueError(f"Invalid run id: {run_id!r}")
    root = artifact_root if artifact_root is not None else resolve_artifact_root()
    return runs_dir(root) / run_id


def _is_readable_dir(path: Path) -> bool:
    return path.is_dir() and os.access(path, os.R_OK | os.X_OK)
