from __future__ import annotations

import logging
import shutil
import tempfile
from pathlib import Path
from typing import Any

from run_artifacts.contracts import ArtifactDescriptor

try:
    import mlflow as _mlflow
except Exception:  # pragma: no cover - handled via runtime error
    _mlflow = None

_LOGGER = logging.getLogger("run_artifacts.platforms.mlflow")
_RUNS_URI_PREFIX = "runs:/"


def _require_mlflow() -> Any:
    if _mlflow is None:
        raise RuntimeError(
            "mlflow is not installed. Install mlflow or provide a fake module for tests."
        )
    return _mlflow


class MlflowArtifactPlatform:
    """
    MLflow-backed implementation of the ArtifactPlatform facade.

    Each top-level artifact path of a run is one artifact. MLflow has no
    retention, so nothing is ever reported expired.
    """

    def __init__(
        self,
        *,
        tracking_uri: str | None = None,
        experiment_name: str | None = None,
    ) -> None:
        self._mlflow = _require_mlflow()
        self._experiment_name = experiment_name

        if tracking_uri is not None:
            self._mlflow.set_tracking_uri(tracking_uri)

    def list(self, run_id: str | None) -> list[ArtifactDescriptor]:
        """List the top-level artifacts of a run, defaulting to the experiment's latest run."""
        resolved_run_id = run_id if run_id is not None else self._latest_run_id()
        entries = self._mlflow.artifacts.list_artifacts(run_id=resolved_run_id)
        return [
            ArtifactDescriptor(
                name=entry.path,
                download_handle=f"{_RUNS_URI_PREFIX}{resolved_run_id}/{entry.path}",
                expired=False,
                run_id=resolved_run_id,
                size_bytes=entry.file_size,
            )
            for entry in entries
        ]

    def download(self, handle: str, directory: Path) -> None:
        """Download an artifact and copy its contents into directory."""
        if not handle.startswith(_RUNS_URI_PREFIX):
            raise ValueError(f"Unsupported artifact handle: {handle}")
        directory = Path(directory)
        with tempfile.TemporaryDirectory(prefix="run-artifacts-") as staging:
            local_path = Path(
                self._mlflow.artifacts.download_artifacts(artifact_uri=handle, dst_path=staging)
            )
            directory.mkdir(parents=True, exist_ok=True)
            if local_path.is_dir():
                shutil.copytree(local_path, directory, dirs_exist_ok=True)
            else:
                shutil.copy2(local_path, directory / local_path.name)
        _LOGGER.debug("Copied %s into %s", handle, directory)

    def _latest_run_id(self) -> str:
        if self._experiment_name is None:
            raise ValueError("A run id or an experiment name is required to list MLflow artifacts.")
        runs = self._mlflow.search_runs(
            experiment_names=[self._experiment_name],
            max_results=1,
            order_by=["attributes.start_time DESC"],
            output_format="list",
        )
        if not runs:
            raise LookupError(f"No runs found in experiment '{self._experiment_name}'")
        return runs[0].info.run_id
