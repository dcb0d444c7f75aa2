from __future__ import annotations

import logging
import shutil
from datetime import UTC, datetime, timedelta
from pathlib import Path

from run_artifacts.contracts import ArtifactDescriptor
from run_artifacts.runtime.artifacts import resolve_artifact_root, run_artifact_dir, runs_dir

_LOGGER = logging.getLogger("run_artifacts.platforms.local")


class LocalArtifactPlatform:
    """
    Artifact store on the local filesystem.

    Layout: <artifact_root>/runs/<run_id>/<artifact_name>/...
    Handles are absolute paths to artifact directories.
    """

    def __init__(
        self,
        *,
        artifact_root: Path | None = None,
        retention_days: int | None = None,
        now: datetime | None = None,
    ) -> None:
        self._artifact_root = artifact_root
        self._retention = timedelta(days=retention_days) if retention_days is not None else None
        self._now = now

    @property
    def artifact_root(self) -> Path:
        if self._artifact_root is None:
            self._artifact_root = resolve_artifact_root()
        return self._artifact_root

    def list(self, run_id: str | None) -> list[ArtifactDescriptor]:
        """List one run's artifacts, or every run's artifacts newest run first."""
        if run_id is not None:
            run_dirs = [run_artifact_dir(run_id, artifact_root=self.artifact_root)]
            if not run_dirs[0].is_dir():
                raise FileNotFoundError(f"Run not found: {run_id}")
        else:
            root = runs_dir(self.artifact_root)
            run_dirs = sorted(
                (path for path in root.iterdir() if path.is_dir()) if root.is_dir() else [],
                key=lambda path: path.stat().st_mtime,
                reverse=True,
            )

        descriptors: list[ArtifactDescriptor] = []
        for run_dir in run_dirs:
            for artifact_dir in sorted(run_dir.iterdir()):
                if not artifact_dir.is_dir():
                    continue
                descriptors.append(
                    ArtifactDescriptor(
                        name=artifact_dir.name,
                        download_handle=str(artifact_dir.resolve()),
                        expired=self._is_expired(artifact_dir),
                        run_id=run_dir.name,
                        size_bytes=_tree_size(artifact_dir),
                    )
                )
        _LOGGER.debug("Found %d artifact(s) under %s", len(descriptors), self.artifact_root)
        return descriptors

    def download(self, handle: str, directory: Path) -> None:
        """Copy the artifact directory's contents into directory."""
        source = Path(handle)
        if not source.is_dir():
            raise FileNotFoundError(f"Artifact not found: {handle}")
        shutil.copytree(source, directory, dirs_exist_ok=True)

    def _is_expired(self, artifact_dir: Path) -> bool:
        if self._retention is None:
            return False
        now = self._now or datetime.now(UTC)
        modified = datetime.fromtimestamp(artifact_dir.stat().st_mtime, tz=UTC)
        return now - modified > self._retention


def _tree_size(path: Path) -> int:
    return sum(item.stat().st_size for item in path.rglob("*") if item.is_file())
