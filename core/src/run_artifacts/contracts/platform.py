from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from run_artifacts.contracts.artifact import ArtifactDescriptor


@runtime_checkable
class ArtifactPlatform(Protocol):
    """
    Facade contract for remote artifact stores.
    """

    def list(self, run_id: str | None) -> list[ArtifactDescriptor]:
        """List artifacts for a run, or the latest artifacts when run_id is None."""
        ...

    def download(self, handle: str, directory: Path) -> None:
        """Materialize the artifact behind handle into directory, creating it as needed."""
        ...
