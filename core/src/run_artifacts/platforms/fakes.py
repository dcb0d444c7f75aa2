from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from run_artifacts.contracts import ArtifactDescriptor

MARKER_FILENAME = ".downloaded"


@dataclass(frozen=True, slots=True)
class PlatformCall:
    """Record of a platform call for assertions in tests."""

    name: str
    kwargs: dict[str, Any]


class FakeArtifactPlatform:
    """
    In-memory ArtifactPlatform for unit tests.

    download() writes a marker file holding the handle, so placement can be
    checked on disk as well as through calls.
    """

    def __init__(
        self,
        artifacts: Iterable[ArtifactDescriptor] = (),
        *,
        list_error: Exception | None = None,
        download_errors: Mapping[str, Exception] | None = None,
    ) -> None:
        self._artifacts = list(artifacts)
        self._list_error = list_error
        self._download_errors = dict(download_errors or {})
        self._calls: list[PlatformCall] = []

    @property
    def calls(self) -> list[PlatformCall]:
        """Return the recorded calls in order."""
        return list(self._calls)

    @property
    def downloads(self) -> list[tuple[str, Path]]:
        """Return (handle, directory) pairs in download order."""
        return [
            (call.kwargs["handle"], call.kwargs["directory"])
            for call in self._calls
            if call.name == "download"
        ]

    def list(self, run_id: str | None) -> list[ArtifactDescriptor]:
        self._record("list", run_id=run_id)
        if self._list_error is not None:
            raise self._list_error
        return [
            artifact
            for artifact in self._artifacts
            if run_id is None or artifact.run_id in (None, run_id)
        ]

    def download(self, handle: str, directory: Path) -> None:
        self._record("download", handle=handle, directory=Path(directory))
        error = self._download_errors.get(handle)
        if error is not None:
            raise error
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        (directory / MARKER_FILENAME).write_text(handle, encoding="utf-8")

    def _record(self, name: str, **kwargs: Any) -> None:
        self._calls.append(PlatformCall(name=name, kwargs=kwargs))
