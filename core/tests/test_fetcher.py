from pathlib import Path

import pytest

from run_artifacts.contracts import ArtifactDescriptor, ResolvedTarget
from run_artifacts.errors import FetchFailedError
from run_artifacts.orchestration import fetch_all
from run_artifacts.platforms.fakes import MARKER_FILENAME, FakeArtifactPlatform


def _target(name: str, destination: Path) -> ResolvedTarget:
    return ResolvedTarget(
        descriptor=ArtifactDescriptor(name=name, download_handle=f"h:{name}"),
        destination=destination,
    )


def test_fetch_all_downloads_in_order_and_counts(tmp_path: Path):
    platform = FakeArtifactPlatform()
    targets = [_target("a", tmp_path / "a"), _target("b", tmp_path / "b")]

    count = fetch_all(targets, platform=platform)

    assert count == 2
    assert platform.downloads == [("h:a", tmp_path / "a"), ("h:b", tmp_path / "b")]
    assert (tmp_path / "a" / MARKER_FILENAME).read_text(encoding="utf-8") == "h:a"


def test_fetch_all_stops_at_first_failure(tmp_path: Path):
    cause = ConnectionError("connection reset")
    platform = FakeArtifactPlatform(download_errors={"h:b": cause})
    targets = [
        _target("a", tmp_path / "a"),
        _target("b", tmp_path / "b"),
        _target("c", tmp_path / "c"),
    ]

    with pytest.raises(FetchFailedError, match="error downloading b: connection reset") as excinfo:
        fetch_all(targets, platform=platform)

    assert excinfo.value.artifact_name == "b"
    assert excinfo.value.__cause__ is cause
    assert [handle for handle, _ in platform.downloads] == ["h:a", "h:b"]
    assert not (tmp_path / "c").exists()


def test_fetch_all_with_no_targets_is_zero():
    platform = FakeArtifactPlatform()

    assert fetch_all([], platform=platform) == 0
    assert platform.calls == []
