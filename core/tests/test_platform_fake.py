import pytest

from run_artifacts.contracts import ArtifactDescriptor, ArtifactPlatform
from run_artifacts.platforms.fakes import MARKER_FILENAME, FakeArtifactPlatform


def test_fake_platform_satisfies_protocol():
    assert isinstance(FakeArtifactPlatform(), ArtifactPlatform)


def test_fake_platform_records_calls_in_order(tmp_path):
    artifact = ArtifactDescriptor(name="a", download_handle="h:a", run_id="7")
    platform = FakeArtifactPlatform([artifact])

    assert platform.list("7") == [artifact]
    assert platform.list("8") == []
    platform.download("h:a", tmp_path / "a")

    assert [call.name for call in platform.calls] == ["list", "list", "download"]
    assert (tmp_path / "a" / MARKER_FILENAME).exists()


def test_fake_platform_raises_configured_errors(tmp_path):
    platform = FakeArtifactPlatform(
        list_error=RuntimeError("boom"), download_errors={"h:x": OSError("nope")}
    )

    with pytest.raises(RuntimeError, match="boom"):
        platform.list(None)
    with pytest.raises(OSError, match="nope"):
        platform.download("h:x", tmp_path)
