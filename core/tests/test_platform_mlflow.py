from pathlib import Path

import pytest

from run_artifacts.api import DownloadOptions, run_download
from run_artifacts.platforms import mlflow_platform


class _FakeFileInfo:
    def __init__(self, path: str, is_dir: bool, file_size: int | None) -> None:
        self.path = path
        self.is_dir = is_dir
        self.file_size = file_size


class _FakeRunInfo:
    def __init__(self, run_id: str) -> None:
        self.run_id = run_id


class _FakeRun:
    def __init__(self, run_id: str) -> None:
        self.info = _FakeRunInfo(run_id)


class _FakeArtifactsModule:
    def __init__(self, owner: "FakeMlflow") -> None:
        self._owner = owner

    def list_artifacts(self, *, run_id: str) -> list[_FakeFileInfo]:
        self._owner.calls.append(("list_artifacts", (), {"run_id": run_id}))
        return [
            _FakeFileInfo(path, is_dir=isinstance(content, dict), file_size=None)
            for path, content in self._owner.runs.get(run_id, {}).items()
        ]

    def download_artifacts(self, *, artifact_uri: str, dst_path: str) -> str:
        self._owner.calls.append(("download_artifacts", (), {"artifact_uri": artifact_uri}))
        run_id, _, path = artifact_uri.removeprefix("runs:/").partition("/")
        content = self._owner.runs[run_id][path]
        target = Path(dst_path) / path
        if isinstance(content, dict):
            for relative, text in content.items():
                (target / relative).parent.mkdir(parents=True, exist_ok=True)
                (target / relative).write_text(text, encoding="utf-8")
        else:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return str(target)


class FakeMlflow:
    def __init__(self, runs: dict[str, dict[str, object]], latest: list[str] | None = None) -> None:
        self.runs = runs
        self.latest = latest or []
        self.calls: list[tuple[str, tuple[object, ...], dict[str, object]]] = []
        self.artifacts = _FakeArtifactsModule(self)

    def set_tracking_uri(self, uri: str) -> None:
        self.calls.append(("set_tracking_uri", (uri,), {}))

    def search_runs(self, **kwargs: object) -> list[_FakeRun]:
        self.calls.append(("search_runs", (), dict(kwargs)))
        return [_FakeRun(run_id) for run_id in self.latest]


def _install(monkeypatch, fake: FakeMlflow) -> None:
    monkeypatch.setattr(mlflow_platform, "_mlflow", fake)


def test_list_maps_top_level_artifacts(monkeypatch):
    fake = FakeMlflow({"r1": {"model": {"MLmodel": "x"}, "metrics.json": "{}"}})
    _install(monkeypatch, fake)

    platform = mlflow_platform.MlflowArtifactPlatform(tracking_uri="http://mlflow")
    artifacts = platform.list("r1")

    assert [artifact.name for artifact in artifacts] == ["model", "metrics.json"]
    assert artifacts[0].download_handle == "runs:/r1/model"
    assert not any(artifact.expired for artifact in artifacts)
    assert fake.calls[0] == ("set_tracking_uri", ("http://mlflow",), {})


def test_list_without_run_id_uses_latest_run_of_experiment(monkeypatch):
    fake = FakeMlflow({"r2": {"plots": {"a.png": "png"}}}, latest=["r2"])
    _install(monkeypatch, fake)

    artifacts = mlflow_platform.MlflowArtifactPlatform(experiment_name="nightly").list(None)

    assert [artifact.run_id for artifact in artifacts] == ["r2"]
    search = next(call for call in fake.calls if call[0] == "search_runs")
    assert search[2]["experiment_names"] == ["nightly"]
    assert search[2]["max_results"] == 1


def test_list_without_run_id_or_experiment_fails(monkeypatch):
    _install(monkeypatch, FakeMlflow({}))

    with pytest.raises(ValueError, match="experiment name is required"):
        mlflow_platform.MlflowArtifactPlatform().list(None)


def test_list_with_empty_experiment_fails(monkeypatch):
    _install(monkeypatch, FakeMlflow({}, latest=[]))

    with pytest.raises(LookupError, match="No runs found"):
        mlflow_platform.MlflowArtifactPlatform(experiment_name="empty").list(None)


def test_download_copies_directory_contents(monkeypatch, tmp_path):
    fake = FakeMlflow({"r1": {"model": {"MLmodel": "flavors", "data/w.bin": "01"}}})
    _install(monkeypatch, fake)
    destination = tmp_path / "out"

    mlflow_platform.MlflowArtifactPlatform().download("runs:/r1/model", destination)

    assert (destination / "MLmodel").read_text(encoding="utf-8") == "flavors"
    assert (destination / "data" / "w.bin").exists()


def test_download_single_file_artifact(monkeypatch, tmp_path):
    _install(monkeypatch, FakeMlflow({"r1": {"metrics.json": "{}"}}))

    mlflow_platform.MlflowArtifactPlatform().download("runs:/r1/metrics.json", tmp_path / "m")

    assert (tmp_path / "m" / "metrics.json").read_text(encoding="utf-8") == "{}"


def test_download_rejects_foreign_handles(monkeypatch, tmp_path):
    _install(monkeypatch, FakeMlflow({}))

    with pytest.raises(ValueError, match="Unsupported artifact handle"):
        mlflow_platform.MlflowArtifactPlatform().download("s3://bucket/x", tmp_path)


def test_missing_mlflow_is_reported(monkeypatch):
    monkeypatch.setattr(mlflow_platform, "_mlflow", None)

    with pytest.raises(RuntimeError, match="mlflow is not installed"):
        mlflow_platform.MlflowArtifactPlatform()


def test_run_download_against_mlflow(monkeypatch, tmp_path):
    _install(
        monkeypatch,
        FakeMlflow({"r1": {"model": {"MLmodel": "flavors"}, "plots": {"loss.png": "png"}}}),
    )

    count = run_download(
        DownloadOptions(run_id="r1", destination_dir=tmp_path, patterns=("mod*",)),
        platform=mlflow_platform.MlflowArtifactPlatform(),
    )

    assert count == 1
    assert (tmp_path / "model" / "MLmodel").exists()
    assert not (tmp_path / "plots").exists()
