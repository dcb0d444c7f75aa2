"""Runtime helpers for the local artifact store."""

from run_artifacts.runtime.artifacts import resolve_artifact_root, run_artifact_dir, runs_dir

__all__ = ["resolve_artifact_root", "run_artifact_dir", "runs_dir"]
