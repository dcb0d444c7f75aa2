from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

from run_artifacts.api import DownloadOptions, run_download, should_prompt
from run_artifacts.configuration import ConfigError, load_download_config
from run_artifacts.contracts import ArtifactPlatform, DownloadConfig, MlflowSourceConfig
from run_artifacts.errors import ArtifactDownloadError
from run_artifacts.platforms import LocalArtifactPlatform, MlflowArtifactPlatform
from run_artifacts.prompting import RichPrompter


def _resolve_tracking_uri() -> str:
    tracking_uri = os.environ.get("MLFLOW_TRACKING_URI")
    return tracking_uri or "http://localhost:5000"


def _resolve_experiment_name() -> str | None:
    return os.environ.get("MLFLOW_EXPERIMENT")


def build_platform(config: DownloadConfig) -> ArtifactPlatform:
    source = config.source
    if isinstance(source, MlflowSourceConfig):
        try:
            return MlflowArtifactPlatform(
                tracking_uri=source.tracking_uri or _resolve_tracking_uri(),
                experiment_name=source.experiment or _resolve_experiment_name(),
            )
        except RuntimeError as exc:
            raise ConfigError(f"mlflow source unavailable: {exc}") from exc
    artifact_root = Path(source.artifact_root).expanduser() if source.artifact_root else None
    return LocalArtifactPlatform(
        artifact_root=artifact_root,
        retention_days=source.retention_days,
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Download artifacts produced by a run.")
    parser.add_argument("run_id", nargs="?", default=None, help="Run to download from")
    parser.add_argument(
        "-D",
        "--dir",
        dest="destination_dir",
        default=None,
        help="The directory to download artifacts into (default: .)",
    )
    parser.add_argument(
        "-n",
        "--name",
        dest="names",
        action="append",
        default=None,
        help="Download artifacts that match any of the given names",
    )
    parser.add_argument(
        "-p",
        "--pattern",
        dest="patterns",
        action="append",
        default=None,
        help="Download artifacts that match a glob pattern",
    )
    parser.add_argument("--config", type=Path, default=None, help="Optional download YAML")
    parser.add_argument(
        "--source",
        choices=["local", "mlflow"],
        default=None,
        help="Artifact store to read from (default: local)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_overrides(args: argparse.Namespace) -> dict[str, Any]:
    download: dict[str, Any] = {}
    if args.run_id is not None:
        download["run_id"] = args.run_id
    if args.destination_dir is not None:
        download["dir"] = args.destination_dir
    if args.names:
        download["names"] = list(args.names)
    if args.patterns:
        download["patterns"] = list(args.patterns)

    overrides: dict[str, Any] = {}
    if download:
        overrides["download"] = download
    if args.source is not None:
        overrides["source"] = {"kind": args.source}
    return overrides


def _can_prompt() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def build_options(config: DownloadConfig, *, can_prompt: bool) -> DownloadOptions:
    section = config.download
    return DownloadOptions(
        run_id=section.run_id,
        destination_dir=Path(section.dir).expanduser(),
        names=tuple(section.names),
        patterns=tuple(section.patterns),
        do_prompt=should_prompt(
            section.run_id, section.names, section.patterns, can_prompt=can_prompt
        ),
    )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    console = Console(stderr=True)

    try:
        config = load_download_config(args.config, overrides=build_overrides(args))
        options = build_options(config, can_prompt=_can_prompt())
        platform = build_platform(config)
        prompter = RichPrompter(console=console) if options.do_prompt else None
        if options.do_prompt:
            count = run_download(options, platform=platform, prompter=prompter)
        else:
            with console.status("Downloading artifacts..."):
                count = run_download(options, platform=platform, prompter=prompter)
    except (ArtifactDownloadError, ConfigError) as exc:
        console.print(str(exc), style="red", markup=False)
        return 1

    noun = "artifact" if count == 1 else "artifacts"
    destination = escape(str(options.destination_dir))
    console.print(f"[green]Downloaded {count} {noun}[/] into {destination}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
