from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from run_artifacts.contracts import (
    ArtifactDescriptor,
    ArtifactPlatform,
    Prompter,
    SelectionCriteria,
)
from run_artifacts.errors import ListingFailedError
from run_artifacts.orchestration import fetch_all
from run_artifacts.selection import resolve_targets

_LOGGER = logging.getLogger("run_artifacts.download")


@dataclass(frozen=True, slots=True)
class DownloadOptions:
    """
    What the caller asked for.

    run_id=None means "the latest artifacts the platform knows about".
    """

    run_id: str | None = None
    destination_dir: str | Path = "."
    names: tuple[str, ...] = ()
    patterns: tuple[str, ...] = ()
    do_prompt: bool = False

    def criteria(self) -> SelectionCriteria:
        return SelectionCriteria(names=tuple(self.names), patterns=tuple(self.patterns))


def should_prompt(
    run_id: str | None,
    names: Sequence[str],
    patterns: Sequence[str],
    *,
    can_prompt: bool,
) -> bool:
    """Prompt only when nothing narrows the selection and a terminal is attached."""
    return run_id is None and not names and not patterns and can_prompt


def download_artifacts(
    artifacts: Iterable[ArtifactDescriptor],
    criteria: SelectionCriteria,
    *,
    destination_dir: str | Path,
    platform: ArtifactPlatform,
    interactive: bool = False,
    prompter: Prompter | None = None,
) -> int:
    """Resolve and fetch artifacts, returning how many were placed on disk."""
    targets = resolve_targets(
        artifacts,
        criteria,
        destination_dir=destination_dir,
        interactive=interactive,
        prompter=prompter,
    )
    _LOGGER.debug(
        "Resolved %d artifact(s): %s",
        len(targets),
        ", ".join(target.name for target in targets),
    )
    return fetch_all(targets, platform=platform)


def run_download(
    options: DownloadOptions,
    *,
    platform: ArtifactPlatform,
    prompter: Prompter | None = None,
) -> int:
    """List the run's artifacts, then select and fetch them."""
    try:
        artifacts = platform.list(options.run_id)
    except Exception as exc:
        raise ListingFailedError(exc) from exc
    _LOGGER.debug("Listed %d artifact(s) for run %s", len(artifacts), options.run_id or "<latest>")

    return download_artifacts(
        artifacts,
        options.criteria(),
        destination_dir=options.destination_dir,
        platform=platform,
        interactive=options.do_prompt,
        prompter=prompter,
    )
