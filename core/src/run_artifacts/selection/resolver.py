from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from run_artifacts.contracts import (
    ArtifactDescriptor,
    Prompter,
    ResolvedTarget,
    SelectionCriteria,
)
from run_artifacts.errors import (
    NoArtifactsMatchedError,
    NoArtifactsSelectedError,
    NoValidArtifactsError,
    PathTraversalError,
)
from run_artifacts.selection.matching import match_any_name, match_any_pattern
from run_artifacts.selection.placement import filepath_descends_from, requires_isolation

PROMPT_MESSAGE = "Select artifacts to download:"
# Known limitation: names past the cap cannot be picked interactively.
PROMPT_OPTION_LIMIT = 10

_LOGGER = logging.getLogger("run_artifacts.selection")


def filter_valid(artifacts: Iterable[ArtifactDescriptor]) -> list[ArtifactDescriptor]:
    """Drop expired descriptors, failing when nothing is left."""
    valid = [artifact for artifact in artifacts if not artifact.expired]
    if not valid:
        raise NoValidArtifactsError()
    return valid


def distinct_names(artifacts: Iterable[ArtifactDescriptor]) -> list[str]:
    """Artifact names in order of first appearance."""
    return list(dict.fromkeys(artifact.name for artifact in artifacts))


def choose_names(artifacts: Sequence[ArtifactDescriptor], *, prompter: Prompter) -> list[str]:
    """Ask the prompter which artifact names to download."""
    options = distinct_names(artifacts)
    if len(options) > PROMPT_OPTION_LIMIT:
        _LOGGER.warning(
            "Only the first %d of %d artifact names are offered for selection",
            PROMPT_OPTION_LIMIT,
            len(options),
        )
        options = options[:PROMPT_OPTION_LIMIT]

    selected = prompter.multi_select(PROMPT_MESSAGE, [], options)
    invalid = [index for index in selected if not 0 <= index < len(options)]
    if invalid:
        raise ValueError(f"prompter returned indices outside the options: {invalid}")
    chosen = [options[index] for index in selected]
    if not chosen:
        raise NoArtifactsSelectedError()
    return chosen


def resolve_targets(
    artifacts: Iterable[ArtifactDescriptor],
    criteria: SelectionCriteria,
    *,
    destination_dir: str | Path,
    interactive: bool = False,
    prompter: Prompter | None = None,
) -> list[ResolvedTarget]:
    """
    Decide which artifacts to fetch and where each one lands.

    The first non-expired descriptor of a name wins; later descriptors sharing
    the name are skipped. Any destination escaping destination_dir aborts the
    whole pass.
    """
    valid = filter_valid(artifacts)

    if interactive:
        if prompter is None:
            raise ValueError("interactive selection requires a prompter")
        criteria = SelectionCriteria(names=tuple(choose_names(valid, prompter=prompter)))

    root = Path(destination_dir)
    isolate = requires_isolation(criteria.names, criteria.patterns)
    filtered = not criteria.is_empty()

    targets: list[ResolvedTarget] = []
    resolved_names: set[str] = set()
    for artifact in valid:
        if artifact.name in resolved_names:
            _LOGGER.debug("Skipping duplicate artifact %s", artifact.name)
            continue
        if filtered and not (
            match_any_name(criteria.names, artifact.name)
            or match_any_pattern(criteria.patterns, artifact.name)
        ):
            continue

        destination = root / artifact.name if isolate else root
        if not filepath_descends_from(destination, root):
            raise PathTraversalError(artifact.name)

        targets.append(ResolvedTarget(descriptor=artifact, destination=destination))
        resolved_names.add(artifact.name)

    if not targets:
        raise NoArtifactsMatchedError()
    return targets
