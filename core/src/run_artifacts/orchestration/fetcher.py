from __future__ import annotations

import logging
from collections.abc import Iterable

from run_artifacts.contracts import ArtifactPlatform, ResolvedTarget
from run_artifacts.errors import FetchFailedError

_LOGGER = logging.getLogger("run_artifacts.download")


def fetch_all(targets: Iterable[ResolvedTarget], *, platform: ArtifactPlatform) -> int:
    """Download targets in order, stopping at the first failure."""
    fetched = 0
    for target in targets:
        _LOGGER.info("Downloading %s into %s", target.name, target.destination)
        try:
            platform.download(target.descriptor.download_handle, target.destination)
        except Exception as exc:
            raise FetchFailedError(target.name, exc) from exc
        fetched += 1
    return fetched
