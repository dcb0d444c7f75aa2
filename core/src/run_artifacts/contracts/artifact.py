from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ArtifactDescriptor:
    """
    One artifact as reported by a listing platform.

    Several descriptors may share a name (re-uploads, parallel jobs).
    """

    name: str
    download_handle: str
    expired: bool = False

    # Informational only; never used for selection
    run_id: str | None = None
    size_bytes: int | None = None


@dataclass(frozen=True, slots=True)
class SelectionCriteria:
    names: tuple[str, ...] = ()
    patterns: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        """True when everything non-expired is wanted."""
        return not self.names and not self.patterns


@dataclass(frozen=True, slots=True)
class ResolvedTarget:
    descriptor: ArtifactDescriptor
    destination: Path

    @property
    def name(self) -> str:
        return self.descriptor.name
