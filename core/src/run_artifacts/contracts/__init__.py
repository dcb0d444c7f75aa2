from .artifact import ArtifactDescriptor, ResolvedTarget, SelectionCriteria
from .download_config import (
    DownloadConfig,
    DownloadSection,
    LocalSourceConfig,
    MlflowSourceConfig,
)
from .platform import ArtifactPlatform
from .prompter import Prompter

__all__ = [
    "ArtifactDescriptor",
    "ResolvedTarget",
    "SelectionCriteria",
    "DownloadConfig",
    "DownloadSection",
    "LocalSourceConfig",
    "MlflowSourceConfig",
    "ArtifactPlatform",
    "Prompter",
]
