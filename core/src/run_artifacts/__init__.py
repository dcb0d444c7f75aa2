"""Select, place and fetch the artifacts of a finished run."""

from run_artifacts.api import DownloadOptions, download_artifacts, run_download, should_prompt
from run_artifacts.errors import (
    ArtifactDownloadError,
    FetchFailedError,
    ListingFailedError,
    NoArtifactsMatchedError,
    NoArtifactsSelectedError,
    NoValidArtifactsError,
    PathTraversalError,
)

__all__ = [
    "ArtifactDownloadError",
    "DownloadOptions",
    "FetchFailedError",
    "ListingFailedError",
    "NoArtifactsMatchedError",
    "NoArtifactsSelectedError",
    "NoValidArtifactsError",
    "PathTraversalError",
    "download_artifacts",
    "run_download",
    "should_prompt",
]
