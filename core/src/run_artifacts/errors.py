from __future__ import annotations


class ArtifactDownloadError(RuntimeError):
    pass


class ListingFailedError(ArtifactDownloadError):
    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"error fetching artifacts: {cause}")


class NoValidArtifactsError(ArtifactDownloadError):
    def __init__(self) -> None:
        super().__init__("no valid artifacts found to download")


class NoArtifactsSelectedError(ArtifactDownloadError):
    def __init__(self) -> None:
        super().__init__("no artifacts selected")


class NoArtifactsMatchedError(ArtifactDownloadError):
    def __init__(self) -> None:
        super().__init__("no artifact matches any of the names or patterns provided")


class PathTraversalError(ArtifactDownloadError):
    """Raised when an artifact name would place files outside the destination root."""

    def __init__(self, artifact_name: str) -> None:
        super().__init__(f"error downloading {artifact_name}: would result in path traversal")
        self.artifact_name = artifact_name


class FetchFailedError(ArtifactDownloadError):
    def __init__(self, artifact_name: str, cause: BaseException) -> None:
        super().__init__(f"error downloading {artifact_name}: {cause}")
        self.artifact_name = artifact_name
