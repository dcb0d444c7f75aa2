from .fakes import FakeArtifactPlatform, PlatformCall
from .local import LocalArtifactPlatform
from .mlflow_platform import MlflowArtifactPlatform

__all__ = [
    "FakeArtifactPlatform",
    "PlatformCall",
    "LocalArtifactPlatform",
    "MlflowArtifactPlatform",
]
