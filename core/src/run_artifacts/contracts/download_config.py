from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LocalSourceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["local"] = "local"
    artifact_root: str | None = None
    retention_days: int | None = Field(default=90, ge=1)


class MlflowSourceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    kind: Literal["mlflow"]
    tracking_uri: str | None = None
    experiment: str | None = None


SourceConfig = Annotated[LocalSourceConfig | MlflowSourceConfig, Field(discriminator="kind")]


class DownloadSection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    run_id: str | None = None
    dir: str = Field(default=".", min_length=1)
    names: list[str] = Field(default_factory=list)
    patterns: list[str] = Field(default_factory=list)

    @field_validator("names", "patterns", mode="before")
    @classmethod
    def _coerce_list(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("run_id", mode="before")
    @classmethod
    def _coerce_run_id(cls, value: Any) -> Any:
        # YAML reads bare numeric ids as ints
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class DownloadConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    source: SourceConfig = Field(default_factory=LocalSourceConfig)
    download: DownloadSection = Field(default_factory=DownloadSection)

    @field_validator("source", mode="before")
    @classmethod
    def _default_source_kind(cls, value: Any) -> Any:
        if isinstance(value, dict) and "kind" not in value:
            return {"kind": "local", **value}
        return value
