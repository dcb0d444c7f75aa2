from __future__ import annotations

import os
import re
from collections.abc import Mapping
from copy import deepcopy
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from run_artifacts.contracts import DownloadConfig

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


class ConfigError(ValueError):
    pass


def load_yaml(path: str | Path) -> dict[str, Any]:
    try:
        with Path(path).open("r", encoding="utf-8") as handle:
            payload = yaml.safe_load(handle) or {}
    except OSError as exc:
        raise ConfigError(f"Unable to read config file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"YAML root must be a mapping: {path}")
    return payload


def load_download_config(
    path: str | Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> DownloadConfig:
    """Load a download config file, layering command-line overrides on top."""
    payload: dict[str, Any] = load_yaml(path) if path is not None else {}
    payload = resolve_env_vars(payload)
    if overrides:
        payload = deep_merge(_drop_replaced_source(payload, overrides), overrides)
    return load_download_config_dict(payload)


def load_download_config_dict(payload: Mapping[str, Any]) -> DownloadConfig:
    try:
        return DownloadConfig.model_validate(dict(payload))
    except ValidationError as exc:
        raise ConfigError(_format_validation_error("config", exc)) from exc


def _drop_replaced_source(
    payload: dict[str, Any], overrides: Mapping[str, Any]
) -> dict[str, Any]:
    # Switching source kind discards the file's settings for the other kind
    source = payload.get("source")
    override_source = overrides.get("source")
    if not isinstance(source, Mapping) or not isinstance(override_source, Mapping):
        return payload
    override_kind = override_source.get("kind")
    if override_kind is None or override_kind == source.get("kind", "local"):
        return payload
    trimmed = dict(payload)
    trimmed.pop("source")
    return trimmed


def resolve_env_vars(payload: Any) -> Any:
    return _resolve_env_vars(payload, path="$")


def _resolve_env_vars(payload: Any, *, path: str) -> Any:
    if isinstance(payload, Mapping):
        return {
            str(key): _resolve_env_vars(value, path=f"{path}.{key}")
            for key, value in payload.items()
        }
    if isinstance(payload, list):
        return [
            _resolve_env_vars(value, path=f"{path}[{index}]") for index, value in enumerate(payload)
        ]
    if isinstance(payload, str):
        return _substitute_env(payload, path=path)
    return payload


def _substitute_env(value: str, *, path: str) -> str:
    def replace(match: re.Match[str]) -> str:
        key = match.group(1)
        env_value = os.environ.get(key)
        if env_value is None:
            raise ConfigError(f"Missing environment variable '{key}' at {path}")
        return env_value

    return _ENV_VAR_PATTERN.sub(replace, value)


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    merged = deepcopy(dict(base))
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = deepcopy(value)
    return merged


def _format_validation_error(prefix: str, exc: ValidationError) -> str:
    details: list[str] = []
    for error in exc.errors(include_url=False):
        loc = ".".join(str(part) for part in error["loc"])
        details.append(f"{prefix}.{loc}: {error['msg']}")
    return "; ".join(details)
