"""Client configuration (pydantic models and YAML loader)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from .exceptions import ConfigError, ConfigErrorCodes
from .models import TuyaRegion


class ApiSection(BaseModel):
    """Cloud project endpoint and credentials."""

    base_url: str | None = None
    region: TuyaRegion | None = None
    client_id: str = Field(min_length=1)
    client_secret: str = Field(min_length=1, repr=False)
    timeout_seconds: float = Field(default=10.0, gt=0)

    @model_validator(mode="after")
    def _require_endpoint(self) -> ApiSection:
        if not self.base_url and self.region is None:
            raise ValueError("either base_url or region must be set")
        return self

    def resolved_base_url(self) -> str:
        if self.base_url:
            return self.base_url.rstrip("/")
        if self.region is None:
            raise ValueError("either base_url or region must be set")
        return self.region.value


class LogSection(BaseModel):
    """Logging settings."""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class TuyaConfig(BaseModel):
    """Root configuration."""

    api: ApiSection
    log: LogSection = Field(default_factory=LogSection)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge ``override`` into ``base``; lists are replaced, not merged."""
    result: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(
            code=ConfigErrorCodes.READ_FILE,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(
            code=ConfigErrorCodes.PARSE_YAML,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    if not isinstance(data, dict):
        raise ConfigError(
            code=ConfigErrorCodes.PARSE_YAML,
            message=f"Config root must be a mapping: {path}",
        )
    return data


def load_config(base_path: Path, override_path: Path | None = None) -> TuyaConfig:
    """Load a TuyaConfig from YAML.

    ``override_path`` is merged over the base file when it exists, so
    credentials can live in a separate, untracked file.
    """
    data = _read_yaml(base_path)
    if override_path is not None and override_path.exists():
        data = deep_merge(data, _read_yaml(override_path))
    try:
        return TuyaConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(
            code=ConfigErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
