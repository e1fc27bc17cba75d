"""Client configuration (pydantic BaseModel) and YAML loader."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from .exceptions import ConfigError, ConfigErrorCodes

CONFIG_SECTION = "elasticsearch"


class ClientConfig(BaseModel):
    """Connection settings for a single engine node."""

    host: str = "localhost"
    port: int = Field(default=9200, ge=1, le=65535)
    scheme: Literal["http", "https"] = "http"
    timeout_seconds: float = Field(default=30.0, gt=0)
    headers: dict[str, str] = Field(default_factory=dict)

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}"


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


def load_config(path: Path) -> ClientConfig:
    """YAML ファイルから ClientConfig を読み込む。

    The ``elasticsearch:`` section is used when present, otherwise the whole
    document is treated as the client section.
    """
    data = _read_yaml(path)
    section = data.get(CONFIG_SECTION, data)
    try:
        return ClientConfig.model_validate(section)
    except ValidationError as e:
        raise ConfigError(
            code=ConfigErrorCodes.VALIDATION,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
