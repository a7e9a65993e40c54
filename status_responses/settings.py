"""Pydantic models and loaders for the package logging configuration."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any
from typing import Dict
from typing import Optional
from typing import Union

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator


DEFAULT_LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


class LoggingSettings(BaseModel):
    """Settings applied to the ``status_responses`` package logger."""

    level: int = Field(logging.INFO, ge=0)
    format: str = Field(DEFAULT_LOG_FORMAT, min_length=1)
    propagate: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def _normalise_level(cls, value: Union[int, str, None]) -> int:
        """Accept numeric levels or level names such as ``"debug"``."""

        if value is None:
            return logging.INFO
        if isinstance(value, bool):
            raise ValueError("level must be a logging level name or number")
        if isinstance(value, int):
            return value
        cleaned = str(value).strip()
        if cleaned.isdigit():
            return int(cleaned)
        resolved = logging.getLevelName(cleaned.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {value!r}")
        return resolved

    @field_validator("format")
    @classmethod
    def _validate_format(cls, value: str) -> str:
        """Ensure the format string is not blank."""

        cleaned = value.strip()
        if not cleaned:
            raise ValueError("format cannot be empty")
        return cleaned


def _load_config_from_json(raw_json: str) -> Dict[str, Any]:
    """Return configuration data parsed from a raw JSON string."""

    try:
        parsed = json.loads(raw_json)
    except json.JSONDecodeError as exc:
        raise ValueError("Invalid JSON supplied for logging settings") from exc

    if not isinstance(parsed, dict):
        raise ValueError("Configuration JSON must decode to a mapping")

    return parsed


def _load_config_from_path(path: Path) -> Dict[str, Any]:
    """Return configuration data parsed from a JSON file."""

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        return _load_config_from_json(handle.read())


def load_logging_settings(
    *,
    path: Optional[Union[str, Path]] = None,
    raw_json: Optional[str] = None,
) -> LoggingSettings:
    """Load logging settings from a JSON string or a JSON file.

    ``raw_json`` takes precedence over ``path``. With neither argument the
    defaults are returned.

    Args:
        path (Optional[Union[str, Path]]): JSON file holding the settings.
        raw_json (Optional[str]): JSON document holding the settings.

    Returns:
        LoggingSettings: Validated settings.

    Raises:
        ValueError: If the JSON is malformed or not a mapping, or a field is
            invalid.
        FileNotFoundError: If ``path`` does not exist.
    """

    if raw_json is not None:
        data = _load_config_from_json(raw_json)
    elif path is not None:
        data = _load_config_from_path(Path(path))
    else:
        data = {}
    return LoggingSettings(**data)


__all__ = ["DEFAULT_LOG_FORMAT", "LoggingSettings", "load_logging_settings"]
