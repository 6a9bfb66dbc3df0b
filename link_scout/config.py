# === FILE: link_scout/config.py ===
"""
Loading and validation of the LinkScout run configuration.
Pydantic describes the schema; YAML and JSON files are accepted.
"""
from __future__ import annotations

import errno
import json
import os
import re
from pathlib import Path
from typing import Any, Literal, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from link_scout import __version__

__all__ = ["FinderConfig", "NoSeedsError", "load_config"]


class NoSeedsError(ValueError):
    """Raised when a run is started without a single seed domain."""


class FinderConfig(BaseModel):
    """Settings for one LinkScout run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    concurrency: int = Field(10, ge=1, description="Concurrent script fetches per seed.")
    timeout: float = Field(10.0, gt=0, description="Timeout of a single request (seconds).")
    scan_timeout: Optional[float] = Field(
        None, gt=0, description="Deadline shared by every fetch phase of the run; defaults to timeout."
    )
    user_agent: str = Field(
        f"LinkScout/{__version__}", min_length=1, description="User-Agent sent with script fetches."
    )
    filter: Optional[str] = Field(None, description="Keep only values containing this substring.")
    output_format: Literal["text", "json"] = Field("text", description="Output record format.")
    verbose: bool = Field(False, description="Log dropped requests and other details.")
    silent: bool = Field(False, description="Log warnings and errors only.")
    pattern: Optional[str] = Field(None, description="Custom extraction regex.")

    @field_validator("filter", "pattern", mode="before")
    def _empty_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v:
            return None
        return v

    @field_validator("pattern")
    def _pattern_compiles(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            try:
                re.compile(v)
            except re.error as exc:
                raise ValueError(f"invalid extraction pattern: {exc}") from exc
        return v

    @model_validator(mode="after")
    def _check_toggles(self) -> FinderConfig:
        if self.verbose and self.silent:
            raise ValueError("verbose and silent are mutually exclusive")
        return self

    @property
    def fetch_deadline(self) -> float:
        """Seconds the whole fetch phase of a run may take."""
        return self.scan_timeout if self.scan_timeout is not None else self.timeout


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None] = None) -> FinderConfig:
    """
    Read YAML or JSON and return a validated FinderConfig.

    Without *path* the project default ``configs/default.yaml`` is used when it
    exists, built-in defaults otherwise. An explicit path that does not exist
    raises FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return FinderConfig()
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return FinderConfig(**data)
