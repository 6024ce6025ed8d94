"""
TOML configuration.

Example lemmata.toml:

    [assets]
    dir = "dicts"              # read assets from here instead of the package

    [parser]
    separator = "\\t"
    on_malformed = "skip"      # "strict" (default) or "skip"
    index_lemmas = true

    [logging]
    level = "INFO"
    file = "logs/lemmata.log"  # optional

Relative paths are resolved against the config file's directory.
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from lemmata.dictionary import DEFAULT_SEPARATOR, MalformedLinePolicy
from lemmata.errors import ConfigError

CONFIG_FILENAME = "lemmata.toml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(slots=True)
class Settings:
    """Loader and logging settings, with defaults for everything."""

    asset_dir: Path | None = None
    separator: str = DEFAULT_SEPARATOR
    on_malformed: MalformedLinePolicy = MalformedLinePolicy.STRICT
    index_lemmas: bool = True

    log_level: str = "INFO"
    log_file: Path | None = None
    log_file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_file_backup_count: int = 5

    def __post_init__(self) -> None:
        sep = self.separator
        if not isinstance(sep, str) or not sep or "\n" in sep or "\r" in sep:
            raise ConfigError(f"parser.separator must be a non-empty single-line string, got {sep!r}")
        try:
            self.on_malformed = MalformedLinePolicy(self.on_malformed)
        except ValueError:
            choices = ", ".join(p.value for p in MalformedLinePolicy)
            raise ConfigError(
                f"parser.on_malformed must be one of {choices}, got {self.on_malformed!r}"
            ) from None
        if not isinstance(self.index_lemmas, bool):
            raise ConfigError(f"parser.index_lemmas must be a boolean, got {self.index_lemmas!r}")
        level = str(self.log_level).upper()
        if level not in _LOG_LEVELS:
            raise ConfigError(f"logging.level must be one of {', '.join(_LOG_LEVELS)}, got {self.log_level!r}")
        self.log_level = level
        for field_name, value in (
            ("logging.max_bytes", self.log_file_max_bytes),
            ("logging.backup_count", self.log_file_backup_count),
        ):
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"{field_name} must be a non-negative integer, got {value!r}")

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_file(cls, path: str | Path) -> Settings:
        """Load settings from a TOML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config not found: {path}")
        with path.open("rb") as f:
            try:
                raw = tomllib.load(f)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"{path}: {exc}") from exc
        return cls.from_dict(raw, base_dir=path.parent)

    @classmethod
    def from_dict(cls, raw: dict[str, Any], base_dir: str | Path = ".") -> Settings:
        """Build settings from an already-parsed config dict."""
        base_dir = Path(base_dir)
        assets_cfg = _section(raw, "assets")
        parser_cfg = _section(raw, "parser")
        log_cfg = _section(raw, "logging")

        kwargs: dict[str, Any] = {}
        if "dir" in assets_cfg:
            kwargs["asset_dir"] = _resolve_path(assets_cfg["dir"], base_dir)
        if "separator" in parser_cfg:
            kwargs["separator"] = parser_cfg["separator"]
        if "on_malformed" in parser_cfg:
            kwargs["on_malformed"] = parser_cfg["on_malformed"]
        if "index_lemmas" in parser_cfg:
            kwargs["index_lemmas"] = parser_cfg["index_lemmas"]
        if "level" in log_cfg:
            kwargs["log_level"] = log_cfg["level"]
        if "file" in log_cfg:
            kwargs["log_file"] = _resolve_path(log_cfg["file"], base_dir)
        if "max_bytes" in log_cfg:
            kwargs["log_file_max_bytes"] = log_cfg["max_bytes"]
        if "backup_count" in log_cfg:
            kwargs["log_file_backup_count"] = log_cfg["backup_count"]
        return cls(**kwargs)


def find_config(start: str | Path = ".") -> Path | None:
    """Look for lemmata.toml in `start`."""
    candidate = Path(start) / CONFIG_FILENAME
    if candidate.exists():
        return candidate
    return None


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    section = raw.get(name, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{name}] must be a table")
    return section


def _resolve_path(value: Any, base_dir: Path) -> Path:
    if not isinstance(value, str) or not value:
        raise ConfigError(f"expected a path string, got {value!r}")
    p = Path(value)
    return p if p.is_absolute() else base_dir / p
