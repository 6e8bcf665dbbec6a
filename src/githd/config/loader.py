"""Load and merge configuration from .githd.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from githd.config.schema import (
    GitConfig,
    GitHdConfig,
    IconsConfig,
    LogConfig,
    OutputConfig,
)

CONFIG_FILENAME = ".githd.toml"


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: GitHdConfig) -> None:
    if not isinstance(cfg.git.executable, str) or not cfg.git.executable:
        raise ConfigError("git.executable must be a non-empty string")
    if cfg.git.timeout is not None:
        if not isinstance(cfg.git.timeout, (int, float)) or cfg.git.timeout < 0:
            raise ConfigError("git.timeout must be a non-negative number")
        # 0 in the file means "no timeout"
        if cfg.git.timeout == 0:
            cfg.git.timeout = None
    if not isinstance(cfg.log.page_size, int) or cfg.log.page_size <= 0:
        raise ConfigError("log.page_size must be a positive integer")
    if cfg.icons.theme not in ("light", "dark"):
        raise ConfigError(f"Unknown icon theme: {cfg.icons.theme}")
    if not cfg.icons.root:
        cfg.icons.root = None
    if cfg.output.format not in ("terminal", "json"):
        raise ConfigError(f"Unknown output format: {cfg.output.format}")


def _merge_env_overrides(cfg: GitHdConfig) -> None:
    """Apply GITHD_* environment variable overrides."""
    if val := os.environ.get("GITHD_GIT"):
        cfg.git.executable = val
    if val := os.environ.get("GITHD_TIMEOUT"):
        try:
            seconds = float(val)
        except ValueError:
            pass
        else:
            if seconds >= 0:
                cfg.git.timeout = seconds or None
    if val := os.environ.get("GITHD_PAGE_SIZE"):
        try:
            size = int(val)
        except ValueError:
            pass
        else:
            if size > 0:
                cfg.log.page_size = size
    if val := os.environ.get("GITHD_THEME"):
        if val in ("light", "dark"):
            cfg.icons.theme = val  # type: ignore[assignment]
    if val := os.environ.get("GITHD_FORMAT"):
        if val in ("terminal", "json"):
            cfg.output.format = val  # type: ignore[assignment]


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> GitHdConfig:
    """Load, validate, and return a GitHdConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = GitHdConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = GitHdConfig(
            version=raw.get("version", "1.0"),
            git=_build_section(raw, GitConfig, "git"),
            log=_build_section(raw, LogConfig, "log"),
            icons=_build_section(raw, IconsConfig, "icons"),
            output=_build_section(raw, OutputConfig, "output"),
        )
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
