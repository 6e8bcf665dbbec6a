"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional

Theme = Literal["light", "dark"]
OutputFormat = Literal["terminal", "json"]


@dataclass
class GitConfig:
    executable: str = "git"
    timeout: Optional[float] = None  # seconds; None waits forever


@dataclass
class LogConfig:
    page_size: int = 50


@dataclass
class IconsConfig:
    theme: Theme = "dark"
    root: Optional[str] = None  # None = packaged icons


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"


@dataclass
class GitHdConfig:
    version: str = "1.0"
    git: GitConfig = field(default_factory=GitConfig)
    log: LogConfig = field(default_factory=LogConfig)
    icons: IconsConfig = field(default_factory=IconsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
