"""Data models for parsed git output."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class ParseError(ValueError):
    """Raised when git output cannot be parsed."""


class StatusParseError(ParseError):
    """Raised on a --name-status line with an unknown status code."""


class LogParseError(ParseError):
    """Raised on a log record that does not carry the expected fields."""


class FileStatus(str, Enum):
    MODIFIED = "M"
    ADDED = "A"
    DELETED = "D"
    RENAMED = "R"
    COPIED = "C"

    @classmethod
    def from_code(cls, code: str) -> "FileStatus":
        """Classify a raw status token (``M``, ``R100``, ``c75``...)."""
        if not code:
            raise StatusParseError("Empty status code")
        try:
            return cls(code[0].upper())
        except ValueError:
            raise StatusParseError(f"Unknown status code: {code!r}") from None


@dataclass(frozen=True)
class FileChange:
    """One file listed by ``git show --name-status``."""

    path: str
    status: FileStatus
    status_code: str
    old_path: Optional[str] = None  # set on renames and copies


@dataclass(frozen=True)
class LogEntry:
    """Summary of a single commit."""

    subject: str
    hash: str
    ref: str
    author: str
    email: str
    date: str

    @property
    def refs(self) -> List[str]:
        """Ref names from the ``%d`` decoration, e.g. ``["HEAD -> main"]``."""
        text = self.ref.strip()
        if text.startswith("(") and text.endswith(")"):
            text = text[1:-1]
        return [name.strip() for name in text.split(",") if name.strip()]
