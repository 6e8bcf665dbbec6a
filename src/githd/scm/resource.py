"""Source-control resource states for the files changed by a commit."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Tuple

from githd.git.models import FileChange, FileStatus
from githd.git.status_parser import parse_status_line
from githd.scm.icons import IconSet, Theme

OPEN_RESOURCE_COMMAND = "githd.openResource"


@dataclass(frozen=True)
class Command:
    """A host command binding. The host executes it, never githd."""

    command: str
    title: str
    arguments: Tuple[Any, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class ResourceDecorations:
    strike_through: bool
    faded: bool
    light: Path
    dark: Path


class Resource:
    """One changed file of the selected commit."""

    def __init__(
        self,
        change: FileChange,
        repo_root: Path,
        icons: Optional[IconSet] = None,
    ) -> None:
        self._change = change
        self._resource_uri = Path(repo_root).absolute() / change.path
        self._icons = icons or IconSet()

    @classmethod
    def from_status_line(
        cls,
        line: str,
        repo_root: Path,
        icons: Optional[IconSet] = None,
    ) -> Optional["Resource"]:
        """Build a Resource from a ``--name-status`` line, or None if unparsable."""
        change = parse_status_line(line)
        if change is None:
            return None
        return cls(change, repo_root, icons)

    @property
    def change(self) -> FileChange:
        return self._change

    @property
    def file(self) -> str:
        return self._change.path

    @property
    def status(self) -> FileStatus:
        return self._change.status

    @property
    def resource_uri(self) -> Path:
        return self._resource_uri

    @property
    def command(self) -> Command:
        return Command(command=OPEN_RESOURCE_COMMAND, title="Open", arguments=(self,))

    @property
    def decorations(self) -> ResourceDecorations:
        deleted = self.status is FileStatus.DELETED
        return ResourceDecorations(
            strike_through=deleted,
            faded=deleted,
            light=self.icon_path(Theme.LIGHT),
            dark=self.icon_path(Theme.DARK),
        )

    def icon_path(self, theme: Theme) -> Path:
        return self._icons.path_for(self.status, theme)

    def __repr__(self) -> str:
        return f"Resource({self._change.status_code}, {self.file!r})"
