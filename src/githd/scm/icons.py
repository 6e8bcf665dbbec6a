"""Status icons — ``<root>/<theme>/status-<name>.svg``."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Union

from githd.git.models import FileStatus

DEFAULT_ICONS_ROOT = Path(__file__).resolve().parent.parent / "resources" / "icons"

_ICON_NAMES: Dict[FileStatus, str] = {
    FileStatus.MODIFIED: "status-modified",
    FileStatus.ADDED: "status-added",
    FileStatus.DELETED: "status-deleted",
    FileStatus.RENAMED: "status-renamed",
    FileStatus.COPIED: "status-copied",
}


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


def icon_name(status: FileStatus) -> str:
    return _ICON_NAMES[status]


class IconSet:
    """Resolve status icons under a single root directory."""

    def __init__(self, root: Optional[Union[str, Path]] = None) -> None:
        self.root = Path(root) if root else DEFAULT_ICONS_ROOT

    def path_for(self, status: FileStatus, theme: Theme) -> Path:
        return self.root / Theme(theme).value / f"{icon_name(status)}.svg"
