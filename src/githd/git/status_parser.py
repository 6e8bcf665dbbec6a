"""Parser for ``git show --name-status`` output."""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from githd.git.models import FileChange, FileStatus

_LINE_SPLIT_RE = re.compile(r"\r?\n")


def parse_status_line(line: str) -> Optional[FileChange]:
    """Parse one tab-delimited status line.

    Returns ``None`` when the line has fewer than two fields. Raises
    :class:`~githd.git.models.StatusParseError` on an unknown status code.

    Accepted shapes::

        M       path
        A       path
        D       path
        R100    old_path    new_path
        C75     old_path    new_path
    """
    fields = line.split("\t")
    if len(fields) < 2:
        return None

    status = FileStatus.from_code(fields[0])
    if status in (FileStatus.RENAMED, FileStatus.COPIED):
        return FileChange(
            path=fields[-1],
            status=status,
            status_code=fields[0],
            old_path=fields[1] if len(fields) > 2 else None,
        )
    return FileChange(path=fields[1], status=status, status_code=fields[0])


def split_show_output(text: str) -> Tuple[str, List[str]]:
    """Split ``show --format=%h --name-status`` output.

    Returns the resolved hash from the first line and the non-empty status
    lines from the third line onward.
    """
    lines = _LINE_SPLIT_RE.split(text)
    sha = lines[0]
    return sha, [line for line in lines[2:] if line]
