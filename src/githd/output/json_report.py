"""JSON renderer for scripting."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

from githd.git.models import LogEntry
from githd.scm.icons import Theme
from githd.scm.resource import Resource


def log_to_dict(entries: Sequence[LogEntry], *, skip: int = 0) -> Dict[str, Any]:
    """Convert a page of LogEntry objects to a JSON-serialisable dict."""
    commits: List[Dict[str, Any]] = []
    for e in entries:
        commits.append({
            "hash": e.hash,
            "subject": e.subject,
            "ref": e.ref,
            "refs": e.refs,
            "author": e.author,
            "email": e.email,
            "date": e.date,
        })
    return {"skip": skip, "count": len(commits), "commits": commits}


def resources_to_dict(
    sha: Optional[str],
    resources: Sequence[Resource],
    *,
    theme: Theme = Theme.DARK,
) -> Dict[str, Any]:
    """Convert the published resources of a commit to a dict."""
    files: List[Dict[str, Any]] = []
    for r in resources:
        decorations = r.decorations
        files.append({
            "path": r.file,
            "status": r.status.name.lower(),
            "status_code": r.change.status_code,
            "uri": r.resource_uri.as_uri(),
            **({"old_path": r.change.old_path} if r.change.old_path else {}),
            "strike_through": decorations.strike_through,
            "faded": decorations.faded,
            "icon": str(r.icon_path(theme)),
        })
    return {"sha": sha, "files": files}


def render_log(entries: Sequence[LogEntry], *, skip: int = 0) -> str:
    return json.dumps(log_to_dict(entries, skip=skip), indent=2)


def render_resources(
    sha: Optional[str],
    resources: Sequence[Resource],
    *,
    theme: Theme = Theme.DARK,
) -> str:
    return json.dumps(resources_to_dict(sha, resources, theme=theme), indent=2)
