"""Rich terminal renderer — commit history and committed files."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from githd.git.models import FileStatus, LogEntry
from githd.scm.resource import Resource

_STATUS_STYLE = {
    FileStatus.MODIFIED: "yellow",
    FileStatus.ADDED: "green",
    FileStatus.DELETED: "red",
    FileStatus.RENAMED: "cyan",
    FileStatus.COPIED: "cyan",
}


def _status_pill(resource: Resource) -> Text:
    style = _STATUS_STYLE[resource.status]
    return Text(f" {resource.change.status_code} ", style=f"bold {style}")


def _path_text(resource: Resource) -> Text:
    decorations = resource.decorations
    style = "strike dim" if decorations.strike_through else ""
    text = Text(resource.file, style=style)
    if resource.change.old_path:
        text = Text.assemble((resource.change.old_path, "dim"), " → ", text)
    return text


def render_log(
    entries: Sequence[LogEntry],
    *,
    branch: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """Print one page of history as a table."""
    console = console or Console()
    if not entries:
        console.print("[dim]No commits.[/dim]")
        return

    title = f"History of {branch}" if branch else "History"
    table = Table(title=title, title_style="bold", border_style="dim")
    table.add_column("Hash", style="yellow", no_wrap=True)
    table.add_column("Subject", min_width=20)
    table.add_column("Refs", style="cyan")
    table.add_column("Author", style="magenta")
    table.add_column("Date", style="green", no_wrap=True)

    for entry in entries:
        table.add_row(
            entry.hash,
            entry.subject,
            ", ".join(entry.refs),
            entry.author,
            entry.date,
        )
    console.print(table)


def render_resources(
    sha: Optional[str],
    resources: Sequence[Resource],
    *,
    console: Optional[Console] = None,
) -> None:
    """Print the files changed by the selected commit."""
    console = console or Console()
    if not resources:
        console.print(f"[dim]Commit {sha or '-'} changed no files.[/dim]")
        return

    table = Table(
        title=f"Committed Files ({sha})",
        title_style="bold",
        border_style="dim",
    )
    table.add_column("Status", justify="center", width=8)
    table.add_column("File")

    for resource in resources:
        table.add_row(_status_pill(resource), _path_text(resource))
    console.print(table)
    console.print(f"[dim]{len(resources)} file(s)[/dim]")
