"""githd CLI — Typer application with log, show, branch, count, and init commands."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from githd import __version__
from githd.config.loader import CONFIG_FILENAME, ConfigError, load_config
from githd.config.schema import GitHdConfig
from githd.git.adapter import GitError, get_repo_root
from githd.git.models import ParseError

app = typer.Typer(
    name="githd",
    help="Browse git history and the files each commit changed.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)
stdout = Console()


class _State:
    config_path: Optional[str] = None


state = _State()


def _setup_logging(verbose: bool, debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    handler = RichHandler(console=console, show_path=debug)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    pkg_logger = logging.getLogger("githd")
    pkg_logger.handlers[:] = [handler]
    pkg_logger.setLevel(level)
    pkg_logger.propagate = False


def _resolve_repo_root() -> Path:
    """Find the git repo root, exit 2 on failure."""
    try:
        return get_repo_root()
    except GitError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _load(repo_root: Path) -> GitHdConfig:
    try:
        return load_config(repo_root, state.config_path)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


def _output_format(cfg: GitHdConfig, format: Optional[str]) -> str:
    if format is None:
        return cfg.output.format
    if format not in ("terminal", "json"):
        console.print(f"[bold red]Invalid format:[/bold red] {format}")
        raise typer.Exit(code=2)
    return format


def _open_model(repo_root: Path, cfg: GitHdConfig):
    from githd.scm.icons import IconSet
    from githd.scm.model import Model
    from githd.scm.source_control import MemorySourceControlHost

    return Model(
        repo_root,
        MemorySourceControlHost(),
        settings=cfg.git,
        icons=IconSet(cfg.icons.root),
    )


@contextmanager
def _exit_on_error() -> Iterator[None]:
    """Turn git, parse, and bad-argument errors into exit code 2."""
    try:
        yield
    except GitError as exc:
        console.print(f"[bold red]Git error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    except ParseError as exc:
        console.print(f"[bold red]Parse error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc
    except ValueError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=2) from exc


# ── log ───────────────────────────────────────────────────────────────────────


@app.command()
def log(
    skip: int = typer.Option(0, "--skip", "-s", min=0, help="Number of commits to skip"),
    count: Optional[int] = typer.Option(None, "--count", "-n", min=1, help="Commits per page"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
) -> None:
    """Show one page of commit history, newest first."""
    from githd.output import json_report, terminal

    repo_root = _resolve_repo_root()
    cfg = _load(repo_root)
    fmt = _output_format(cfg, format)
    page_size = count or cfg.log.page_size

    with _exit_on_error(), _open_model(repo_root, cfg) as model:
        entries = model.list_commits(skip, page_size)
        branch = model.current_branch_name() if fmt == "terminal" else None

    if fmt == "json":
        print(json_report.render_log(entries, skip=skip))
    else:
        terminal.render_log(entries, branch=branch, console=stdout)


# ── show ──────────────────────────────────────────────────────────────────────


@app.command()
def show(
    commit: str = typer.Argument(..., help="Commit hash, ref, or any commit-ish"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json"),
) -> None:
    """List the files changed by COMMIT."""
    from githd.output import json_report, terminal
    from githd.scm.icons import Theme

    repo_root = _resolve_repo_root()
    cfg = _load(repo_root)
    fmt = _output_format(cfg, format)

    with _exit_on_error(), _open_model(repo_root, cfg) as model:
        model.set_selected_commit(commit)
        sha, resources = model.sha, model.resources

    if fmt == "json":
        print(json_report.render_resources(sha, resources, theme=Theme(cfg.icons.theme)))
    else:
        terminal.render_resources(sha, resources, console=stdout)


# ── branch / count ────────────────────────────────────────────────────────────


@app.command()
def branch() -> None:
    """Print the current branch name."""
    repo_root = _resolve_repo_root()
    cfg = _load(repo_root)
    with _exit_on_error(), _open_model(repo_root, cfg) as model:
        print(model.current_branch_name())


@app.command()
def count() -> None:
    """Print the number of commits reachable from HEAD."""
    repo_root = _resolve_repo_root()
    cfg = _load(repo_root)
    with _exit_on_error(), _open_model(repo_root, cfg) as model:
        print(model.total_commit_count())


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init() -> None:
    """Generate a starter .githd.toml in the repo root."""
    from githd.config.defaults import DEFAULT_TOML

    repo_root = _resolve_repo_root()
    config_path = repo_root / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"githd {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
    config: Optional[str] = typer.Option(None, "--config", "-c", help=f"Path to {CONFIG_FILENAME}"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output, including git command lines"),
) -> None:
    """githd — git history diff."""
    state.config_path = config
    _setup_logging(verbose, debug)
