"""Git subprocess wrapper — log, branch, commit count, commit file status."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional

from githd.config.schema import GitConfig
from githd.git.log_parser import LOG_FORMAT

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Raised when git is unavailable or returns an error."""


def _subcommand(args: list[str]) -> str:
    """Return the git subcommand, skipping leading ``-c key=value`` pairs."""
    idx = 0
    while idx < len(args) and args[idx] == "-c":
        idx += 2
    return args[idx] if idx < len(args) else ""


def _run_git(args: list[str], cwd: Path, settings: Optional[GitConfig] = None) -> str:
    """Run a git command and return its full stdout. Raises GitError on failure."""
    settings = settings or GitConfig()
    argv = [settings.executable, *args]
    logger.debug("running %s in %s", " ".join(argv), cwd)
    try:
        result = subprocess.run(
            argv,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=settings.timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError(f"{settings.executable} is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(
            f"git command timed out after {settings.timeout}s: git {' '.join(args)}"
        )
    except OSError as exc:
        raise GitError(f"Cannot run {settings.executable}: {exc}") from exc

    if result.returncode != 0:
        stderr = result.stderr.strip()
        raise GitError(
            f"git {_subcommand(args)} exited with status {result.returncode}"
            + (f": {stderr}" if stderr else "")
        )
    return result.stdout


def get_repo_root(cwd: Optional[Path] = None, settings: Optional[GitConfig] = None) -> Path:
    """Return the root of the current git repository."""
    cwd = cwd or Path.cwd()
    out = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd, settings=settings)
    return Path(out.strip())


def get_log(
    repo_root: Path, skip: int, count: int, settings: Optional[GitConfig] = None
) -> str:
    """Return one window of history rendered with the sentinel log format."""
    return _run_git(
        ["log", LOG_FORMAT, f"--skip={skip}", f"--max-count={count}"],
        cwd=repo_root,
        settings=settings,
    )


def get_current_branch(repo_root: Path, settings: Optional[GitConfig] = None) -> str:
    """Return the raw output of ``rev-parse --abbrev-ref HEAD``."""
    return _run_git(["rev-parse", "--abbrev-ref", "HEAD"], cwd=repo_root, settings=settings)


def get_commit_count(repo_root: Path, settings: Optional[GitConfig] = None) -> str:
    """Return the raw output of ``rev-list --count HEAD``."""
    return _run_git(["rev-list", "--count", "HEAD"], cwd=repo_root, settings=settings)


def get_commit_name_status(
    repo_root: Path, commit: str, settings: Optional[GitConfig] = None
) -> str:
    """Return the abbreviated hash and name-status listing of *commit*."""
    if commit.startswith("-"):
        raise ValueError(f"Not a commit: {commit!r}")
    return _run_git(
        ["-c", "core.quotePath=false", "show", "--format=%h", "--name-status", commit],
        cwd=repo_root,
        settings=settings,
    )
