"""Shared test fixtures — sample git output, fake git runner, temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path
from typing import Dict, List, Tuple

import pytest

from githd.git.adapter import _subcommand
from githd.git.log_parser import ENTRY_SEPARATOR, ITEM_SEPARATOR


def make_log_record(subject, hash_, ref, author, email, date) -> str:
    """Render one commit the way ``git log --format=<LOG_FORMAT>`` does."""
    fields = (subject, hash_, ref, author, email, date)
    return "".join(ITEM_SEPARATOR + f for f in fields) + ENTRY_SEPARATOR + "\n"


@pytest.fixture
def sample_log_output() -> str:
    """Three commits, newest first."""
    return (
        make_log_record("Remove README", "c3c3c3c", " (HEAD -> main, origin/main)",
                        "Ada Lovelace", "ada@example.com", "2 hours ago")
        + make_log_record("Rename app", "b2b2b2b", "", "Alan Turing",
                          "alan@example.com", "3 days ago")
        + make_log_record("Initial commit", "a1a1a1a", " (tag: v0.1)",
                          "Ada Lovelace", "ada@example.com", "2 weeks ago")
    )


@pytest.fixture
def sample_show_output() -> str:
    """``git show --format=%h --name-status`` for a commit touching four files."""
    return textwrap.dedent("""\
        9f8e7d6

        M\tsrc/foo.py
        A\tdocs/new.md
        D\tsrc/old.py
        R100\told/name.py\tnew/name.py
    """)


class FakeGit:
    """Stands in for ``_run_git``; answers by git subcommand."""

    def __init__(self) -> None:
        self.outputs: Dict[str, str] = {}
        self.errors: Dict[str, Exception] = {}
        self.calls: List[Tuple[str, ...]] = []

    def __call__(self, args, cwd, settings=None) -> str:
        self.calls.append(tuple(args))
        sub = _subcommand(args)
        if sub in self.errors:
            raise self.errors[sub]
        return self.outputs.get(sub, "")


@pytest.fixture
def fake_git(monkeypatch) -> FakeGit:
    fake = FakeGit()
    monkeypatch.setattr("githd.git.adapter._run_git", fake)
    return fake


def _git(repo: Path, *args: str) -> None:
    subprocess.run(["git", *args], cwd=repo, capture_output=True, check=True)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Temporary repository with five commits on ``main``.

    1. init          A README.md
    2. add app       A src/app.py
    3. change app    M src/app.py
    4. rename app    R src/app.py -> src/main.py
    5. remove readme D README.md
    """
    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init")
    _git(repo, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(repo, "config", "user.email", "test@test.com")
    _git(repo, "config", "user.name", "Test")
    _git(repo, "config", "commit.gpgsign", "false")

    (repo / "README.md").write_text("# Test\n")
    _git(repo, "add", ".")
    _git(repo, "commit", "-m", "init")

    (repo / "src").mkdir()
    app = repo / "src" / "app.py"
    app.write_text("def main():\n    return 1\n")
    _git(repo, "add", ".")
    _git(repo, "commit", "-m", "add app")

    app.write_text("def main():\n    return 2\n")
    _git(repo, "commit", "-am", "change app")

    _git(repo, "mv", "src/app.py", "src/main.py")
    _git(repo, "commit", "-m", "rename app")

    _git(repo, "rm", "README.md")
    _git(repo, "commit", "-m", "remove readme")
    return repo
