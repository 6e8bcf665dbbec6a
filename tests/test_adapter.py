"""Tests for the git subprocess wrapper against a real repository."""

from pathlib import Path

import pytest

from githd.config.schema import GitConfig
from githd.git import adapter
from githd.git.adapter import GitError
from githd.git.log_parser import parse_log


class TestRunGit:
    def test_returns_stdout(self, tmp_git_repo: Path):
        out = adapter._run_git(["rev-parse", "--abbrev-ref", "HEAD"], cwd=tmp_git_repo)
        assert out == "main\n"

    def test_missing_executable(self, tmp_git_repo: Path):
        settings = GitConfig(executable="definitely-not-git-xyz")
        with pytest.raises(GitError, match="not installed"):
            adapter._run_git(["status"], cwd=tmp_git_repo, settings=settings)

    def test_nonzero_exit_raises(self, tmp_git_repo: Path):
        with pytest.raises(GitError, match="show"):
            adapter._run_git(["show", "no-such-revision"], cwd=tmp_git_repo)

    def test_outside_repository(self, tmp_path: Path):
        with pytest.raises(GitError):
            adapter.get_repo_root(tmp_path)


class TestQueries:
    def test_repo_root(self, tmp_git_repo: Path):
        assert adapter.get_repo_root(tmp_git_repo / "src").resolve() == tmp_git_repo.resolve()

    def test_log_window(self, tmp_git_repo: Path):
        entries = parse_log(adapter.get_log(tmp_git_repo, 1, 2))
        assert [e.subject for e in entries] == ["rename app", "change app"]

    def test_log_past_end(self, tmp_git_repo: Path):
        assert parse_log(adapter.get_log(tmp_git_repo, 10, 5)) == []

    def test_current_branch(self, tmp_git_repo: Path):
        assert adapter.get_current_branch(tmp_git_repo).strip() == "main"

    def test_commit_count(self, tmp_git_repo: Path):
        assert adapter.get_commit_count(tmp_git_repo) == "5\n"

    def test_name_status(self, tmp_git_repo: Path):
        out = adapter.get_commit_name_status(tmp_git_repo, "HEAD")
        lines = out.splitlines()
        assert len(lines[0]) >= 4
        assert lines[1] == ""
        assert lines[2] == "D\tREADME.md"

    def test_name_status_rejects_option_like_commit(self, tmp_git_repo: Path, tmp_path: Path):
        target = tmp_path / "out.txt"
        with pytest.raises(ValueError):
            adapter.get_commit_name_status(tmp_git_repo, f"--output={target}")
        assert not target.exists()
