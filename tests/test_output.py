"""Tests for the JSON and terminal renderers."""

import json
from pathlib import Path

from rich.console import Console

from githd.git.log_parser import parse_log
from githd.output import json_report, terminal
from githd.scm.icons import DEFAULT_ICONS_ROOT, Theme
from githd.scm.resource import Resource

ROOT = Path("/work/project")


def _resources():
    lines = ["M\tsrc/foo.py", "D\tsrc/old.py", "R100\told/name.py\tnew/name.py"]
    return [Resource.from_status_line(line, ROOT) for line in lines]


class TestJsonReport:
    def test_log(self, sample_log_output):
        data = json.loads(json_report.render_log(parse_log(sample_log_output), skip=20))
        assert data["skip"] == 20
        assert data["count"] == 3
        first = data["commits"][0]
        assert first["hash"] == "c3c3c3c"
        assert first["refs"] == ["HEAD -> main", "origin/main"]
        assert first["email"] == "ada@example.com"

    def test_resources(self):
        data = json.loads(json_report.render_resources("9f8e7d6", _resources()))
        assert data["sha"] == "9f8e7d6"
        modified, deleted, renamed = data["files"]
        assert modified == {
            "path": "src/foo.py",
            "status": "modified",
            "status_code": "M",
            "uri": "file:///work/project/src/foo.py",
            "strike_through": False,
            "faded": False,
            "icon": str(DEFAULT_ICONS_ROOT / "dark" / "status-modified.svg"),
        }
        assert deleted["strike_through"] is True and deleted["faded"] is True
        assert renamed["old_path"] == "old/name.py"
        assert renamed["status_code"] == "R100"

    def test_icon_follows_theme(self):
        data = json.loads(json_report.render_resources("abc", _resources(), theme=Theme.LIGHT))
        icons = [Path(f["icon"]) for f in data["files"]]
        assert [p.parent.name for p in icons] == ["light", "light", "light"]
        assert [p.name for p in icons] == [
            "status-modified.svg", "status-deleted.svg", "status-renamed.svg",
        ]

    def test_empty(self):
        assert json.loads(json_report.render_resources(None, [])) == {"sha": None, "files": []}


class TestTerminal:
    def _console(self) -> Console:
        return Console(record=True, width=120, color_system=None)

    def test_log_table(self, sample_log_output):
        console = self._console()
        terminal.render_log(parse_log(sample_log_output), branch="main", console=console)
        text = console.export_text()
        assert "History of main" in text
        assert "c3c3c3c" in text
        assert "Remove README" in text
        assert "tag: v0.1" in text

    def test_no_commits(self):
        console = self._console()
        terminal.render_log([], console=console)
        assert "No commits" in console.export_text()

    def test_resources_table(self):
        console = self._console()
        terminal.render_resources("9f8e7d6", _resources(), console=console)
        text = console.export_text()
        assert "9f8e7d6" in text
        assert "src/foo.py" in text
        assert "old/name.py → new/name.py" in text
        assert "3 file(s)" in text

    def test_no_resources(self):
        console = self._console()
        terminal.render_resources("abc", [], console=console)
        assert "changed no files" in console.export_text()
