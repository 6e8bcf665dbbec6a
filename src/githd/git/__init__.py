"""Git interface layer — adapter, output parsers, models."""

from githd.git.adapter import (
    GitError,
    get_commit_count,
    get_commit_name_status,
    get_current_branch,
    get_log,
    get_repo_root,
)
from githd.git.log_parser import LogParser, parse_log
from githd.git.models import (
    FileChange,
    FileStatus,
    LogEntry,
    LogParseError,
    ParseError,
    StatusParseError,
)
from githd.git.status_parser import parse_status_line, split_show_output

__all__ = [
    "FileChange",
    "FileStatus",
    "GitError",
    "LogEntry",
    "LogParseError",
    "LogParser",
    "ParseError",
    "StatusParseError",
    "get_commit_count",
    "get_commit_name_status",
    "get_current_branch",
    "get_log",
    "get_repo_root",
    "parse_log",
    "parse_status_line",
    "split_show_output",
]
