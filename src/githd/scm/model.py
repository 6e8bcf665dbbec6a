"""Selection model — the commit being inspected and its changed files."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, List, Optional

from githd.config.schema import GitConfig
from githd.git import adapter
from githd.git.log_parser import parse_log
from githd.git.models import LogEntry, ParseError
from githd.git.status_parser import split_show_output
from githd.scm.icons import IconSet
from githd.scm.resource import Command, Resource
from githd.scm.source_control import ResourceGroup, SourceControl, SourceControlHost

logger = logging.getLogger(__name__)

SOURCE_CONTROL_ID = "githd"
SOURCE_CONTROL_LABEL = "GitHistoryDiff"
RESOURCE_GROUP_ID = "committed"
RESOURCE_GROUP_LABEL = "Committed Files"
UPDATE_SHA_COMMAND = Command(command="githd.updateSha", title="Input the SHA1 code")

_COUNT_RE = re.compile(r"^\d+$")


class Model:
    """Session object owned by the host.

    Registers one source control with a ``Committed Files`` group on the
    host and publishes the files of the selected commit into it. Call
    :meth:`dispose` (or use the model as a context manager) to release
    the host handles.

    Every query spawns at most one git process and blocks until it exits.
    Callers must not run overlapping queries against the same repository.
    """

    def __init__(
        self,
        repo_root: Path,
        host: SourceControlHost,
        *,
        settings: Optional[GitConfig] = None,
        icons: Optional[IconSet] = None,
    ) -> None:
        self._repo_root = Path(repo_root)
        self._settings = settings or GitConfig()
        self._icons = icons or IconSet()
        self._sha: Optional[str] = None
        self._disposed = False

        self._source_control: SourceControl = host.create_source_control(
            SOURCE_CONTROL_ID, SOURCE_CONTROL_LABEL
        )
        self._source_control.accept_input_command = UPDATE_SHA_COMMAND
        self._resource_group: ResourceGroup = self._source_control.create_resource_group(
            RESOURCE_GROUP_ID, RESOURCE_GROUP_LABEL
        )
        self._disposables: List[Any] = [self._source_control, self._resource_group]

    def __enter__(self) -> "Model":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.dispose()

    @property
    def repo_root(self) -> Path:
        return self._repo_root

    @property
    def sha(self) -> Optional[str]:
        """Resolved hash of the selected commit, or None."""
        return self._sha

    @property
    def resources(self) -> List[Resource]:
        return list(self._resource_group.resource_states)

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        for disposable in self._disposables:
            disposable.dispose()
        self._disposables.clear()

    def _check_alive(self) -> None:
        if self._disposed:
            raise RuntimeError("Model has been disposed")

    def set_selected_commit(self, commit: Optional[str]) -> None:
        """Select *commit* and publish its changed files.

        An empty value clears the selection without running git. Values
        starting with ``-`` are rejected so they never reach git as options.
        """
        self._check_alive()
        if not commit:
            logger.info("clearing selection")
            self._sha = None
            self._resource_group.resource_states = []
            return
        if commit.startswith("-"):
            raise ValueError(f"Not a commit: {commit!r}")
        self._resource_group.resource_states = self._update_resources(commit)

    def list_commits(self, skip: int, count: int) -> List[LogEntry]:
        """Return up to *count* commits after skipping *skip*, newest first."""
        self._check_alive()
        if skip < 0 or count < 0:
            raise ValueError(f"skip and count must be non-negative (got {skip}, {count})")
        output = adapter.get_log(self._repo_root, skip, count, settings=self._settings)
        return parse_log(output)

    def current_branch_name(self) -> str:
        self._check_alive()
        return adapter.get_current_branch(self._repo_root, settings=self._settings).strip()

    def total_commit_count(self) -> int:
        self._check_alive()
        output = adapter.get_commit_count(self._repo_root, settings=self._settings).strip()
        if not _COUNT_RE.match(output):
            raise ParseError(f"Cannot parse commit count: {output!r}")
        return int(output)

    def _update_resources(self, commit: str) -> List[Resource]:
        output = adapter.get_commit_name_status(
            self._repo_root, commit, settings=self._settings
        )
        sha, lines = split_show_output(output)

        resources: List[Resource] = []
        for line in lines:
            resource = Resource.from_status_line(line, self._repo_root, self._icons)
            if resource is not None:
                resources.append(resource)

        # sha and the published list change together, or not at all
        self._sha = sha
        logger.info("selected commit %s (%s)", sha, commit)
        logger.debug("commit %s touched %d files", sha, len(resources))
        return resources
