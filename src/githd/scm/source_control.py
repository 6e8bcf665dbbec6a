"""Host-side source control container.

The editor (or any other host) owns the source control view. githd only
needs the small surface described by the protocols below; the ``Memory*``
classes implement it in-process for the CLI and the tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from githd.scm.resource import Command, Resource


class ResourceGroup(Protocol):
    id: str
    label: str

    @property
    def resource_states(self) -> Sequence["Resource"]: ...

    @resource_states.setter
    def resource_states(self, value: Sequence["Resource"]) -> None: ...

    def dispose(self) -> None: ...


class SourceControl(Protocol):
    id: str
    label: str
    accept_input_command: Optional["Command"]

    def create_resource_group(self, id: str, label: str) -> ResourceGroup: ...

    def dispose(self) -> None: ...


class SourceControlHost(Protocol):
    def create_source_control(self, id: str, label: str) -> SourceControl: ...


class MemoryResourceGroup:
    """A resource group that just holds the published list."""

    def __init__(self, id: str, label: str) -> None:
        self.id = id
        self.label = label
        self.disposed = False
        self._resource_states: List["Resource"] = []

    @property
    def resource_states(self) -> List["Resource"]:
        return self._resource_states

    @resource_states.setter
    def resource_states(self, value: Sequence["Resource"]) -> None:
        if self.disposed:
            raise RuntimeError(f"Resource group {self.id!r} is disposed")
        self._resource_states = list(value)

    def dispose(self) -> None:
        self.disposed = True
        self._resource_states = []


class MemorySourceControl:
    def __init__(self, id: str, label: str) -> None:
        self.id = id
        self.label = label
        self.accept_input_command: Optional["Command"] = None
        self.groups: Dict[str, MemoryResourceGroup] = {}
        self.disposed = False

    def create_resource_group(self, id: str, label: str) -> MemoryResourceGroup:
        if self.disposed:
            raise RuntimeError(f"Source control {self.id!r} is disposed")
        group = MemoryResourceGroup(id, label)
        self.groups[id] = group
        return group

    def dispose(self) -> None:
        self.disposed = True


class MemorySourceControlHost:
    """Creates and remembers in-memory source controls."""

    def __init__(self) -> None:
        self.source_controls: List[MemorySourceControl] = []

    def create_source_control(self, id: str, label: str) -> MemorySourceControl:
        sc = MemorySourceControl(id, label)
        self.source_controls.append(sc)
        return sc
