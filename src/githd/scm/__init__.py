"""Source control projection — resources, icons, host container, model."""

from githd.scm.icons import IconSet, Theme
from githd.scm.model import Model
from githd.scm.resource import Command, Resource, ResourceDecorations
from githd.scm.source_control import (
    MemoryResourceGroup,
    MemorySourceControl,
    MemorySourceControlHost,
)

__all__ = [
    "Command",
    "IconSet",
    "MemoryResourceGroup",
    "MemorySourceControl",
    "MemorySourceControlHost",
    "Model",
    "Resource",
    "ResourceDecorations",
    "Theme",
]
