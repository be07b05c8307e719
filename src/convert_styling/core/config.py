"""Scan configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from convert_styling.model import MigrationMode
from convert_styling.rules import (
    DEFAULT_EXCLUDE_DIR_NAMES,
    DEFAULT_INCLUDE_EXTENSIONS,
    DEFAULT_MAX_FILES,
)


@dataclass(frozen=True, slots=True)
class VirtualFile:
    """Caller-supplied file. ``path`` is a label and need not exist on disk."""

    path: str
    content: str


@dataclass(frozen=True, slots=True)
class DiskRequest:
    """Traverse a real directory tree. ``root`` is unresolved as supplied."""

    root: str


@dataclass(frozen=True, slots=True)
class VirtualRequest:
    """Operate on an in-memory file set; the filesystem is never touched."""

    files: tuple[VirtualFile, ...]
    base_path: str = "(chat)"


Request = Union[DiskRequest, VirtualRequest]


@dataclass(frozen=True)
class ScanConfig:
    """Immutable, validated configuration for one invocation."""

    request: Request
    apply: bool = False
    max_files: int = DEFAULT_MAX_FILES
    include_extensions: frozenset[str] = field(
        default_factory=lambda: DEFAULT_INCLUDE_EXTENSIONS
    )
    exclude_dir_names: frozenset[str] = field(
        default_factory=lambda: DEFAULT_EXCLUDE_DIR_NAMES
    )
    mode: MigrationMode = MigrationMode.UNIWIND_MIGRATION

    @property
    def is_virtual(self) -> bool:
        return isinstance(self.request, VirtualRequest)
