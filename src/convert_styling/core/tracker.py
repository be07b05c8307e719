"""Change tracker — fingerprints edits and materializes them.

Two workspaces decide what "materialize" means:

``DiskWorkspace``
    ``apply=True`` writes/deletes under the resolved root.  ``apply=False``
    records planned updates (with fingerprints) and touches nothing.
``VirtualWorkspace``
    Never touches the filesystem.  Every computable edit becomes a
    ``Change`` carrying ``new_content`` so the caller can apply the patch.

Write and delete failures are caught per file, logged and recorded as
``WriteFailure`` entries; the scan carries on with the remaining files.
Nothing is rolled back: an apply run that fails half-way leaves the
already-written files migrated.
"""

from __future__ import annotations

import hashlib
import logging
from pathlib import Path
from typing import Optional, Protocol

from convert_styling.model import ChangeAction
from convert_styling.model.change import Change, WriteFailure

_logger = logging.getLogger(__name__)


def fingerprint(text: str) -> str:
    """SHA-1 of the UTF-8 text. Used for auditing only, never for security."""
    return hashlib.sha1(text.encode("utf-8")).hexdigest()


def is_within(root: Path, target: Path) -> bool:
    """True when *target* resolves strictly inside *root*."""
    resolved = target.resolve()
    return resolved != root and resolved.is_relative_to(root)


class Workspace(Protocol):
    """Where edits land. ``materializes_deletes`` gates delete Changes."""

    virtual: bool
    apply: bool

    def materializes_deletes(self) -> bool: ...

    def write(self, rel_path: str, content: str) -> None: ...

    def delete(self, rel_path: str) -> None: ...


class DiskWorkspace:
    virtual = False

    def __init__(self, root: Path, *, apply: bool) -> None:
        self.root = root.resolve()
        self.apply = apply

    def materializes_deletes(self) -> bool:
        return self.apply

    def _target(self, rel_path: str) -> Path:
        target = self.root / rel_path
        if not is_within(self.root, target):
            raise PermissionError(f"refusing to modify path outside root: {rel_path}")
        return target

    def write(self, rel_path: str, content: str) -> None:
        if not self.apply:
            return
        # newline="" keeps the file's own line endings
        self._target(rel_path).write_text(content, encoding="utf-8", newline="")

    def delete(self, rel_path: str) -> None:
        if not self.apply:
            return
        self._target(rel_path).unlink()


class VirtualWorkspace:
    virtual = True

    def __init__(self, *, apply: bool) -> None:
        self.apply = apply

    def materializes_deletes(self) -> bool:
        return True

    def write(self, rel_path: str, content: str) -> None:
        return None

    def delete(self, rel_path: str) -> None:
        return None


class ChangeTracker:
    """Accumulates ``Change`` and ``WriteFailure`` records for one run."""

    def __init__(self, workspace: Workspace) -> None:
        self.workspace = workspace
        self.changes: list[Change] = []
        self.failures: list[WriteFailure] = []

    @property
    def virtual(self) -> bool:
        return self.workspace.virtual

    @property
    def apply(self) -> bool:
        return self.workspace.apply

    def update(self, rel_path: str, before: str, after: str, reason: str) -> Optional[Change]:
        """Record (and on disk with ``apply``, write) an updated file body."""
        if before == after:
            return None
        try:
            self.workspace.write(rel_path, after)
        except OSError as exc:
            self._fail(rel_path, ChangeAction.UPDATE, exc)
            return None
        change = Change(
            file=rel_path,
            action=ChangeAction.UPDATE,
            reason=reason,
            before_hash=fingerprint(before),
            after_hash=fingerprint(after),
            new_content=after if self.virtual else None,
        )
        self.changes.append(change)
        return change

    def delete(self, rel_path: str, before: str, reason: str) -> Optional[Change]:
        """Record (and on disk with ``apply``, perform) a file deletion."""
        if not self.workspace.materializes_deletes():
            return None
        try:
            self.workspace.delete(rel_path)
        except OSError as exc:
            self._fail(rel_path, ChangeAction.DELETE, exc)
            return None
        change = Change(
            file=rel_path,
            action=ChangeAction.DELETE,
            reason=reason,
            before_hash=fingerprint(before),
        )
        self.changes.append(change)
        return change

    def _fail(self, rel_path: str, action: ChangeAction, exc: OSError) -> None:
        _logger.error("%s of '%s' failed: %s", action.value, rel_path, exc)
        self.failures.append(WriteFailure(file=rel_path, action=action, error=str(exc)))
