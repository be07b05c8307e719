"""MigrationResult — everything one invocation observed and did."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from convert_styling import __version__
from convert_styling.model import ChangeAction, FindingKind, MigrationMode
from convert_styling.model.change import Change, WriteFailure
from convert_styling.model.finding import Finding


@dataclass(slots=True)
class MigrationResult:
    """Assembled run output.

    Constructed by ``core.runner`` after the last file has been dispatched
    and the post-traversal reduction has run.
    """

    # ── run metadata ────────────────────────────────────────────────
    mode: MigrationMode = MigrationMode.UNIWIND_MIGRATION
    project_root: str = ""
    apply: bool = False
    virtual: bool = False
    guide_sha1: str = ""
    tool_version: str = __version__

    # ── accumulators ────────────────────────────────────────────────
    files_enumerated: int = 0
    findings: list[Finding] = field(default_factory=list)
    changes: list[Change] = field(default_factory=list)
    write_failures: list[WriteFailure] = field(default_factory=list)

    # ── derived ─────────────────────────────────────────────────────

    def findings_by_kind(self) -> dict[str, int]:
        """Histogram over every known kind, zero-filled."""
        counts = {kind.value: 0 for kind in FindingKind}
        for f in self.findings:
            counts[f.kind.value] += 1
        return counts

    def summary(self) -> dict[str, Any]:
        return {
            "mode": self.mode.value,
            "project_root": self.project_root,
            "apply": self.apply,
            "files_enumerated": self.files_enumerated,
            "guide_sha1": self.guide_sha1,
            "findings": len(self.findings),
            "changes": len(self.changes),
            "write_failures": len(self.write_failures),
            "findings_by_kind": self.findings_by_kind(),
        }

    def edit_bundle(self) -> dict[str, Any]:
        """Patch payload for virtual mode: full updates plus deletions."""
        return {
            "note": "In-memory mode: no filesystem writes. Apply these edits in your repo.",
            "edits": [
                {"path": c.file, "content": c.new_content}
                for c in self.changes
                if c.action is ChangeAction.UPDATE and c.new_content is not None
            ],
            "deletes": [
                {"path": c.file} for c in self.changes if c.action is ChangeAction.DELETE
            ],
        }

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "schema_version": "migration_result_v1",
            "tool_version": self.tool_version,
            "virtual": self.virtual,
            "summary": self.summary(),
            "findings": [f.to_dict() for f in self.findings],
            "changes": [c.to_dict() for c in self.changes],
            "write_failures": [w.to_dict() for w in self.write_failures],
        }
        if self.virtual:
            d["edit_bundle"] = self.edit_bundle()
        return d
