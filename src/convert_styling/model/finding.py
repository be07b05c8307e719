"""Finding — a single observation about a file that needs attention."""

from __future__ import annotations

from dataclasses import dataclass

from . import FindingKind


@dataclass(frozen=True, slots=True)
class Finding:
    """Immutable detector output.

    Findings are purely observational; whether the underlying issue was
    auto-fixed is expressed by a matching ``Change``, never by the finding.
    """

    file: str
    kind: FindingKind
    message: str

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {
            "file": self.file,
            "kind": self.kind.value,
            "message": self.message,
        }

    def describe(self) -> str:
        """One-line human rendering used by the text report."""
        return f"- {self.kind.value}: {self.file} — {self.message}"
