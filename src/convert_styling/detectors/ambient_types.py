"""Ambient type declarations: delete the legacy file, require the replacement."""

from __future__ import annotations

from convert_styling.core.discover import SourceFile
from convert_styling.detectors import BaseDetector, ScanContext
from convert_styling.model import FindingKind
from convert_styling.model.finding import Finding
from convert_styling.rules import (
    AMBIENT_TYPES_FILE_NAMES,
    GLOBAL_STYLESHEET,
    LEGACY_TYPES_FILE,
    REPLACEMENT_TYPES_FILE,
)


class AmbientTypesDetector(BaseDetector):
    id = "ambient_types"
    file_names = AMBIENT_TYPES_FILE_NAMES

    def run(self, source: SourceFile, text: str, ctx: ScanContext) -> list[Finding]:
        if source.name == REPLACEMENT_TYPES_FILE:
            ctx.saw_replacement_types = True
            return []

        ctx.tracker.delete(
            source.rel_path,
            text,
            reason=ctx.outcome(
                applied=f"Deleted {LEGACY_TYPES_FILE} (Uniwind migration step).",
                planned=f"Delete {LEGACY_TYPES_FILE} (Uniwind migration step).",
                returned=f"Delete {LEGACY_TYPES_FILE} (Uniwind migration step).",
            ),
        )
        return [
            Finding(
                file=source.rel_path,
                kind=FindingKind.LEGACY_AMBIENT_TYPES_PRESENT,
                message=(
                    f"{LEGACY_TYPES_FILE} present. Uniwind migration checklist "
                    "suggests deleting it."
                ),
            )
        ]

    def finalize(self, ctx: ScanContext) -> list[Finding]:
        if not ctx.saw_global_stylesheet or ctx.saw_replacement_types:
            return []
        return [
            Finding(
                file=REPLACEMENT_TYPES_FILE,
                kind=FindingKind.REPLACEMENT_AMBIENT_TYPES_MISSING,
                message=(
                    f"{GLOBAL_STYLESHEET} found but {REPLACEMENT_TYPES_FILE} is "
                    "missing. Add it to enable className typing for Uniwind."
                ),
            )
        ]
