"""metro.config.* — best-effort migration toward withUniwindConfig."""

from __future__ import annotations

from convert_styling.core.config import ScanConfig
from convert_styling.core.discover import SourceFile
from convert_styling.detectors import BaseDetector, ScanContext
from convert_styling.model import FindingKind
from convert_styling.model.finding import Finding
from convert_styling.rules import METRO_CONFIG_FILE_NAMES
from convert_styling.transforms.metro import (
    migrate_metro_config,
    references_legacy_metro,
)


class MetroConfigDetector(BaseDetector):
    id = "metro_config"
    file_names = METRO_CONFIG_FILE_NAMES

    def claims(self, source: SourceFile, config: ScanConfig) -> bool:
        return source.name in self.file_names or source.name.startswith("metro.config.")

    def run(self, source: SourceFile, text: str, ctx: ScanContext) -> list[Finding]:
        if not references_legacy_metro(text):
            return []

        result = migrate_metro_config(text)
        notes = " ".join(result.notes) or "May need manual migration to withUniwindConfig."
        if result.changed:
            ctx.tracker.update(
                source.rel_path,
                text,
                result.updated,
                reason="Best-effort migrate metro config toward Uniwind.",
            )
        return [
            Finding(
                file=source.rel_path,
                kind=FindingKind.LEGACY_BUNDLER_CONFIG,
                message=f"Metro config references NativeWind. {notes}",
            )
        ]
