"""babel.config.* — remove the nativewind/babel preset."""

from __future__ import annotations

from convert_styling.core.config import ScanConfig
from convert_styling.core.discover import SourceFile
from convert_styling.detectors import BaseDetector, ScanContext
from convert_styling.model import FindingKind
from convert_styling.model.finding import Finding
from convert_styling.rules import BABEL_CONFIG_FILE_NAMES, LEGACY_BABEL_PRESET
from convert_styling.transforms.babel import remove_array_literal


class BabelConfigDetector(BaseDetector):
    id = "babel_config"
    file_names = BABEL_CONFIG_FILE_NAMES

    def claims(self, source: SourceFile, config: ScanConfig) -> bool:
        return source.name in self.file_names or source.name.startswith("babel.config.")

    def run(self, source: SourceFile, text: str, ctx: ScanContext) -> list[Finding]:
        if LEGACY_BABEL_PRESET not in text:
            return []

        result = remove_array_literal(text, LEGACY_BABEL_PRESET)
        if not result.changed:
            return [
                Finding(
                    file=source.rel_path,
                    kind=FindingKind.LEGACY_BUILD_CONFIG_ARRAY,
                    message=(
                        f"Found {LEGACY_BABEL_PRESET} in babel config but could not "
                        "safely auto-edit; manual removal recommended."
                    ),
                )
            ]

        ctx.tracker.update(
            source.rel_path,
            text,
            result.updated,
            reason=f"Remove {LEGACY_BABEL_PRESET} preset.",
        )
        return [
            Finding(
                file=source.rel_path,
                kind=FindingKind.LEGACY_BUILD_CONFIG_ARRAY,
                message=ctx.outcome(
                    applied=f"Removed {LEGACY_BABEL_PRESET} from babel config (Uniwind migration step).",
                    planned=f"Found {LEGACY_BABEL_PRESET} in babel config (set apply=true to write the edit).",
                    returned=f"Removed {LEGACY_BABEL_PRESET} from babel config (returned as edit).",
                ),
            )
        ]
