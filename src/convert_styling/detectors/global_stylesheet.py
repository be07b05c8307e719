"""global.css — Tailwind 4 + Uniwind canonical header."""

from __future__ import annotations

import re

from convert_styling.core.config import ScanConfig
from convert_styling.core.discover import SourceFile
from convert_styling.detectors import BaseDetector, ScanContext
from convert_styling.model import FindingKind
from convert_styling.model.finding import Finding
from convert_styling.rules import GLOBAL_STYLESHEET
from convert_styling.transforms.css import normalize_css_header

_GLOBAL_STYLESHEET_PATH_RE = re.compile(r"\bglobal\.css$")


class GlobalStylesheetDetector(BaseDetector):
    id = "global_stylesheet"
    file_names = frozenset({GLOBAL_STYLESHEET})

    def claims(self, source: SourceFile, config: ScanConfig) -> bool:
        return (
            source.name in self.file_names
            or _GLOBAL_STYLESHEET_PATH_RE.search(source.rel_path) is not None
        )

    def run(self, source: SourceFile, text: str, ctx: ScanContext) -> list[Finding]:
        ctx.saw_global_stylesheet = True

        result = normalize_css_header(text)
        if not result.changed:
            return []

        ctx.tracker.update(
            source.rel_path,
            text,
            result.updated,
            reason="Update global.css header to Tailwind 4 + Uniwind.",
        )
        return [
            Finding(
                file=source.rel_path,
                kind=FindingKind.CSS_HEADER_NEEDS_NORMALIZATION,
                message=ctx.outcome(
                    applied=(
                        "Normalized global.css imports for Tailwind 4 + Uniwind "
                        "(@import 'tailwindcss'; @import 'uniwind';)."
                    ),
                    planned=(
                        "global.css imports should be Tailwind 4 + Uniwind "
                        "(set apply=true to write the edit)."
                    ),
                    returned=(
                        "Normalized global.css imports for Tailwind 4 + Uniwind "
                        "(returned as edit)."
                    ),
                ),
            )
        ]
