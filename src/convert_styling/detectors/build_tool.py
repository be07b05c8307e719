"""tailwind.config.* — report only; theming decisions are not mechanical."""

from __future__ import annotations

import re

from convert_styling.core.config import ScanConfig
from convert_styling.core.discover import SourceFile
from convert_styling.detectors import BaseDetector, ScanContext
from convert_styling.model import FindingKind
from convert_styling.model.finding import Finding
from convert_styling.rules import TAILWIND_CONFIG_FILE_NAMES

_LEGACY_THEMING_RE = re.compile(r"nativewind|ThemeProvider|cssInterop", re.IGNORECASE)


class BuildToolConfigDetector(BaseDetector):
    id = "build_tool_config"
    file_names = TAILWIND_CONFIG_FILE_NAMES

    def claims(self, source: SourceFile, config: ScanConfig) -> bool:
        # tailwind.config.ts etc. reach the pipeline through the extension set
        return source.name in self.file_names or source.name.startswith("tailwind.config.")

    def run(self, source: SourceFile, text: str, ctx: ScanContext) -> list[Finding]:
        if _LEGACY_THEMING_RE.search(text):
            message = (
                "tailwind.config.* references nativewind-related config. Uniwind "
                "prefers tokens/themes in CSS; likely needs manual migration."
            )
        else:
            message = (
                "tailwind.config.* found. If it only existed for NativeWind theming, "
                "consider moving tokens to CSS and removing it."
            )
        return [
            Finding(
                file=source.rel_path,
                kind=FindingKind.BUILD_TOOL_CONFIG_REFERENCE,
                message=message,
            )
        ]
