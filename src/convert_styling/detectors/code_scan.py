"""Free-text code scanner — detection only, never edits.

Runtime APIs (``StyleSheet.create``, ``ThemeProvider``, ``cssInterop``,
``styled``) change semantics when migrated, so they are reported for manual
review and the file is left untouched.
"""

from __future__ import annotations

import re

from convert_styling.core.config import ScanConfig
from convert_styling.core.discover import SourceFile
from convert_styling.detectors import BaseDetector, ScanContext
from convert_styling.model import FindingKind
from convert_styling.model.finding import Finding

LEGACY_IMPORT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"from\s+['\"]nativewind['\"]", re.MULTILINE),
    re.compile(r"^\s*import\s+['\"]nativewind['\"]", re.MULTILINE),
    re.compile(r"require\(\s*['\"]nativewind['\"]\s*\)", re.MULTILINE),
)

STYLESHEET_CREATE_RE = re.compile(r"StyleSheet\.create\s*\(", re.MULTILINE)


def scan_code(text: str) -> list[tuple[FindingKind, str]]:
    """Return ``(kind, message)`` pairs for *text*, at most one per kind."""
    hits: list[tuple[FindingKind, str]] = []
    if any(p.search(text) for p in LEGACY_IMPORT_PATTERNS):
        hits.append(
            (
                FindingKind.LEGACY_IMPORT_REFERENCE,
                "Found nativewind import/require. Likely needs Uniwind migration or "
                "manual review (cssInterop/styled/ThemeProvider).",
            )
        )
    if STYLESHEET_CREATE_RE.search(text):
        hits.append(
            (
                FindingKind.PROGRAMMATIC_STYLESHEET_USAGE,
                "Found StyleSheet.create(). Guide prefers className utilities; this "
                "usually needs manual conversion.",
            )
        )
    return hits


class CodeScanDetector(BaseDetector):
    id = "code_scan"

    def claims(self, source: SourceFile, config: ScanConfig) -> bool:
        return source.suffix in config.include_extensions

    def run(self, source: SourceFile, text: str, ctx: ScanContext) -> list[Finding]:
        return [
            Finding(file=source.rel_path, kind=kind, message=message)
            for kind, message in scan_code(text)
        ]
