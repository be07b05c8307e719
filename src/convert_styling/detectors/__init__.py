"""Detectors classify collected files and propose mechanical edits.

Dispatch is by exact filename first, then by extension: :func:`dispatch`
walks :data:`DETECTORS` in order and the first detector that claims a file
owns it, so no file is ever processed twice.

Each detector exposes ``id``, ``claims(source, config)``,
``run(source, text, ctx) -> list[Finding]`` and
``finalize(ctx) -> list[Finding]``; the latter runs once after the whole
file set has been processed and is where scan-wide invariants live.

Available detectors (dispatch order):
    - AmbientTypesDetector: nativewind.d.ts / uniwind-types.d.ts
    - BuildToolConfigDetector: tailwind.config.* (report only)
    - BabelConfigDetector: removes nativewind/babel from arrays
    - MetroConfigDetector: migrates metro.config.* toward uniwind/metro
    - GlobalStylesheetDetector: canonical global.css header
    - CodeScanDetector: free-text scan of every other scanned file
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from convert_styling.core.config import ScanConfig
from convert_styling.core.discover import SourceFile
from convert_styling.core.tracker import ChangeTracker
from convert_styling.model.finding import Finding


@dataclass(slots=True)
class ScanContext:
    """Per-invocation state shared by the detectors.

    The ``saw_*`` flags accumulate across the traversal and are only read
    in ``finalize``.
    """

    config: ScanConfig
    tracker: ChangeTracker
    saw_global_stylesheet: bool = False
    saw_replacement_types: bool = False

    def outcome(self, *, applied: str, planned: str, returned: str) -> str:
        """Pick the phrasing that matches how edits materialize in this run."""
        if self.tracker.virtual:
            return returned
        return applied if self.tracker.apply else planned


class Detector(Protocol):
    id: str

    def claims(self, source: SourceFile, config: ScanConfig) -> bool: ...

    def run(self, source: SourceFile, text: str, ctx: ScanContext) -> list[Finding]: ...

    def finalize(self, ctx: ScanContext) -> list[Finding]: ...


class BaseDetector:
    """Claims files by exact basename; no scan-wide invariant by default."""

    id: str = ""
    file_names: frozenset[str] = frozenset()

    def claims(self, source: SourceFile, config: ScanConfig) -> bool:
        return source.name in self.file_names

    def finalize(self, ctx: ScanContext) -> list[Finding]:
        return []


def default_detectors() -> list[Detector]:
    from .ambient_types import AmbientTypesDetector
    from .babel_config import BabelConfigDetector
    from .build_tool import BuildToolConfigDetector
    from .code_scan import CodeScanDetector
    from .global_stylesheet import GlobalStylesheetDetector
    from .metro_config import MetroConfigDetector

    return [
        AmbientTypesDetector(),
        BuildToolConfigDetector(),
        BabelConfigDetector(),
        MetroConfigDetector(),
        GlobalStylesheetDetector(),
        CodeScanDetector(),
    ]


def dispatch(
    source: SourceFile, config: ScanConfig, detectors: list[Detector]
) -> Optional[Detector]:
    """Return the single detector that owns *source*, if any."""
    for detector in detectors:
        if detector.claims(source, config):
            return detector
    return None
