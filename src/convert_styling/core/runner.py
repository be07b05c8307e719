"""Runner — collects files, dispatches detectors, builds the MigrationResult."""

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path
from typing import Iterable, Iterator, Optional

from convert_styling.core.config import DiskRequest, ScanConfig, VirtualRequest
from convert_styling.core.discover import Collected, SourceFile, collect_disk, collect_virtual
from convert_styling.core.tracker import ChangeTracker, DiskWorkspace, VirtualWorkspace
from convert_styling.detectors import Detector, ScanContext, default_detectors, dispatch
from convert_styling.errors import PlatformPathMismatchError, RootNotFoundError
from convert_styling.model.finding import Finding
from convert_styling.model.run_result import MigrationResult

_logger = logging.getLogger(__name__)

_WINDOWS_ABS_PATH_RE = re.compile(r"^(?:[a-zA-Z]:[\\/]|\\\\[^\\]+\\)")


def looks_like_windows_abs_path(p: str) -> bool:
    """``C:\\x``, ``C:/x`` or a UNC share ``\\\\server\\share``."""
    return _WINDOWS_ABS_PATH_RE.match(p) is not None


def resolve_disk_root(requested: str, *, platform: str = sys.platform) -> Path:
    """Resolve a disk root or raise a reportable error.

    Raises
    ------
    PlatformPathMismatchError
        If *requested* is a Windows path and this process is not on Windows.
    RootNotFoundError
        If the resolved root does not exist.
    """
    if platform != "win32" and looks_like_windows_abs_path(requested):
        raise PlatformPathMismatchError(requested, platform)
    root = Path(requested).expanduser().resolve()
    if not root.exists():
        raise RootNotFoundError(str(root))
    return root


def _read_sources(collected: Collected) -> Iterator[tuple[SourceFile, str]]:
    """Yield ``(source, text)``; unreadable disk files are logged and skipped."""
    for source in collected.files:
        if source.content is not None:
            yield source, source.content
            continue
        try:
            with source.abs_path.open(encoding="utf-8", errors="replace", newline="") as fh:
                text = fh.read()
        except OSError as exc:
            _logger.warning("Skipping unreadable file '%s': %s", source.rel_path, exc)
            continue
        yield source, text


def _process(
    sources: Iterable[tuple[SourceFile, str]],
    ctx: ScanContext,
    detectors: list[Detector],
) -> list[Finding]:
    findings: list[Finding] = []
    for source, text in sources:
        detector = dispatch(source, ctx.config, detectors)
        if detector is None:
            continue
        _logger.debug("%s -> %s", source.rel_path, detector.id)
        findings.extend(detector.run(source, text, ctx))

    # scan-wide invariants, evaluated once the full file set has been seen
    for detector in detectors:
        findings.extend(detector.finalize(ctx))
    return findings


def run_migration(
    config: ScanConfig,
    *,
    guide_sha1: str,
    detectors: Optional[list[Detector]] = None,
) -> MigrationResult:
    """Execute one migration pass described by *config*.

    This is the **only** entry point that wires collector → detectors →
    tracker → result.  Virtual requests never touch the filesystem.

    Raises
    ------
    PlatformPathMismatchError, RootNotFoundError
        For disk requests whose root cannot be scanned.
    """
    detectors = detectors if detectors is not None else default_detectors()
    request = config.request

    if isinstance(request, VirtualRequest):
        collected = collect_virtual(request.files, config)
        tracker = ChangeTracker(VirtualWorkspace(apply=config.apply))
        root_label = " ".join(f"{request.base_path} (in-memory)".split())
    elif isinstance(request, DiskRequest):
        root = resolve_disk_root(request.root)
        collected = collect_disk(root, config)
        tracker = ChangeTracker(DiskWorkspace(root, apply=config.apply))
        root_label = str(root)
    else:  # pragma: no cover - exhaustive over Request
        raise TypeError(f"unsupported request type: {type(request).__name__}")

    ctx = ScanContext(config=config, tracker=tracker)
    findings = _process(_read_sources(collected), ctx, detectors)

    _logger.info(
        "%s: %d files enumerated, %d findings, %d changes, %d write failures",
        root_label,
        collected.files_enumerated,
        len(findings),
        len(tracker.changes),
        len(tracker.failures),
    )

    return MigrationResult(
        mode=config.mode,
        project_root=root_label,
        apply=config.apply,
        virtual=tracker.virtual,
        guide_sha1=guide_sha1,
        files_enumerated=collected.files_enumerated,
        findings=findings,
        changes=tracker.changes,
        write_failures=tracker.failures,
    )
