"""File discovery — bounded disk walk or virtual list filtering.

Both modes apply the same rules, in the same order:

1. drop anything under an excluded directory name (any path segment),
2. stop once ``max_files`` files have been enumerated,
3. keep only config candidates (exact basename) or scanned extensions.

``files_enumerated`` is the count after step 2, so a disk run and a run on an
equivalent virtual snapshot report the same numbers and the same findings.
"""

from __future__ import annotations

import logging
import os
import posixpath
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from convert_styling.core.config import ScanConfig, VirtualFile
from convert_styling.rules import CONFIG_CANDIDATE_FILE_NAMES

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SourceFile:
    """A file selected for the detector pipeline.

    ``rel_path`` is always POSIX-style and relative to the scan root.
    Disk files carry ``abs_path`` and are read lazily by the runner;
    virtual files carry their ``content`` up front.
    """

    rel_path: str
    abs_path: Optional[Path] = None
    content: Optional[str] = None

    @property
    def name(self) -> str:
        return posixpath.basename(self.rel_path)

    @property
    def suffix(self) -> str:
        return posixpath.splitext(self.rel_path)[1]


@dataclass(slots=True)
class Collected:
    """Collector output: the enumerated count and the retained files."""

    files_enumerated: int = 0
    files: list[SourceFile] = field(default_factory=list)


def is_config_candidate(name: str) -> bool:
    return name in CONFIG_CANDIDATE_FILE_NAMES


def should_read(name: str, suffix: str, include_extensions: frozenset[str]) -> bool:
    """True when a file enters the detector pipeline."""
    return is_config_candidate(name) or suffix in include_extensions


def normalize_rel_path(p: str) -> str:
    return p.replace("\\", "/").lstrip("/")


def has_excluded_segment(rel_path: str, exclude_dir_names: frozenset[str]) -> bool:
    """True when a *directory* segment is excluded; the basename never is."""
    return any(part in exclude_dir_names for part in rel_path.split("/")[:-1] if part)


# ── disk mode ───────────────────────────────────────────────────────


def walk_files(
    root: Path,
    *,
    exclude_dir_names: frozenset[str],
    max_files: int,
) -> list[Path]:
    """Depth-first walk of *root*, pruning excluded directories.

    Stops as soon as *max_files* regular files have been seen; the partial
    list is returned, not an error.  Symlinks are never followed or listed.
    Order follows directory listing order and is not stable across platforms.
    """
    out: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        # prune in place so os.walk never descends into excluded dirs
        dirnames[:] = [d for d in dirnames if d not in exclude_dir_names]
        for name in filenames:
            if len(out) >= max_files:
                return out
            p = Path(dirpath) / name
            if p.is_symlink() or not p.is_file():
                continue
            out.append(p)
        if len(out) >= max_files:
            break
    return out


def collect_disk(root: Path, config: ScanConfig) -> Collected:
    """Enumerate *root* and keep the files the pipeline should read."""
    walked = walk_files(
        root,
        exclude_dir_names=config.exclude_dir_names,
        max_files=config.max_files,
    )
    result = Collected(files_enumerated=len(walked))
    for p in walked:
        rel = p.relative_to(root).as_posix()
        if not should_read(p.name, p.suffix, config.include_extensions):
            continue
        result.files.append(SourceFile(rel_path=rel, abs_path=p))
    _logger.debug(
        "collected %d of %d enumerated files under %s",
        len(result.files),
        result.files_enumerated,
        root,
    )
    return result


# ── virtual mode ────────────────────────────────────────────────────


def collect_virtual(files: tuple[VirtualFile, ...], config: ScanConfig) -> Collected:
    """Filter an in-memory file list with the disk walk's semantics."""
    admitted: list[tuple[str, str]] = []
    for f in files:
        rel = normalize_rel_path(f.path)
        if not rel:
            continue
        if has_excluded_segment(rel, config.exclude_dir_names):
            continue
        admitted.append((rel, f.content))
        if len(admitted) >= config.max_files:
            break

    result = Collected(files_enumerated=len(admitted))
    for rel, content in admitted:
        src = SourceFile(rel_path=rel, content=content)
        if should_read(src.name, src.suffix, config.include_extensions):
            result.files.append(src)
    return result
