"""Stylesheet-header normalizer for the global entry stylesheet.

Target shape::

    @import 'tailwindcss';
    @import 'uniwind';

    <remaining original content>

Work is line-based: a line is dropped only when its stripped text is
exactly one of the recognised directives, so selectors and declarations
that merely mention them are left alone.
"""

from __future__ import annotations

import re

from convert_styling.rules import CANONICAL_CSS_HEADER
from convert_styling.transforms import TransformResult, TransformStep, run_steps

_TAILWIND_DIRECTIVE_RE = re.compile(r"@tailwind\s+(?:base|components|utilities)\s*;?")
_NATIVEWIND_IMPORT_RE = re.compile(r"@import\s+(['\"])nativewind\1\s*;?")
_CANONICAL_IMPORT_RE = re.compile(r"@import\s+(['\"])(?:tailwindcss|uniwind)\1\s*;?")

_BLANK_RUN_RE = re.compile(r"\n{3,}")

HEADER = "\n".join(CANONICAL_CSS_HEADER)


def _drop_lines(text: str, pattern: re.Pattern[str]) -> tuple[str, bool]:
    lines = text.splitlines(keepends=True)
    kept = [ln for ln in lines if not pattern.fullmatch(ln.strip())]
    return "".join(kept), len(kept) != len(lines)


def _strip_tailwind_directives(text: str) -> str:
    updated, dropped = _drop_lines(text, _TAILWIND_DIRECTIVE_RE)
    if dropped:
        updated = _BLANK_RUN_RE.sub("\n\n", updated)
    return updated


def _strip_nativewind_import(text: str) -> str:
    return _drop_lines(text, _NATIVEWIND_IMPORT_RE)[0]


def _ensure_canonical_header(text: str) -> str:
    body = _drop_lines(text, _CANONICAL_IMPORT_RE)[0].lstrip()
    return f"{HEADER}\n\n{body}"


CSS_STEPS: tuple[TransformStep, ...] = (
    TransformStep(
        name="tailwind_directives",
        note="Removed Tailwind v3 @tailwind directives.",
        apply=_strip_tailwind_directives,
    ),
    TransformStep(
        name="nativewind_import",
        note="Removed @import 'nativewind'.",
        apply=_strip_nativewind_import,
    ),
    TransformStep(
        name="canonical_header",
        note="Normalized header to @import 'tailwindcss'; @import 'uniwind';.",
        apply=_ensure_canonical_header,
    ),
)


def normalize_css_header(source: str) -> TransformResult:
    return run_steps(source, CSS_STEPS)
