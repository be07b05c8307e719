"""Bundler-config migrator (metro.config.js/.cjs).

Steps, in order:

1. ``nativewind/metro`` / ``nativewind/metro-config`` → ``uniwind/metro``
2. ``withNativewind`` / ``withNativeWind`` → ``withUniwindConfig``
3. option keys ``cssInput`` and ``input:`` → ``cssEntryFile``
4. ``const { x } = require('uniwind/metro')`` → ``const { withUniwindConfig } = ...``
   (only when the require already targets ``uniwind/metro`` and the
   canonical name is not yet destructured)
"""

from __future__ import annotations

import re

from convert_styling.rules import (
    CANONICAL_METRO_OPTION,
    REPLACEMENT_METRO_PATH,
    REPLACEMENT_METRO_WRAPPER,
)
from convert_styling.transforms import (
    TransformResult,
    TransformStep,
    regex_step,
    run_steps,
)

LEGACY_METRO_PATH_RE = re.compile(r"nativewind/(?:metro-config|metro)\b")
LEGACY_WRAPPER_RE = re.compile(r"\bwithNative[Ww]ind\b")

# Files matching this are routed through the migrator at all.
LEGACY_METRO_REFERENCE_RE = re.compile(
    rf"{LEGACY_METRO_PATH_RE.pattern}|{LEGACY_WRAPPER_RE.pattern}"
)

_CSS_INPUT_KEY_RE = re.compile(r"\bcssInput\b")
_INPUT_KEY_RE = re.compile(r"\binput\b\s*:")

_UNIWIND_REQUIRE_RE = re.compile(r"require\(\s*['\"]uniwind/metro['\"]\s*\)")
_CANONICAL_REQUIRE_RE = re.compile(
    r"withUniwindConfig\s*\}\s*=\s*require\(\s*['\"]uniwind/metro['\"]\s*\)"
)
_DESTRUCTURED_REQUIRE_RE = re.compile(
    r"const\s*\{\s*[A-Za-z0-9_$]+\s*\}\s*=\s*require\(\s*['\"]uniwind/metro['\"]\s*\);?"
)


def _normalize_option_keys(text: str) -> str:
    text = _CSS_INPUT_KEY_RE.sub(CANONICAL_METRO_OPTION, text)
    return _INPUT_KEY_RE.sub(f"{CANONICAL_METRO_OPTION}:", text)


def _normalize_destructuring(text: str) -> str:
    if _CANONICAL_REQUIRE_RE.search(text) or not _UNIWIND_REQUIRE_RE.search(text):
        return text
    return _DESTRUCTURED_REQUIRE_RE.sub(
        f"const {{ {REPLACEMENT_METRO_WRAPPER} }} = require('{REPLACEMENT_METRO_PATH}');",
        text,
        count=1,
    )


METRO_STEPS: tuple[TransformStep, ...] = (
    regex_step(
        "import_path",
        f"Replaced nativewind metro import with {REPLACEMENT_METRO_PATH}.",
        LEGACY_METRO_PATH_RE,
        REPLACEMENT_METRO_PATH,
    ),
    regex_step(
        "wrapper_identifier",
        f"Renamed withNativewind -> {REPLACEMENT_METRO_WRAPPER}.",
        LEGACY_WRAPPER_RE,
        REPLACEMENT_METRO_WRAPPER,
    ),
    TransformStep(
        name="option_keys",
        note=f"Normalized metro options to use {CANONICAL_METRO_OPTION}.",
        apply=_normalize_option_keys,
    ),
    TransformStep(
        name="destructuring",
        note=f"Normalized metro require to {{ {REPLACEMENT_METRO_WRAPPER} }}.",
        apply=_normalize_destructuring,
    ),
)


def references_legacy_metro(text: str) -> bool:
    return LEGACY_METRO_REFERENCE_RE.search(text) is not None


def migrate_metro_config(source: str) -> TransformResult:
    return run_steps(source, METRO_STEPS)
