"""Migration vocabulary — single source of truth for legacy/replacement names.

Structure:
  LEGACY_*        - NativeWind / Tailwind v3 artifacts that are detected
  REPLACEMENT_*   - Uniwind / Tailwind v4 artifacts that are written
  *_FILE_NAMES    - exact basenames routed to a dedicated detector
  DEFAULT_*       - collector defaults when the request does not override them
"""

from __future__ import annotations

# ── Packages ────────────────────────────────────────────────────────
LEGACY_PACKAGE = "nativewind"
REPLACEMENT_PACKAGE = "uniwind"

# ── Transpiler (babel) ──────────────────────────────────────────────
LEGACY_BABEL_PRESET = "nativewind/babel"

# ── Bundler (metro) ─────────────────────────────────────────────────
REPLACEMENT_METRO_PATH = "uniwind/metro"
REPLACEMENT_METRO_WRAPPER = "withUniwindConfig"
CANONICAL_METRO_OPTION = "cssEntryFile"

# ── Ambient type declarations ───────────────────────────────────────
LEGACY_TYPES_FILE = "nativewind.d.ts"
REPLACEMENT_TYPES_FILE = "uniwind-types.d.ts"

# ── Global stylesheet ───────────────────────────────────────────────
GLOBAL_STYLESHEET = "global.css"
CANONICAL_CSS_HEADER: tuple[str, ...] = (
    "@import 'tailwindcss';",
    "@import 'uniwind';",
)

# ── Recognized config filenames (exact match) ───────────────────────
BABEL_CONFIG_FILE_NAMES = frozenset({"babel.config.js", "babel.config.cjs"})
METRO_CONFIG_FILE_NAMES = frozenset({"metro.config.js", "metro.config.cjs"})
TAILWIND_CONFIG_FILE_NAMES = frozenset({"tailwind.config.js", "tailwind.config.cjs"})
AMBIENT_TYPES_FILE_NAMES = frozenset({LEGACY_TYPES_FILE, REPLACEMENT_TYPES_FILE})

CONFIG_CANDIDATE_FILE_NAMES: frozenset[str] = (
    BABEL_CONFIG_FILE_NAMES
    | METRO_CONFIG_FILE_NAMES
    | TAILWIND_CONFIG_FILE_NAMES
    | AMBIENT_TYPES_FILE_NAMES
    | {GLOBAL_STYLESHEET}
)

# ── Collector defaults ──────────────────────────────────────────────
DEFAULT_INCLUDE_EXTENSIONS: frozenset[str] = frozenset(
    {".ts", ".tsx", ".js", ".jsx", ".css", ".json", ".cjs", ".mjs"}
)

DEFAULT_EXCLUDE_DIR_NAMES: frozenset[str] = frozenset(
    {
        "node_modules",
        ".git",
        "build",
        "dist",
        ".next",
        ".expo",
        ".turbo",
        ".cache",
        "coverage",
        "ios",
        "android",
    }
)

DEFAULT_MAX_FILES = 5000
MAX_FILES_CEILING = 20000
MAX_VIRTUAL_PATH_LENGTH = 400

# Report listings are capped; the virtual edit bundle is not.
REPORT_LISTING_CAP = 100
