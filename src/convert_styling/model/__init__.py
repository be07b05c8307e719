"""Enums shared across the engine, tracker and report layers."""

from __future__ import annotations

from enum import Enum


class FindingKind(str, Enum):
    """Closed set of observations the detector pipeline can emit."""

    LEGACY_IMPORT_REFERENCE = "legacy-import-reference"
    LEGACY_BUILD_CONFIG_ARRAY = "legacy-build-config-array"
    LEGACY_BUNDLER_CONFIG = "legacy-bundler-config"
    LEGACY_AMBIENT_TYPES_PRESENT = "legacy-ambient-types-present"
    REPLACEMENT_AMBIENT_TYPES_MISSING = "replacement-ambient-types-missing"
    PROGRAMMATIC_STYLESHEET_USAGE = "programmatic-stylesheet-usage"
    BUILD_TOOL_CONFIG_REFERENCE = "build-tool-config-reference"
    CSS_HEADER_NEEDS_NORMALIZATION = "css-header-needs-normalization"


class ChangeAction(str, Enum):
    """What the change tracker does to a file."""

    UPDATE = "update"
    DELETE = "delete"


class MigrationMode(str, Enum):
    """Conversion mode tag — currently a single fixed value."""

    UNIWIND_MIGRATION = "uniwind-migration"


class ErrorKind(str, Enum):
    """Reportable failures that short-circuit a run before traversal."""

    INPUT_VALIDATION = "input_validation"
    ROOT_NOT_FOUND = "root_not_found"
    PLATFORM_PATH_MISMATCH = "platform_path_mismatch"
    GUIDE_UNAVAILABLE = "guide_unavailable"
