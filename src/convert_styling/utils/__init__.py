"""Shared utilities for convert_styling."""

from convert_styling.utils.exit_codes import ExitCode
from convert_styling.utils.json_norm import stable_json_dump, stable_json_dumps

__all__ = [
    "ExitCode",
    "stable_json_dump",
    "stable_json_dumps",
]
