"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — run completed (findings may exist)
  1   Violation — findings present and ``--fail-on-findings`` was given,
      or a write/delete failed during ``--apply``
  2   Error — invalid input, missing root, platform path mismatch
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
