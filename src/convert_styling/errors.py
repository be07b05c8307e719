"""Engine exceptions.

These are raised inside the engine and converted into a reported
``ToolResponse`` at the ``convert_styling.api`` boundary; callers of the
public API never see them.
"""

from __future__ import annotations

from convert_styling.model import ErrorKind


class ConvertStylingError(Exception):
    """Base class for failures that stop a run before any traversal."""

    kind: ErrorKind


class InputValidationError(ConvertStylingError):
    kind = ErrorKind.INPUT_VALIDATION


class RootNotFoundError(ConvertStylingError):
    kind = ErrorKind.ROOT_NOT_FOUND

    def __init__(self, root: str) -> None:
        super().__init__(f"Project root not found: {root}")
        self.root = root


class PlatformPathMismatchError(ConvertStylingError):
    kind = ErrorKind.PLATFORM_PATH_MISMATCH

    def __init__(self, root: str, platform: str) -> None:
        super().__init__(
            f"Project root looks like a Windows path ({root}), but this process "
            f"is running on {platform}.\n"
            "If you're connected to a remote server, it cannot read your local "
            "Windows filesystem.\n\n"
            "Fix options:\n"
            "1) Run convert-styling locally against the project folder "
            "(recommended for whole-project scans), or\n"
            "2) Use in-memory mode by passing { files: [{ path, content }] }."
        )
        self.root = root
        self.platform = platform


class GuideUnavailableError(ConvertStylingError):
    kind = ErrorKind.GUIDE_UNAVAILABLE

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Migration guide could not be read: {path} ({reason})")
        self.path = path
