"""Change — a concrete edit either applied to disk or returned as a patch."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from . import ChangeAction


@dataclass(frozen=True, slots=True)
class Change:
    """Audited edit.

    ``before_hash`` is the fingerprint of the content the edit was computed
    from; ``after_hash`` the fingerprint of ``new_content`` (``None`` for
    deletes).  ``new_content`` is only carried in virtual mode, where the
    caller applies the patch itself.
    """

    file: str
    action: ChangeAction
    reason: str
    before_hash: Optional[str] = None
    after_hash: Optional[str] = None
    new_content: Optional[str] = None

    def to_dict(self) -> dict:
        d: dict = {
            "file": self.file,
            "action": self.action.value,
            "reason": self.reason,
        }
        if self.before_hash is not None:
            d["before_hash"] = self.before_hash
        if self.after_hash is not None:
            d["after_hash"] = self.after_hash
        if self.new_content is not None:
            d["new_content"] = self.new_content
        return d

    def describe(self) -> str:
        return f"- {self.action.value}: {self.file} — {self.reason}"


@dataclass(frozen=True, slots=True)
class WriteFailure:
    """A write or delete issued during ``apply`` that the filesystem refused."""

    file: str
    action: ChangeAction
    error: str

    def to_dict(self) -> dict:
        return {
            "file": self.file,
            "action": self.action.value,
            "error": self.error,
        }
