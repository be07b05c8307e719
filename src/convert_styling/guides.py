"""Migration guide loading.

The guide is the human-readable ruleset the detectors implement.  Its
fingerprint is reported with every run so that a result can be tied to the
guide revision that drove it (drift in the ruleset, not in the project).

Resolution order for :func:`load_guide`:
1. an explicit path argument,
2. the ``CONVERT_STYLING_GUIDE`` environment variable,
3. the bundled ``data/guides/styling.md``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from convert_styling.core.tracker import fingerprint
from convert_styling.errors import GuideUnavailableError

GUIDE_DIR = "data/guides"
DEFAULT_GUIDE = "styling.md"
GUIDE_ENV_VAR = "CONVERT_STYLING_GUIDE"


@dataclass(frozen=True, slots=True)
class Guide:
    uri: str
    text: str

    @property
    def sha1(self) -> str:
        return fingerprint(self.text)


def to_file_uri(path: Path) -> str:
    return path.resolve().as_uri()


def _bundled_guide_path(name: str) -> Path:
    # canonical: data/guides relative to the package root
    canonical = Path(__file__).resolve().parent / GUIDE_DIR / name
    if canonical.exists():
        return canonical
    with resources.as_file(resources.files("convert_styling") / GUIDE_DIR / name) as p:
        return p


def load_guide(path: str | Path | None = None) -> Guide:
    """Load the styling guide.

    Raises
    ------
    GuideUnavailableError
        If the resolved guide cannot be read (missing file, bad env path).
    """
    if path is None:
        path = os.environ.get(GUIDE_ENV_VAR) or None
    guide_path = Path(path) if path is not None else _bundled_guide_path(DEFAULT_GUIDE)
    try:
        text = guide_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise GuideUnavailableError(str(guide_path), exc.strerror or str(exc)) from exc
    return Guide(uri=to_file_uri(guide_path), text=text)
