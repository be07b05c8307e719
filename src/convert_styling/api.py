"""
convert_styling.api
===================

Programmatic entrypoint for using convert_styling as a backend engine.

Goals:
  - No argparse / web dependencies
  - Never raises for reportable conditions (bad input, missing root,
    platform path mismatch, unreadable guide); those come back as an
    error ``ToolResponse``
  - One payload carrying both the text report and the structured result

Usage::

    from convert_styling.api import convert_styling

    resp = convert_styling({"projectRoot": "/path/to/app", "apply": False})
    print(resp.text)

    resp = convert_styling({"files": [{"path": "global.css", "content": css}]})
    bundle = resp.result.edit_bundle()
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from convert_styling.core.runner import run_migration
from convert_styling.core.validate import parse_request
from convert_styling.errors import ConvertStylingError
from convert_styling.guides import Guide, load_guide
from convert_styling.model import ErrorKind
from convert_styling.model.run_result import MigrationResult
from convert_styling.reports.text_report import render_report

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ToolResponse:
    """Combined text + structured response.

    Exactly one of ``result`` and ``error`` is set.
    """

    text: str
    result: Optional[MigrationResult] = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"text": self.text}
        if self.result is not None:
            d["result"] = self.result.to_dict()
        if self.error is not None:
            d["error"] = self.error.value
        return d


def convert_styling(
    payload: Any,
    *,
    project_root_fallback: str | Path | None = None,
    guide: Guide | None = None,
) -> ToolResponse:
    """Scan (and optionally migrate) a project described by *payload*.

    Parameters
    ----------
    payload:
        The loose request object (see ``core.validate``).  Anything that is
        not a valid request yields an ``INPUT_VALIDATION`` error response.
    project_root_fallback:
        Root used for disk runs when the payload has no ``projectRoot``.
        Defaults to the current working directory.
    guide:
        Migration guide whose fingerprint is reported; defaults to
        :func:`convert_styling.guides.load_guide`.

    Returns
    -------
    ToolResponse
        The rendered report and the ``MigrationResult``, or an error text.
    """
    try:
        config = parse_request(payload, project_root_fallback=project_root_fallback)
        guide = guide or load_guide()
        result = run_migration(config, guide_sha1=guide.sha1)
    except ConvertStylingError as exc:
        _logger.info("convert-styling stopped before traversal: %s", exc.kind.value)
        return ToolResponse(text=str(exc), error=exc.kind)

    return ToolResponse(text=render_report(result), result=result)
