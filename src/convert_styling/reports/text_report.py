"""Text report — the single payload returned to CLI, API and web callers.

Sections, in order:

1. label
2. JSON summary (counts, findings-by-kind histogram, guide fingerprint)
3. findings, capped at ``REPORT_LISTING_CAP`` with an ``...and N more`` tail
4. changes: a capped list on disk, the full JSON edit bundle in memory
5. write failures (only when an apply run hit one)
6. notes footer
"""

from __future__ import annotations

from typing import Sequence

from convert_styling.contracts.load import validate_instance
from convert_styling.model.run_result import MigrationResult
from convert_styling.rules import REPORT_LISTING_CAP
from convert_styling.utils.json_norm import stable_json_dumps

REPORT_LABEL = "convert-styling results"

NOTES: tuple[str, ...] = (
    "- This tool is best-effort + conservative; it auto-edits only mechanical "
    "changes (babel/metro/global.css/nativewind.d.ts).",
    "- StyleSheet.create() and nativewind runtime APIs "
    "(ThemeProvider/cssInterop/styled) are reported for manual conversion.",
)

VIRTUAL_NOTE = (
    "- In-memory mode is ideal for a handful of files; it is not practical "
    "for whole-repo migrations."
)


def _capped(lines: Sequence[str], cap: int = REPORT_LISTING_CAP) -> list[str]:
    out = list(lines[:cap])
    if len(lines) > cap:
        out.append(f"...and {len(lines) - cap} more")
    return out


def render_findings(result: MigrationResult) -> list[str]:
    if not result.findings:
        return ["", "No findings."]
    return ["", f"Findings (first {REPORT_LISTING_CAP}):"] + _capped(
        [f.describe() for f in result.findings]
    )


def render_changes(result: MigrationResult) -> list[str]:
    if result.virtual:
        if not result.changes:
            return ["", "No changes were returned."]
        bundle = result.edit_bundle()
        validate_instance(bundle, "edit_bundle.schema.json")
        return ["", "Returned edits:", stable_json_dumps(bundle, trailing_newline=False)]

    if not result.changes:
        return [
            "",
            "No changes were applied." if result.apply else "Dry-run: no files were modified.",
        ]
    heading = "Changes applied" if result.apply else "Changes planned (dry-run)"
    return ["", f"{heading} (first {REPORT_LISTING_CAP}):"] + _capped(
        [c.describe() for c in result.changes]
    )


def render_failures(result: MigrationResult) -> list[str]:
    if not result.write_failures:
        return []
    lines = ["", "Write failures (these files were left unmigrated):"]
    lines += [f"- {w.action.value}: {w.file} — {w.error}" for w in result.write_failures]
    return lines


def render_report(result: MigrationResult) -> str:
    """Compose the full text payload for *result*."""
    summary = result.summary()
    validate_instance(summary, "migration_summary.schema.json")

    lines = [REPORT_LABEL, stable_json_dumps(summary, trailing_newline=False)]
    lines += render_findings(result)
    lines += render_changes(result)
    lines += render_failures(result)
    lines += ["", "Notes:", *NOTES]
    if result.virtual:
        lines.append(VIRTUAL_NOTE)
    return "\n".join(lines)
