"""Tests for the text report renderer."""

from __future__ import annotations

import json

import jsonschema
import pytest

from convert_styling.model import ChangeAction, FindingKind
from convert_styling.model.change import Change, WriteFailure
from convert_styling.model.finding import Finding
from convert_styling.model.run_result import MigrationResult
from convert_styling.reports.text_report import (
    REPORT_LABEL,
    VIRTUAL_NOTE,
    render_changes,
    render_findings,
    render_report,
)

SHA = "a" * 40


def make_result(**kw) -> MigrationResult:
    kw.setdefault("project_root", "/app")
    kw.setdefault("guide_sha1", SHA)
    return MigrationResult(**kw)


def findings(n: int) -> list[Finding]:
    return [
        Finding(file=f"src/f{i}.ts", kind=FindingKind.LEGACY_IMPORT_REFERENCE, message="m")
        for i in range(n)
    ]


def updates(n: int, *, content: bool = False) -> list[Change]:
    return [
        Change(
            file=f"f{i}.css",
            action=ChangeAction.UPDATE,
            reason="r",
            before_hash="b" * 40,
            after_hash="c" * 40,
            new_content="x" if content else None,
        )
        for i in range(n)
    ]


class TestSummaryBlock:
    def test_label_and_summary_json(self):
        text = render_report(make_result(findings=findings(2), files_enumerated=7))
        lines = text.split("\n")
        assert lines[0] == REPORT_LABEL

        end = lines.index("}")
        summary = json.loads("\n".join(lines[1 : end + 1]))
        assert summary["files_enumerated"] == 7
        assert summary["findings"] == 2
        assert summary["findings_by_kind"]["legacy-import-reference"] == 2
        assert summary["findings_by_kind"]["css-header-needs-normalization"] == 0
        assert len(summary["findings_by_kind"]) == len(FindingKind)

    def test_invalid_summary_rejected(self):
        with pytest.raises(jsonschema.ValidationError):
            render_report(make_result(guide_sha1="not-a-sha"))


class TestListings:
    def test_no_findings(self):
        assert render_findings(make_result()) == ["", "No findings."]

    def test_findings_capped_at_100(self):
        lines = render_findings(make_result(findings=findings(130)))
        assert lines[1] == "Findings (first 100):"
        assert len(lines) == 2 + 100 + 1
        assert lines[-1] == "...and 30 more"

    def test_exactly_100_has_no_tail(self):
        lines = render_findings(make_result(findings=findings(100)))
        assert not lines[-1].startswith("...and")

    def test_disk_changes_capped(self):
        lines = render_changes(make_result(apply=True, changes=updates(101)))
        assert lines[1] == "Changes applied (first 100):"
        assert lines[-1] == "...and 1 more"

    @pytest.mark.parametrize(
        "apply, expected",
        [(True, "No changes were applied."), (False, "Dry-run: no files were modified.")],
    )
    def test_disk_no_changes(self, apply, expected):
        assert render_changes(make_result(apply=apply)) == ["", expected]

    def test_dry_run_heading(self):
        lines = render_changes(make_result(changes=updates(1)))
        assert lines[1] == "Changes planned (dry-run) (first 100):"


class TestVirtualBundle:
    def test_bundle_is_not_capped(self):
        result = make_result(virtual=True, changes=updates(150, content=True))
        lines = render_changes(result)
        assert lines[1] == "Returned edits:"
        bundle = json.loads(lines[2])
        assert len(bundle["edits"]) == 150
        assert bundle["deletes"] == []

    def test_no_changes_returned(self):
        assert render_changes(make_result(virtual=True)) == ["", "No changes were returned."]

    def test_virtual_note_appended(self):
        text = render_report(make_result(virtual=True))
        assert text.endswith(VIRTUAL_NOTE)


class TestFailures:
    def test_failures_listed(self):
        result = make_result(
            apply=True,
            write_failures=[
                WriteFailure(file="global.css", action=ChangeAction.UPDATE, error="EACCES")
            ],
        )
        text = render_report(result)
        assert "Write failures (these files were left unmigrated):" in text
        assert "- update: global.css — EACCES" in text

    def test_no_failure_section_by_default(self):
        assert "Write failures" not in render_report(make_result())
