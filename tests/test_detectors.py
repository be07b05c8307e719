"""Tests for detector dispatch and the per-file detectors."""

from __future__ import annotations

from pathlib import Path

import pytest

from convert_styling.core.config import ScanConfig, VirtualRequest
from convert_styling.core.discover import SourceFile
from convert_styling.core.tracker import ChangeTracker, DiskWorkspace, VirtualWorkspace
from convert_styling.detectors import ScanContext, default_detectors, dispatch
from convert_styling.detectors.ambient_types import AmbientTypesDetector
from convert_styling.detectors.babel_config import BabelConfigDetector
from convert_styling.detectors.build_tool import BuildToolConfigDetector
from convert_styling.detectors.code_scan import CodeScanDetector, scan_code
from convert_styling.detectors.global_stylesheet import GlobalStylesheetDetector
from convert_styling.detectors.metro_config import MetroConfigDetector
from convert_styling.model import ChangeAction, FindingKind

from conftest import BABEL_CONFIG, GLOBAL_CSS, METRO_CONFIG, NATIVEWIND_TYPES

CONFIG = ScanConfig(request=VirtualRequest(files=()))


def virtual_ctx() -> ScanContext:
    return ScanContext(config=CONFIG, tracker=ChangeTracker(VirtualWorkspace(apply=False)))


def disk_ctx(root: Path, *, apply: bool = False) -> ScanContext:
    return ScanContext(config=CONFIG, tracker=ChangeTracker(DiskWorkspace(root, apply=apply)))


def src(rel: str) -> SourceFile:
    return SourceFile(rel_path=rel)


# ── dispatch ────────────────────────────────────────────────────────


class TestDispatch:
    @pytest.mark.parametrize(
        "rel, expected",
        [
            ("nativewind.d.ts", AmbientTypesDetector),
            ("types/uniwind-types.d.ts", AmbientTypesDetector),
            ("tailwind.config.js", BuildToolConfigDetector),
            ("tailwind.config.ts", BuildToolConfigDetector),
            ("babel.config.js", BabelConfigDetector),
            ("babel.config.cjs", BabelConfigDetector),
            ("metro.config.js", MetroConfigDetector),
            ("global.css", GlobalStylesheetDetector),
            ("src/styles/global.css", GlobalStylesheetDetector),
            ("src/App.tsx", CodeScanDetector),
            ("src/theme.css", CodeScanDetector),
        ],
    )
    def test_first_claiming_detector_wins(self, rel, expected):
        detector = dispatch(src(rel), CONFIG, default_detectors())
        assert isinstance(detector, expected)

    def test_unscanned_extension_has_no_owner(self):
        assert dispatch(src("README.md"), CONFIG, default_detectors()) is None

    def test_dispatch_order(self):
        ids = [d.id for d in default_detectors()]
        assert ids == [
            "ambient_types",
            "build_tool_config",
            "babel_config",
            "metro_config",
            "global_stylesheet",
            "code_scan",
        ]


# ── babel.config.* ──────────────────────────────────────────────────


class TestBabelConfigDetector:
    def test_no_preset_no_finding(self):
        ctx = virtual_ctx()
        text = "module.exports = { presets: ['babel-preset-expo'] };"
        assert BabelConfigDetector().run(src("babel.config.js"), text, ctx) == []
        assert ctx.tracker.changes == []

    def test_virtual_returns_edit(self):
        ctx = virtual_ctx()
        findings = BabelConfigDetector().run(src("babel.config.js"), BABEL_CONFIG, ctx)

        assert [f.kind for f in findings] == [FindingKind.LEGACY_BUILD_CONFIG_ARRAY]
        assert "returned as edit" in findings[0].message
        (change,) = ctx.tracker.changes
        assert change.action is ChangeAction.UPDATE
        assert "nativewind/babel" not in change.new_content
        assert "'babel-preset-expo'" in change.new_content

    def test_sole_element_reported_for_manual_removal(self):
        ctx = virtual_ctx()
        text = "module.exports = { presets: ['nativewind/babel'] };"
        findings = BabelConfigDetector().run(src("babel.config.js"), text, ctx)

        assert len(findings) == 1
        assert "could not safely auto-edit" in findings[0].message
        assert ctx.tracker.changes == []

    def test_disk_dry_run_plans_without_writing(self, tmp_path):
        target = tmp_path / "babel.config.js"
        target.write_text(BABEL_CONFIG, encoding="utf-8")
        ctx = disk_ctx(tmp_path, apply=False)

        findings = BabelConfigDetector().run(src("babel.config.js"), BABEL_CONFIG, ctx)

        assert "set apply=true" in findings[0].message
        (change,) = ctx.tracker.changes
        assert change.new_content is None
        assert change.before_hash and change.after_hash
        assert target.read_text(encoding="utf-8") == BABEL_CONFIG

    def test_disk_apply_writes(self, tmp_path):
        target = tmp_path / "babel.config.js"
        target.write_text(BABEL_CONFIG, encoding="utf-8")
        ctx = disk_ctx(tmp_path, apply=True)

        findings = BabelConfigDetector().run(src("babel.config.js"), BABEL_CONFIG, ctx)

        assert findings[0].message.startswith("Removed nativewind/babel")
        assert "nativewind/babel" not in target.read_text(encoding="utf-8")


# ── metro.config.* ──────────────────────────────────────────────────


class TestMetroConfigDetector:
    def test_clean_config_ignored(self):
        ctx = virtual_ctx()
        text = "module.exports = require('expo/metro-config').getDefaultConfig(__dirname);"
        assert MetroConfigDetector().run(src("metro.config.js"), text, ctx) == []

    def test_legacy_config_migrated(self):
        ctx = virtual_ctx()
        findings = MetroConfigDetector().run(src("metro.config.js"), METRO_CONFIG, ctx)

        (finding,) = findings
        assert finding.kind is FindingKind.LEGACY_BUNDLER_CONFIG
        assert finding.message.startswith("Metro config references NativeWind. Replaced")
        (change,) = ctx.tracker.changes
        assert "withUniwindConfig" in change.new_content
        assert "cssEntryFile" in change.new_content


# ── global.css ──────────────────────────────────────────────────────


class TestGlobalStylesheetDetector:
    def test_canonical_sheet_only_sets_flag(self):
        ctx = virtual_ctx()
        text = "@import 'tailwindcss';\n@import 'uniwind';\n\n.a{}\n"
        assert GlobalStylesheetDetector().run(src("global.css"), text, ctx) == []
        assert ctx.saw_global_stylesheet is True
        assert ctx.tracker.changes == []

    def test_legacy_sheet_normalized(self):
        ctx = virtual_ctx()
        findings = GlobalStylesheetDetector().run(src("global.css"), GLOBAL_CSS, ctx)

        assert [f.kind for f in findings] == [FindingKind.CSS_HEADER_NEEDS_NORMALIZATION]
        (change,) = ctx.tracker.changes
        assert change.new_content.startswith("@import 'tailwindcss';\n@import 'uniwind';")
        assert "@tailwind" not in change.new_content


# ── ambient type declarations ───────────────────────────────────────


class TestAmbientTypesDetector:
    def test_replacement_types_sets_flag(self):
        ctx = virtual_ctx()
        assert AmbientTypesDetector().run(src("uniwind-types.d.ts"), "", ctx) == []
        assert ctx.saw_replacement_types is True

    def test_legacy_types_deleted_in_virtual_mode(self):
        ctx = virtual_ctx()
        findings = AmbientTypesDetector().run(src("nativewind.d.ts"), NATIVEWIND_TYPES, ctx)

        assert [f.kind for f in findings] == [FindingKind.LEGACY_AMBIENT_TYPES_PRESENT]
        (change,) = ctx.tracker.changes
        assert change.action is ChangeAction.DELETE
        assert change.before_hash is not None
        assert change.after_hash is None

    def test_legacy_types_disk_dry_run_reports_only(self, tmp_path):
        (tmp_path / "nativewind.d.ts").write_text(NATIVEWIND_TYPES, encoding="utf-8")
        ctx = disk_ctx(tmp_path, apply=False)

        findings = AmbientTypesDetector().run(src("nativewind.d.ts"), NATIVEWIND_TYPES, ctx)

        assert len(findings) == 1
        assert ctx.tracker.changes == []
        assert (tmp_path / "nativewind.d.ts").exists()

    def test_legacy_types_disk_apply_deletes(self, tmp_path):
        (tmp_path / "nativewind.d.ts").write_text(NATIVEWIND_TYPES, encoding="utf-8")
        ctx = disk_ctx(tmp_path, apply=True)

        AmbientTypesDetector().run(src("nativewind.d.ts"), NATIVEWIND_TYPES, ctx)

        assert not (tmp_path / "nativewind.d.ts").exists()
        assert [c.action for c in ctx.tracker.changes] == [ChangeAction.DELETE]

    @pytest.mark.parametrize(
        "saw_sheet, saw_types, expected",
        [(True, False, 1), (True, True, 0), (False, False, 0), (False, True, 0)],
    )
    def test_finalize_missing_replacement(self, saw_sheet, saw_types, expected):
        ctx = virtual_ctx()
        ctx.saw_global_stylesheet = saw_sheet
        ctx.saw_replacement_types = saw_types

        findings = AmbientTypesDetector().finalize(ctx)

        assert len(findings) == expected
        for f in findings:
            assert f.kind is FindingKind.REPLACEMENT_AMBIENT_TYPES_MISSING
            assert f.file == "uniwind-types.d.ts"


# ── tailwind.config.* ───────────────────────────────────────────────


class TestBuildToolConfigDetector:
    def test_nativewind_reference(self):
        text = "module.exports = { presets: [require('nativewind/preset')] };"
        (finding,) = BuildToolConfigDetector().run(src("tailwind.config.js"), text, virtual_ctx())
        assert finding.kind is FindingKind.BUILD_TOOL_CONFIG_REFERENCE
        assert "references nativewind-related config" in finding.message

    def test_plain_config(self):
        text = "module.exports = { content: ['./src/**/*.tsx'] };"
        (finding,) = BuildToolConfigDetector().run(src("tailwind.config.js"), text, virtual_ctx())
        assert "consider moving tokens to CSS" in finding.message

    def test_never_edits(self):
        ctx = virtual_ctx()
        BuildToolConfigDetector().run(src("tailwind.config.js"), "nativewind", ctx)
        assert ctx.tracker.changes == []


# ── free-text code scan ─────────────────────────────────────────────


class TestScanCode:
    @pytest.mark.parametrize(
        "text",
        [
            "import { styled } from 'nativewind';",
            'import "nativewind";',
            "const nw = require('nativewind');",
            "export { cssInterop } from \"nativewind\";",
        ],
    )
    def test_legacy_imports(self, text):
        kinds = [kind for kind, _ in scan_code(text)]
        assert kinds == [FindingKind.LEGACY_IMPORT_REFERENCE]

    def test_subpath_imports_are_not_package_imports(self):
        assert scan_code("import x from 'nativewind/preset';") == []

    def test_stylesheet_create(self):
        kinds = [kind for kind, _ in scan_code("const s = StyleSheet.create ({});")]
        assert kinds == [FindingKind.PROGRAMMATIC_STYLESHEET_USAGE]

    def test_at_most_one_finding_per_kind(self):
        text = (
            "import a from 'nativewind';\nimport b from 'nativewind';\n"
            "StyleSheet.create({});\nStyleSheet.create({});\n"
        )
        assert len(scan_code(text)) == 2

    def test_detector_never_edits(self):
        ctx = virtual_ctx()
        findings = CodeScanDetector().run(
            src("src/App.tsx"), "import 'nativewind';\nStyleSheet.create({})", ctx
        )
        assert len(findings) == 2
        assert ctx.tracker.changes == []
