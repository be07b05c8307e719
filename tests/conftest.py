"""Shared fixtures: small NativeWind projects on disk and as in-memory file sets."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

BABEL_CONFIG = textwrap.dedent("""\
    module.exports = function (api) {
      api.cache(true);
      return {
        presets: ['babel-preset-expo', 'nativewind/babel'],
      };
    };
""")

METRO_CONFIG = textwrap.dedent("""\
    const { getDefaultConfig } = require('expo/metro-config');
    const { withNativeWind } = require('nativewind/metro');

    const config = getDefaultConfig(__dirname);
    module.exports = withNativeWind(config, { input: './global.css' });
""")

GLOBAL_CSS = "@tailwind base;\n@tailwind components;\n@tailwind utilities;\n"

APP_TSX = textwrap.dedent("""\
    import { StyleSheet, View } from 'react-native';
    import { cssInterop } from 'nativewind';

    const styles = StyleSheet.create({ box: { flex: 1 } });
    export default function App() {
      return <View className="flex-1" style={styles.box} />;
    }
""")

NATIVEWIND_TYPES = '/// <reference types="nativewind/types" />\n'

SAMPLE_PROJECT: dict[str, str] = {
    "babel.config.js": BABEL_CONFIG,
    "metro.config.js": METRO_CONFIG,
    "global.css": GLOBAL_CSS,
    "nativewind.d.ts": NATIVEWIND_TYPES,
    "src/App.tsx": APP_TSX,
    "node_modules/nativewind/index.js": "module.exports = require('nativewind');\n",
}


def write_tree(root: Path, files: dict[str, str]) -> Path:
    for rel, content in files.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(content, encoding="utf-8")
    return root


def read_tree(root: Path) -> dict[str, str]:
    return {
        p.relative_to(root).as_posix(): p.read_text(encoding="utf-8")
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


def as_virtual_files(files: dict[str, str]) -> list[dict[str, str]]:
    return [{"path": rel, "content": content} for rel, content in files.items()]


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Write a file mapping under a fresh project root and return the root."""

    def _make(files: dict[str, str]) -> Path:
        root = tmp_path / "app"
        root.mkdir(exist_ok=True)
        return write_tree(root, files)

    return _make


@pytest.fixture
def sample_project(make_project) -> Path:
    return make_project(SAMPLE_PROJECT)
