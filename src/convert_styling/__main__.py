"""CLI entry-point for convert_styling.

Usage:
    python -m convert_styling [ROOT]
    python -m convert_styling [ROOT] --apply
    python -m convert_styling [ROOT] --max-files 2000 --ext .ts --ext .tsx --exclude-dir vendor
    python -m convert_styling --files-json request.json [--base-path my-app] [--json]
    python -m convert_styling [ROOT] --guide docs/styling.md --fail-on-findings

``--files-json`` accepts either a list of ``{"path", "content"}`` objects or a
full request object (``projectRoot``, ``files``, ``apply``, ...); explicit
command-line flags win over keys in the file.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from convert_styling import __version__
from convert_styling.api import ToolResponse, convert_styling
from convert_styling.errors import GuideUnavailableError
from convert_styling.guides import load_guide
from convert_styling.utils.exit_codes import ExitCode
from convert_styling.utils.json_norm import stable_json_dumps


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="convert-styling",
        description=(
            "Scan a project for NativeWind usage and apply the mechanical "
            "Uniwind migration steps (dry-run by default)."
        ),
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "root",
        nargs="?",
        default=None,
        help="Project root to scan (default: current directory).",
    )
    p.add_argument(
        "--apply",
        action="store_true",
        default=None,
        help="Write changes to disk. Without it nothing is modified.",
    )
    p.add_argument(
        "--max-files",
        type=int,
        default=None,
        metavar="N",
        help="Safety limit for files enumerated (default 5000, max 20000).",
    )
    p.add_argument(
        "--ext",
        dest="extensions",
        action="append",
        default=None,
        metavar="EXT",
        help="File extension to scan; repeatable. Replaces the default set.",
    )
    p.add_argument(
        "--exclude-dir",
        dest="exclude_dirs",
        action="append",
        default=None,
        metavar="NAME",
        help="Directory name to skip; repeatable. Replaces the default set.",
    )
    p.add_argument(
        "--files-json",
        type=Path,
        default=None,
        metavar="FILE",
        help="Run in-memory over files listed in a JSON file (no disk writes).",
    )
    p.add_argument(
        "--base-path",
        default=None,
        metavar="LABEL",
        help="Display label for in-memory runs.",
    )
    p.add_argument(
        "--guide",
        type=Path,
        default=None,
        metavar="FILE",
        help="Migration guide to fingerprint (default: bundled styling guide).",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Print the full response (text + structured result) as JSON.",
    )
    p.add_argument(
        "--fail-on-findings",
        action="store_true",
        help="Exit 1 when any finding is reported.",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v info, -vv debug).",
    )
    return p


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _build_payload(args: argparse.Namespace) -> dict[str, Any]:
    """Merge ``--files-json`` contents with explicit flags (flags win).

    Raises ``OSError`` / ``ValueError`` when the JSON file cannot be used.
    """
    payload: dict[str, Any] = {}
    if args.files_json is not None:
        data = json.loads(args.files_json.read_text(encoding="utf-8"))
        if isinstance(data, list):
            payload["files"] = data
        elif isinstance(data, dict):
            payload.update(data)
        else:
            raise ValueError("--files-json must contain a list of files or a request object")

    overrides = {
        "projectRoot": args.root,
        "apply": args.apply,
        "maxFiles": args.max_files,
        "includeExtensions": args.extensions,
        "excludeDirNames": args.exclude_dirs,
        "basePath": args.base_path,
    }
    payload.update({k: v for k, v in overrides.items() if v is not None})
    return payload


def _exit_code(resp: ToolResponse, *, fail_on_findings: bool) -> int:
    if not resp.ok or resp.result is None:
        return ExitCode.ERROR
    if resp.result.write_failures:
        return ExitCode.VIOLATION
    if fail_on_findings and resp.result.findings:
        return ExitCode.VIOLATION
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        payload = _build_payload(args)
    except (OSError, ValueError) as exc:
        print(f"error: cannot read --files-json: {exc}", file=sys.stderr)
        return ExitCode.ERROR

    try:
        guide = load_guide(args.guide)
    except GuideUnavailableError as exc:
        print(f"error: cannot read guide: {exc}", file=sys.stderr)
        return ExitCode.ERROR

    resp = convert_styling(payload, project_root_fallback=Path.cwd(), guide=guide)

    if args.json:
        sys.stdout.write(stable_json_dumps(resp.to_dict()))
    elif resp.ok:
        print(resp.text)
    else:
        print(f"error: {resp.text}", file=sys.stderr)

    return int(_exit_code(resp, fail_on_findings=args.fail_on_findings))


if __name__ == "__main__":
    raise SystemExit(main())
