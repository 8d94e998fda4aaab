#!/usr/bin/env python3
"""Inspect versions and dates, or print a boxed change log.

Usage:
  python3 scripts/changelog.py version 0.2.0-beta+red
  python3 scripts/changelog.py date "Feb 26, 2020"
  python3 scripts/changelog.py [--env] render changes.json [--set-version 0.1.4]

changes.json is a JSON list of objects with keys:
  version (required), title, date, description (list of lines), package
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Make this script runnable without installing the package (no PYTHONPATH required)
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from versionlog import ChangeEntry, DateFormats, InvalidVersion, VersionState, format_date, parse_date, parse_version  # noqa: E402


def load_entries(path: Path) -> list[ChangeEntry]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise SystemExit(f"Change log must be a JSON list: {path}")
    out: list[ChangeEntry] = []
    for i, item in enumerate(data):
        if not isinstance(item, dict) or "version" not in item:
            raise SystemExit(f"Entry {i} needs at least a 'version' key: {path}")
        out.append(
            ChangeEntry(
                version=str(item["version"]),
                title=str(item.get("title") or ""),
                date=str(item.get("date") or ""),
                description=tuple(str(s) for s in item.get("description") or []),
                package=str(item.get("package") or ""),
            )
        )
    return out


def cmd_version(text: str) -> str:
    v = parse_version(text)
    return json.dumps(
        {
            "major": v.major,
            "minor": v.minor,
            "patch": v.patch,
            "prerelease": v.prerelease,
            "metadata": v.metadata,
        },
        indent=2,
    )


def cmd_date(text: str, formats: DateFormats) -> str:
    dt = parse_date(text, formats)
    if dt is None:
        raise SystemExit(f"unrecognized date: {text!r}")
    return format_date(dt, formats)


def cmd_render(path: Path, formats: DateFormats, set_version: str | None) -> str:
    state = VersionState(changelog=load_entries(path), formats=formats)
    if set_version:
        state.set(set_version)
    return state.render_changelog() + f"current version: {state.version_string()}"


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--env", action="store_true", help="Read VERSIONLOG_* format overrides (and .env).")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_ver = sub.add_parser("version")
    p_ver.add_argument("text")

    p_date = sub.add_parser("date")
    p_date.add_argument("text")

    p_render = sub.add_parser("render")
    p_render.add_argument("changelog", help="JSON list of change entries")
    p_render.add_argument("--set-version", default=None)

    args = ap.parse_args()

    formats = DateFormats.from_env() if args.env else DateFormats()

    try:
        if args.cmd == "version":
            print(cmd_version(args.text))
            return

        if args.cmd == "date":
            print(cmd_date(args.text, formats))
            return

        if args.cmd == "render":
            print(cmd_render(Path(args.changelog), formats, args.set_version))
            return
    except InvalidVersion as e:
        raise SystemExit(str(e))


if __name__ == "__main__":
    main()
