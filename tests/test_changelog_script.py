from __future__ import annotations

import json
import runpy
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "changelog.py"


@pytest.fixture
def script() -> dict:
    return runpy.run_path(str(SCRIPT))


def test_render_with_set_version(script: dict, tmp_path: Path) -> None:
    p = tmp_path / "changes.json"
    p.write_text(
        json.dumps(
            [
                {"version": "0.1.0", "date": "Feb 26, 2020", "description": ["initial commit"]},
                {"version": "0.2.0-beta+red", "title": "Red Label"},
            ]
        ),
        encoding="utf-8",
    )

    out = script["cmd_render"](p, script["DateFormats"](), None)
    assert " version 0.2.0-beta+red - Red Label\n" in out
    assert out.endswith("current version: 0.2.0-beta+red")

    out = script["cmd_render"](p, script["DateFormats"](), "0.1.4")
    assert out.endswith("current version: 0.1.4")


def test_load_entries_requires_version(script: dict, tmp_path: Path) -> None:
    p = tmp_path / "changes.json"
    p.write_text(json.dumps([{"title": "no version"}]), encoding="utf-8")
    with pytest.raises(SystemExit):
        script["load_entries"](p)


def test_cmd_date(script: dict) -> None:
    f = script["DateFormats"]()
    assert script["cmd_date"]("Feb 26, 2020", f) == "Wed, 26 Feb 2020 00:00:00 UTC"
    with pytest.raises(SystemExit):
        script["cmd_date"]("not a date", f)


def test_cmd_version(script: dict) -> None:
    assert json.loads(script["cmd_version"]("1.2.3-rc+b")) == {
        "major": 1,
        "minor": 2,
        "patch": 3,
        "prerelease": "rc",
        "metadata": "b",
    }
