from __future__ import annotations

from pathlib import Path

import pytest

from versionlog.date import DateFormats, formats


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for var in ("VERSIONLOG_DATETIME_FORMAT", "VERSIONLOG_DATE_FORMATS", "VERSIONLOG_TIME_FORMATS"):
        monkeypatch.delenv(var, raising=False)
    # keep load_dotenv() away from any .env in the working tree
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("versionlog.date.types.load_dotenv", lambda: False)


def test_defaults_match_module_data() -> None:
    f = DateFormats.from_env()
    assert f == DateFormats()
    assert f.date_formats == tuple(formats.DATE_FORMATS)
    assert f.datetime_format == formats.RFC1123


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VERSIONLOG_DATETIME_FORMAT", "%Y-%m-%d")
    monkeypatch.setenv("VERSIONLOG_DATE_FORMATS", "%d.%m.%Y; %Y/%m/%d")
    monkeypatch.setenv("VERSIONLOG_TIME_FORMATS", "")
    f = DateFormats.from_env()
    assert f.datetime_format == "%Y-%m-%d"
    assert f.date_formats == ("%d.%m.%Y", "%Y/%m/%d")
    assert f.time_formats == tuple(formats.TIME_FORMATS)


def test_env_list_without_templates_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VERSIONLOG_DATE_FORMATS", ";;")
    with pytest.raises(ValueError):
        DateFormats.from_env()


def test_module_list_edits_apply_to_new_instances(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(formats, "DATE_FORMATS", ["%d.%m.%Y"])
    assert DateFormats().date_formats == ("%d.%m.%Y",)
