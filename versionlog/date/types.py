from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from . import formats


def _date_formats() -> tuple[str, ...]:
    return tuple(formats.DATE_FORMATS)


def _time_formats() -> tuple[str, ...]:
    return tuple(formats.TIME_FORMATS)


def _standard_formats() -> tuple[tuple[str, str], ...]:
    return tuple(formats.STANDARD_FORMATS)


def _datetime_format() -> str:
    return formats.DATETIME_FORMAT


@dataclass(frozen=True)
class DateFormats:
    """Templates used to parse change dates and to render them.

    Defaults are read from versionlog.date.formats when the instance is built,
    so edits to those module lists apply to every DateFormats created afterwards.
    """

    date_formats: tuple[str, ...] = field(default_factory=_date_formats)
    time_formats: tuple[str, ...] = field(default_factory=_time_formats)
    standard_formats: tuple[tuple[str, str], ...] = field(default_factory=_standard_formats)
    datetime_format: str = field(default_factory=_datetime_format)

    @classmethod
    def from_env(cls, *, prefix: str = "VERSIONLOG_") -> "DateFormats":
        """Build from environment variables (a .env file is loaded first).

        - <prefix>DATETIME_FORMAT: output template
        - <prefix>DATE_FORMATS / <prefix>TIME_FORMATS: ';'-separated template lists
        """
        load_dotenv()
        kwargs: dict[str, object] = {}

        out_fmt = os.environ.get(prefix + "DATETIME_FORMAT", "").strip()
        if out_fmt:
            kwargs["datetime_format"] = out_fmt

        for var, key in (("DATE_FORMATS", "date_formats"), ("TIME_FORMATS", "time_formats")):
            raw = os.environ.get(prefix + var, "")
            if not raw.strip():
                continue
            items = tuple(s.strip() for s in raw.split(";") if s.strip())
            if not items:
                raise ValueError(f"{prefix}{var} is set but lists no templates: {raw!r}")
            kwargs[key] = items

        return cls(**kwargs)  # type: ignore[arg-type]
