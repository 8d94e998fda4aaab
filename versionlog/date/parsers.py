from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta, timezone

from .types import DateFormats

logger = logging.getLogger(__name__)

# strptime's %f takes at most six digits; longer fractions (nanoseconds) are cut.
_LONG_FRACTION_RE = re.compile(r"(\.\d{6})\d+")

# Candidate zone abbreviations (MST, PST, GMT, ...) for %Z templates.
_ZONE_NAME_RE = re.compile(r"(?<![A-Za-z])[A-Za-z]{3,5}(?![A-Za-z])")


def _named_zone(name: str) -> timezone:
    # Abbreviations carry no offset; the name is kept so it renders back unchanged.
    if name.upper() == "UTC":
        return timezone.utc
    return timezone(timedelta(0), name)


def _strptime_named_zone(value: str, fmt: str) -> datetime | None:
    # strptime's %Z only knows UTC, GMT and the host's own zone names, so each
    # alphabetic token is tried in the zone slot as "UTC" instead.
    for m in _ZONE_NAME_RE.finditer(value):
        try:
            dt = datetime.strptime(value[: m.start()] + "UTC" + value[m.end() :], fmt)
        except ValueError:
            continue
        return dt.replace(tzinfo=_named_zone(m.group()))
    return None


def _strptime(value: str, fmt: str) -> datetime | None:
    if "%f" in fmt:
        value = _LONG_FRACTION_RE.sub(r"\1", value, count=1)
    if "%Z" in fmt:
        return _strptime_named_zone(value, fmt)
    try:
        dt = datetime.strptime(value, fmt)
    except ValueError:
        return None
    offset = dt.utcoffset()
    if not offset:
        return dt.replace(tzinfo=timezone.utc)
    # Numeric zones are named "+0700" so %Z renders them as written.
    return dt.replace(tzinfo=timezone(offset, dt.strftime("%z")))


def parse_date(date: str, formats: DateFormats | None = None) -> datetime | None:
    """Parse a free-form date/time string.

    Tries every DateFormat/TimeFormat pair (date first, then time first), then
    each date format alone, then the standard formats. Returns the first
    successful parse, or None when nothing matches. Zone-less results are UTC.
    """
    if not date:
        return None
    f = formats or DateFormats()

    for fd in f.date_formats:
        for ft in f.time_formats:
            for fmt in (f"{fd} {ft}", f"{ft} {fd}"):
                dt = _strptime(date, fmt)
                if dt is not None:
                    logger.debug("parse_date(%r): matched date+time %r", date, fmt)
                    return dt

    for fd in f.date_formats:
        dt = _strptime(date, fd)
        if dt is not None:
            logger.debug("parse_date(%r): matched date %r", date, fd)
            return dt

    for name, fmt in f.standard_formats:
        dt = _strptime(date, fmt)
        if dt is not None:
            logger.debug("parse_date(%r): matched standard format %s", date, name)
            return dt

    logger.debug("parse_date(%r): no format matched", date)
    return None


def format_date(dt: datetime, formats: DateFormats | None = None) -> str:
    f = formats or DateFormats()
    return dt.strftime(f.datetime_format)
