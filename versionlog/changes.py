"""Boxed, 80-column rendering of change log entries."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TextIO

from .date import DateFormats, format_date, parse_date
from .semver import parse_version

logger = logging.getLogger(__name__)

MAX_WIDTH = 80
TITLE_PAD = 1
DESC_PAD = 2

# U+2015 HORIZONTAL BAR
RULE_CHAR = "―"


@dataclass(frozen=True)
class ChangeEntry:
    """One release in a change log."""

    version: str
    title: str = ""
    date: str = ""  # free-form; see versionlog.date.parse_date
    description: tuple[str, ...] = field(default_factory=tuple)
    package: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.description, tuple):
            object.__setattr__(self, "description", tuple(self.description))

    def __str__(self) -> str:
        return format_change(self)


def _header_left(entry: ChangeEntry) -> str:
    out = ""
    if entry.package:
        out += entry.package + " "
    out += "version " + entry.version
    if entry.title:
        out += " - " + entry.title
    return out


def format_change(entry: ChangeEntry, formats: DateFormats | None = None) -> str:
    """Render a change as a boxed, 80-column text block ending with a newline.

    Raises InvalidVersion if entry.version is not a semantic version.
    """
    parse_version(entry.version)

    left = _header_left(entry)

    right = ""
    dt = parse_date(entry.date, formats)
    if dt is not None:
        right = format_date(dt, formats)
    elif entry.date:
        logger.debug("dropping unrecognized date %r for version %s", entry.date, entry.version)

    rule = RULE_CHAR * MAX_WIDTH + "\n"

    header = " " * TITLE_PAD + left
    if right:
        # Overlong headers get no padding at all.
        middle = MAX_WIDTH - ((len(left) + TITLE_PAD) + (len(right) + TITLE_PAD))
        header += " " * max(middle, 0) + right

    lines = [rule, header + "\n", rule]
    for line in entry.description:
        lines.append(" " * DESC_PAD + line + "\n")
    return "".join(lines)


def render_changelog(changelog: Iterable[ChangeEntry], formats: DateFormats | None = None) -> str:
    """Render every entry, each followed by a blank line.

    Every entry is rendered before returning, so an invalid version produces no
    output at all.
    """
    return "".join(format_change(c, formats) + "\n" for c in changelog)


def print_changelog(
    changelog: Iterable[ChangeEntry],
    file: TextIO | None = None,
    formats: DateFormats | None = None,
) -> None:
    out = render_changelog(changelog, formats)
    (file or sys.stdout).write(out)
