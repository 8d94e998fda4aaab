"""The "current" version of a package.

VersionState is an ordinary object that applications create and pass around.
`current` is a process-wide default instance backing the module-level helpers.
It is not safe for concurrent mutation without external locking; concurrent
reads are fine once initialization is complete.

The module-level print_changelog(file) prints `current.changelog`; it is the one
re-exported as versionlog.print_changelog. versionlog.changes.print_changelog
takes the change log as its first argument instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TextIO

from . import changes
from .changes import ChangeEntry
from .date import DateFormats
from .semver import SemanticVersion, parse_version


@dataclass
class VersionState:
    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: str = ""
    metadata: str = ""

    # History of version changes, oldest first. The last entry is the current
    # version when none has been set.
    changelog: list[ChangeEntry] = field(default_factory=list)
    formats: DateFormats = field(default_factory=DateFormats)

    def set(self, version: str) -> None:
        """Set the version from a semantic version string (raises InvalidVersion)."""
        v = parse_version(version)
        self.major, self.minor, self.patch = v.major, v.minor, v.patch
        self.prerelease, self.metadata = v.prerelease, v.metadata

    def reset(self) -> None:
        self.major = self.minor = self.patch = 0
        self.prerelease = self.metadata = ""

    def is_set(self) -> bool:
        # All-zero components count as unset, including an explicit "0.0.0".
        return not self.as_version().is_zero()

    def as_version(self) -> SemanticVersion:
        return SemanticVersion(self.major, self.minor, self.patch, self.prerelease, self.metadata)

    def version_string(self) -> str:
        if self.is_set():
            return str(self.as_version())
        if self.changelog:
            return str(parse_version(self.changelog[-1].version))
        return ""

    def __str__(self) -> str:
        return self.version_string()

    def render_changelog(self) -> str:
        return changes.render_changelog(self.changelog, self.formats)

    def print_changelog(self, file: TextIO | None = None) -> None:
        changes.print_changelog(self.changelog, file=file, formats=self.formats)


current = VersionState()


def set_version(version: str) -> None:
    current.set(version)


def is_set() -> bool:
    return current.is_set()


def version_string() -> str:
    return current.version_string()


def print_changelog(file: TextIO | None = None) -> None:
    current.print_changelog(file)
