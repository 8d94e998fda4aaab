from __future__ import annotations

import re
from dataclasses import dataclass

# Source: https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
VERSION_PATTERN = (
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)

VERSION_RE = re.compile(VERSION_PATTERN, re.ASCII)


class InvalidVersion(ValueError):
    """Raised when a string does not match the semantic version grammar."""

    def __init__(self, version: object) -> None:
        super().__init__(f"invalid version: {version!r}")
        self.version = version


@dataclass(frozen=True)
class SemanticVersion:
    major: int
    minor: int
    patch: int
    prerelease: str = ""
    metadata: str = ""

    @classmethod
    def parse(cls, version: str) -> "SemanticVersion":
        return parse_version(version)

    def is_zero(self) -> bool:
        return not (self.major or self.minor or self.patch or self.prerelease or self.metadata)

    def __str__(self) -> str:
        out = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            out += "-" + self.prerelease
        if self.metadata:
            out += "+" + self.metadata
        return out


def parse_version(version: str) -> SemanticVersion:
    """Validate a semantic version string and split it into its components.

    Raises InvalidVersion when the string does not match VERSION_PATTERN.
    """
    if not isinstance(version, str):
        raise InvalidVersion(version)

    # fullmatch: `$` alone would also accept a trailing newline
    m = VERSION_RE.fullmatch(version)
    if not m:
        raise InvalidVersion(version)

    return SemanticVersion(
        major=int(m.group(1)),
        minor=int(m.group(2)),
        patch=int(m.group(3)),
        prerelease=m.group(4) or "",
        metadata=m.group(5) or "",
    )
