"""Semantic versions and human-readable change logs.

Declare a change log, let the last entry (or an explicit set_version call) be
the package version, and print the history as 80-column boxed text.
"""

from .changes import ChangeEntry, format_change, render_changelog
from .date import DateFormats, format_date, parse_date
from .semver import VERSION_PATTERN, InvalidVersion, SemanticVersion, parse_version
from .state import VersionState, current, is_set, print_changelog, set_version, version_string
