"""Permissive date parsing for change log entries.

Human-entered dates vary wildly; templates are tried in a fixed priority order
and the first one that matches wins.
"""

from .formats import DATE_FORMATS, DATETIME_FORMAT, STANDARD_FORMATS, TIME_FORMATS
from .parsers import format_date, parse_date
from .types import DateFormats
