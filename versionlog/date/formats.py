"""Ordered date/time templates (strptime/strftime syntax).

Order is precedence: earlier templates win when a string matches several.
"""

from __future__ import annotations

# Recognized date shapes. %d, %m and %I accept one or two digits; %Y needs four
# digits and %y exactly two.
DATE_FORMATS: list[str] = [
    "%Y %b %d",
    "%Y %B %d",
    "%Y-%b-%d",
    "%Y-%B-%d",
    "%Y-%m-%d",
    "%Y %m %d",
    "%m-%d-%Y",
    "%m/%d/%Y",
    "%b %d, %Y",
    "%B %d, %Y",
    # two-digit years
    "%y %b %d",
    "%y %B %d",
    "%y-%b-%d",
    "%y-%B-%d",
    "%y-%m-%d",
    "%y %m %d",
    "%m-%d-%y",
    "%m/%d/%y",
    "%b %d, %y",
    "%B %d, %y",
]

# %p is case-insensitive (PM/pm).
TIME_FORMATS: list[str] = [
    "%H:%M:%S",
    "%I:%M:%S%p",
    "%H:%M",
    "%I:%M%p",
]

# Well-known representations, tried last.
STANDARD_FORMATS: list[tuple[str, str]] = [
    ("ANSIC", "%a %b %d %H:%M:%S %Y"),  # Mon Jan  2 15:04:05 2006
    ("UnixDate", "%a %b %d %H:%M:%S %Z %Y"),  # Mon Jan  2 15:04:05 UTC 2006
    ("RubyDate", "%a %b %d %H:%M:%S %z %Y"),  # Mon Jan 02 15:04:05 -0700 2006
    ("RFC822", "%d %b %y %H:%M %Z"),  # 02 Jan 06 15:04 UTC
    ("RFC822Z", "%d %b %y %H:%M %z"),  # 02 Jan 06 15:04 -0700
    ("RFC850", "%A, %d-%b-%y %H:%M:%S %Z"),  # Monday, 02-Jan-06 15:04:05 UTC
    ("RFC1123", "%a, %d %b %Y %H:%M:%S %Z"),  # Mon, 02 Jan 2006 15:04:05 UTC
    ("RFC1123Z", "%a, %d %b %Y %H:%M:%S %z"),  # Mon, 02 Jan 2006 15:04:05 -0700
    ("RFC3339", "%Y-%m-%dT%H:%M:%S%z"),  # 2006-01-02T15:04:05Z07:00
    ("RFC3339Nano", "%Y-%m-%dT%H:%M:%S.%f%z"),  # 2006-01-02T15:04:05.999999999Z07:00
]

RFC1123 = dict(STANDARD_FORMATS)["RFC1123"]

# Output template for rendered change dates.
DATETIME_FORMAT = RFC1123
