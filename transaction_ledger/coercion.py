"""Best-effort coercion of raw record values.

Neither helper ever raises for bad input. Amounts that cannot be read become
``NaN`` (which then poisons any sum they take part in) and dates that cannot
be read become ``None``.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, timedelta
from typing import Any

# Longest numeric prefix, in the spirit of JavaScript's ``parseFloat``.
_FLOAT_PREFIX_RE = re.compile(
    r"""
    [+-]?
    (?:
        Infinity
      | (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
    )
    """,
    re.VERBOSE,
)

# Unpadded ISO-like dates such as ``2019-1-2`` (optionally with ``/``).
_LOOSE_YMD_RE = re.compile(r"^(\d{4})[-/](\d{1,2})[-/](\d{1,2})$")

# Tried in order after the ISO fast path.
_DATE_FORMATS: tuple[str, ...] = (
    "%m/%d/%Y",
    "%m/%d/%y",
    "%d.%m.%Y",
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%d %H:%M:%S",
)


def parse_amount(value: Any) -> float:
    """Coerce ``value`` to ``float``; ``NaN`` when it cannot be read.

    Numbers pass through unchanged. Strings are read like ``parseFloat``:
    leading whitespace is skipped and the longest numeric prefix wins, so
    ``"12.50 USD"`` reads as ``12.5``. ``None``, booleans, empty strings and
    non-numeric text all give ``NaN``.
    """

    if isinstance(value, bool) or value is None:
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        value = str(value)
    m = _FLOAT_PREFIX_RE.match(value.lstrip())
    if m is None:
        return math.nan
    text = m.group(0)
    if text.lstrip("+-") == "Infinity":
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def parse_date(value: Any) -> date | None:
    """Parse a record or query date; ``None`` when it cannot be read.

    Accepts ``date``/``datetime`` objects, ISO ``yyyy-mm-dd`` (also unpadded
    ``yyyy-m-d`` and ``yyyy/mm/dd``), ISO datetimes and a handful of common
    human layouts. In the year-month-day forms a day past the end of its
    month rolls over into the next one (``2019-02-30`` is 2019-03-02), as
    long as the month is 1-12 and the day 1-31.
    """

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    s = value.strip()
    if not s:
        return None

    m = _LOOSE_YMD_RE.match(s)
    if m:
        try:
            year, month, day = (int(g) for g in m.groups())
            if not (1 <= month <= 12 and 1 <= day <= 31):
                return None
            return date(year, month, 1) + timedelta(days=day - 1)
        except ValueError:
            return None

    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    return None


__all__ = ["parse_amount", "parse_date"]
