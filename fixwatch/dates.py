"""Timestamp parsing and comparison for publication evidence.

Fix execution times are ISO-8601 strings such as
``2025-07-11T15:28:23.948Z``; the admin service may also report
``lastModified`` as an HTTP date (``Fri, 11 Jul 2025 16:30:00 GMT``). A value
that cannot be parsed is treated as an invalid instant: it is neither after
nor before any other instant, so :func:`is_after` returns ``False`` whenever
either side is invalid. Callers that need to tell "not after" apart from
"not comparable" should check :func:`parse_timestamp` for ``None`` first.
"""

from __future__ import annotations

import datetime as dt
from email.utils import parsedate_to_datetime


def _parse_iso(text: str) -> dt.datetime | None:
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"
    try:
        return dt.datetime.fromisoformat(text)
    except ValueError:
        return None


def _parse_http_date(text: str) -> dt.datetime | None:
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None


def parse_timestamp(value: str | None) -> dt.datetime | None:
    """Parse a timestamp into an aware UTC datetime.

    Values without an offset are interpreted as UTC. Returns ``None`` for
    absent, blank or unparseable input.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    parsed = _parse_iso(text) or _parse_http_date(text)
    if parsed is None:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


def is_after(value: str | None, reference: str | None) -> bool:
    """Return True iff ``value`` is strictly later than ``reference``.

    Examples
    --------
    >>> is_after("2025-07-11T16:30:00.000Z", "2025-07-11T15:28:23.948Z")
    True
    >>> is_after("2025-07-11T15:28:23.948Z", "2025-07-11T15:28:23.948Z")
    False
    >>> is_after("not a date", "2025-07-11T15:28:23.948Z")
    False

    """
    later = parse_timestamp(value)
    earlier = parse_timestamp(reference)
    if later is None or earlier is None:
        return False
    return later > earlier


__all__ = ["is_after", "parse_timestamp"]
