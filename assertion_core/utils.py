"""
assertion_core.utils
--------------------
Small helpers shared by the codecs and parsers: hex checks and UTC calendar
dates for implicit team conflict suffixes.
"""

from __future__ import annotations
import re
from datetime import datetime, timezone

DATE_FORMAT = "%Y-%m-%d"
_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")


def is_hex(s: str) -> bool:
    # Even length, hex digits only (empty is valid)
    return _HEX_RE.fullmatch(s) is not None

def parse_utc_date(s: str) -> datetime:
    # Calendar date at UTC midnight
    return datetime.strptime(s, DATE_FORMAT).replace(tzinfo=timezone.utc)

def format_utc_date(t: datetime) -> str:
    if t.tzinfo is not None:
        t = t.astimezone(timezone.utc)
    return t.strftime(DATE_FORMAT)
