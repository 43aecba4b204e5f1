"""Millisecond clock helpers and lenient integer parsing."""

from __future__ import annotations

import re
import time

_SLEEP_STEP = 0.0001
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def current_time_ms() -> int:
    """Return the wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


def precise_sleep(ms: int) -> None:
    """Sleep for at least ``ms`` milliseconds, checking the clock in small steps."""
    start = current_time_ms()
    while current_time_ms() - start < ms:
        time.sleep(_SLEEP_STEP)


def parse_int(text: str) -> int:
    """Parse a leading integer the way C's ``atoi`` does.

    Leading whitespace is skipped, one optional sign is honoured, and parsing
    stops at the first non-digit. Text with no digits gives 0.
    """
    match = _INT_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value