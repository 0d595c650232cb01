# -*- coding: utf-8 -*-
"""
Utility helper functions.
"""

from datetime import datetime, date, time
from typing import Any, Optional, Union


def is_blank(value: Any) -> bool:
    """
    Check whether a form value counts as "not provided".

    None, whitespace-only strings and empty collections are blank.
    False and 0 are real answers, not blanks.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, dict)):
        return len(value) == 0
    return False


def parse_iso_date(value: Optional[Union[date, str]]) -> Optional[date]:
    """
    Parse a YYYY-MM-DD value.

    Args:
        value: date instance or ISO string

    Returns:
        date or None when the value cannot be parsed
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        try:
            return datetime.strptime(value.strip(), "%Y-%m-%d").date()
        except ValueError:
            return None

    return None


def parse_time(value: Optional[Union[time, str]]) -> Optional[time]:
    """
    Parse a time slot such as "14:30" or "2:30 PM".

    Returns:
        time or None when the value cannot be parsed
    """
    if value is None:
        return None

    if isinstance(value, time):
        return value

    if isinstance(value, str):
        text = value.strip().upper()
        for fmt in ("%H:%M", "%I:%M %p", "%I:%M%p"):
            try:
                return datetime.strptime(text, fmt).time()
            except ValueError:
                continue

    return None
