#!/usr/bin/env python3
"""
Date Utilities

Helpers for turning API timestamps into the calendar days the budget expects.
"""

from datetime import date


def timestamp_to_day(timestamp: str | None) -> str:
    """
    Take the calendar-day part of an ISO-8601 timestamp.

    Returns the text before the first "T", or "" when the timestamp is absent.

    Examples:
        timestamp_to_day("2024-01-15T10:30:00Z") -> "2024-01-15"
        timestamp_to_day("") -> ""
    """
    if not timestamp:
        return ""
    return timestamp.split("T", 1)[0]


def parse_day(day: str) -> date:
    """
    Parse a YYYY-MM-DD string into a date.

    Raises:
        ValueError: If the string is empty or not a valid date
    """
    if not day:
        raise ValueError("Empty date")
    return date.fromisoformat(day)
