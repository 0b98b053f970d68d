#!/usr/bin/env python3
"""
Currency Conversion Utilities

Amounts travel as text in the CSV buffer (major units, e.g. "-12.50") and as
integer minor units (cents) in the budget. All conversions use integer
arithmetic.

Known behavior:
- major_text_to_minor_units() keeps only the integer prefix before scaling,
  so "12.75" becomes 1200, not 1275. This matches the existing sync output and
  is kept until it is confirmed against real account data.
"""

import re

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


def parse_int_prefix(text: str | None) -> int | None:
    """
    Parse the leading base-10 integer of a string.

    Leading whitespace and a single sign are accepted; parsing stops at the
    first non-digit character.

    Args:
        text: Text such as "12", "-5.50" or " 7abc"

    Returns:
        The integer prefix, or None if the text does not start with digits

    Examples:
        parse_int_prefix("12.99") -> 12
        parse_int_prefix("-5.50") -> -5
        parse_int_prefix("abc") -> None
    """
    if text is None:
        return None
    match = _INT_PREFIX.match(text)
    if not match:
        return None
    return int(match.group(1))


def major_text_to_minor_units(text: str | None) -> int:
    """
    Convert a major-unit amount string to integer minor units.

    The fractional part is discarded before scaling by 100.

    Args:
        text: Amount text from the CSV buffer

    Returns:
        Amount in minor units

    Raises:
        ValueError: If the text has no integer prefix

    Examples:
        major_text_to_minor_units("12") -> 1200
        major_text_to_minor_units("-5") -> -500
        major_text_to_minor_units("12.75") -> 1200
    """
    value = parse_int_prefix(text)
    if value is None:
        raise ValueError(f"Invalid amount: {text!r}")
    return value * 100

