# -*- coding: utf-8 -*-
"""
Utility helper functions.
"""

from datetime import datetime, date
from typing import Optional, Union
import math


def parse_number(text: Optional[str]) -> Optional[float]:
    """
    Parse free text from a numeric input.

    Empty text means "not entered" and returns None. Text that is not a
    number returns NaN, so derived values stay blank instead of raising.
    """
    if text is None:
        return None

    text = str(text).strip()
    if not text:
        return None

    try:
        return float(text)
    except ValueError:
        return math.nan


def is_present(value) -> bool:
    """True when a field holds an entered value (NaN counts as entered)."""
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def format_date(
    value: Optional[Union[datetime, date, str]],
    format_str: str = "%d/%m/%Y"
) -> str:
    """
    Format a date value for display.

    Args:
        value: Date, datetime, or ISO string
        format_str: Output format string

    Returns:
        Formatted date string or empty string
    """
    if value is None:
        return ""

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value

    if isinstance(value, (datetime, date)):
        return value.strftime(format_str)

    return str(value)


def format_number(value: Optional[Union[int, float]], decimals: int = 0) -> str:
    """
    Format a number for display.

    None, NaN and infinities render as an empty string.
    """
    if value is None:
        return ""

    try:
        value = float(value)
    except (ValueError, TypeError):
        return str(value)

    if not math.isfinite(value):
        return ""

    if decimals == 0:
        return f"{int(round(value))}"
    return f"{value:.{decimals}f}"


def format_field_value(value) -> str:
    """Format a stored field value back into input text."""
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value)


def format_file_size(size_bytes: int) -> str:
    """Format a byte count in megabytes."""
    return f"{size_bytes / 1024 / 1024:.2f} MB"
