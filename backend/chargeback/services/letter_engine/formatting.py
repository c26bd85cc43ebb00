"""
Letter Engine - Formatting Helpers

Single home for the placeholder and fallback rules shared by every
template:

- Absent values render as a bracket placeholder (or a fixed fallback)
- Present values render exactly as given, even if malformed
- Optional blocks render only when their backing value is non-empty
"""
import re
from datetime import date, datetime
from typing import Optional, Union

from dateutil.parser import isoparse

# Placeholder tokens
DATE_PLACEHOLDER = "[Date]"
AMOUNT_PLACEHOLDER = "[Amount]"
REASON_PLACEHOLDER = "[Reason]"
CURRENCY_SYMBOL = "$"

# Full calendar date, optionally followed by a time part
CALENDAR_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}(?:[T ]|$)")


def has_value(value: Optional[str]) -> bool:
    return value is not None and bool(str(value).strip())


def or_placeholder(value: Optional[str], placeholder: str) -> str:
    """Return the value as given, or the placeholder when absent."""
    return value if has_value(value) else placeholder


def format_long_date(value: Union[date, datetime]) -> str:
    """Format as "January 5, 2024" (no zero padding)."""
    return f"{value:%B} {value.day}, {value.year}"


def format_transaction_date(value: Optional[str]) -> str:
    """
    Render an ISO-8601 date string in long form.

    Absent → [Date]. Anything other than a full YYYY-MM-DD date (reduced
    precision like "2024-01", week dates, free text) → inserted as given.
    """
    if not has_value(value):
        return DATE_PLACEHOLDER
    if not CALENDAR_DATE_RE.match(value.strip()):
        return value
    try:
        parsed = isoparse(value.strip())
    except (ValueError, OverflowError):
        return value
    return format_long_date(parsed)


def format_amount(value: Optional[str]) -> str:
    """Prefix with $ - the symbol is emitted even when the amount is absent."""
    return f"{CURRENCY_SYMBOL}{or_placeholder(value, AMOUNT_PLACEHOLDER)}"


def optional_block(label: str, value: Optional[str]) -> Optional[str]:
    """
    Labeled paragraph, or None when the value is empty.

    None parts are dropped by the template, label included.
    """
    if not has_value(value):
        return None
    return f"{label}\n{value}"


def join_lines(*lines: Optional[str]) -> str:
    """Join non-empty lines into one paragraph."""
    return "\n".join(line for line in lines if has_value(line))


def join_paragraphs(*paragraphs: Optional[str]) -> str:
    """Join non-empty paragraphs with a blank line between each."""
    return "\n\n".join(filter(None, paragraphs))
