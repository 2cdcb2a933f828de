"""Mini README: Display formatting helpers for Budget Desk.

These helpers turn ledger numbers into the strings shown on the page:
signed amounts with thousands separators, percentage labels, the month
heading, and the composite ``"<kind>-<id>"`` keys used for list rows. They
are kept free of web framework imports so they can be unit tested alone.
"""

from __future__ import annotations

from datetime import date
from typing import Tuple, Union

from ..budget.ledger import EntryKind

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sept",
    "Oct",
    "Nov",
    "Dec",
)

NO_PERCENTAGE = "---"


def format_amount(value: float, kind: Union[EntryKind, str]) -> str:
    """Render ``value`` as e.g. ``+ 1,234.56`` with the sign taken from ``kind``."""

    sign = "-" if EntryKind.from_str(kind) is EntryKind.EXPENSE else "+"
    return f"{sign} {abs(value):,.2f}"


def format_budget(value: float) -> str:
    """Format the net budget, choosing the sign from the value itself."""

    kind = EntryKind.INCOME if value >= 0 else EntryKind.EXPENSE
    return format_amount(value, kind)


def format_percentage(value: int) -> str:
    # zero shares as well as the sentinel render as a placeholder
    return f"{value}%" if value > 0 else NO_PERCENTAGE


def month_label(today: date) -> str:
    """Return the heading label such as ``Sept 2026``."""

    return f"{MONTH_ABBREVIATIONS[today.month - 1]} {today.year}"


def row_id(kind: Union[EntryKind, str], entry_id: int) -> str:
    return f"{EntryKind.from_str(kind).value}-{entry_id}"


def parse_row_id(value: str) -> Tuple[EntryKind, int]:
    """Split a ``"<kind>-<id>"`` row key back into its parts."""

    prefix, separator, suffix = value.partition("-")
    if not separator or not suffix.isdigit():
        raise ValueError(f"Malformed row id: {value}")
    return EntryKind.from_str(prefix), int(suffix)
