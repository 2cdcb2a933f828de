"""Mini README: Utility helpers for Budget Desk.

Currently exports the display formatting functions used by the controller
and the page template.
"""

from .formatting import (
    format_amount,
    format_budget,
    format_percentage,
    month_label,
    parse_row_id,
    row_id,
)

__all__ = [
    "format_amount",
    "format_budget",
    "format_percentage",
    "month_label",
    "parse_row_id",
    "row_id",
]
