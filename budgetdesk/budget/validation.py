"""Mini README: Input checks applied before entries reach the ledger.

The ledger accepts whatever it is given, so the web layer runs submitted
form values through ``parse_entry_input`` first. Only two rules exist: the
description must contain text and the amount must be a finite number above
zero. Everything else about the input is passed through untouched.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Union

from .ledger import EntryKind

# plain decimals (optionally with exponent) or comma-grouped thousands
AMOUNT_PATTERN = re.compile(
    r"\d{1,3}(?:,\d{3})+(?:\.\d+)?"
    r"|(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
)


class InvalidEntryError(ValueError):
    """Raised when submitted entry fields fail validation."""


@dataclass(frozen=True, slots=True)
class EntryInput:
    """Validated arguments ready for ``Ledger.add``."""

    kind: EntryKind
    description: str
    amount: float


def parse_amount(value: Union[str, float, int, None]) -> float:
    """Convert form text or numbers into a positive finite float."""

    if value is None or isinstance(value, bool):
        raise InvalidEntryError("Amount is required")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidEntryError("Amount is required")
        if not AMOUNT_PATTERN.fullmatch(text):
            raise InvalidEntryError(f"Amount '{value}' is not a number")
        amount = float(text.replace(",", ""))
    else:
        amount = float(value)
    if not math.isfinite(amount) or amount <= 0:
        raise InvalidEntryError("Amount must be a positive number")
    return amount


def parse_entry_input(
    kind: Union[EntryKind, str],
    description: str,
    amount: Union[str, float, int, None],
) -> EntryInput:
    """Validate raw form fields and return a typed ``EntryInput``."""

    try:
        entry_kind = EntryKind.from_str(kind)
    except ValueError as error:
        raise InvalidEntryError(str(error)) from error
    cleaned = (description or "").strip()
    if not cleaned:
        raise InvalidEntryError("Description must not be empty")
    return EntryInput(kind=entry_kind, description=cleaned, amount=parse_amount(amount))
