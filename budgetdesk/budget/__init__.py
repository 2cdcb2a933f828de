"""Mini README: Budget bookkeeping for Budget Desk.

This package holds the in-memory ledger that records income and expense
entries and derives totals, the net budget and percentage-of-income
figures. The ``validation`` module carries the caller-side checks the web
layer applies before handing input to the ledger.
"""

from .ledger import (
    PERCENT_SENTINEL,
    BudgetSnapshot,
    Entry,
    EntryKind,
    IdPolicy,
    Ledger,
)
from .validation import EntryInput, InvalidEntryError, parse_entry_input

__all__ = [
    "PERCENT_SENTINEL",
    "BudgetSnapshot",
    "Entry",
    "EntryInput",
    "EntryKind",
    "IdPolicy",
    "InvalidEntryError",
    "Ledger",
    "parse_entry_input",
]
