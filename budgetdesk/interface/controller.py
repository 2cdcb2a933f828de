"""Mini README: Orchestration between the web layer and the ledger.

Structure:
    * ItemUpdate - result of an add or delete, ready to serialise.
    * BudgetController - runs the mutate, recompute and snapshot pipeline.

Each user action goes through the same strict sequence: change the ledger,
recompute totals, recompute expense shares, then read the snapshots. The
controller receives its ``Ledger`` from the caller, so tests and the app
factory decide which instance it drives.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Union

from ..budget import EntryKind, Ledger, parse_entry_input
from ..budget.ledger import Entry
from ..logging_utils import get_logger
from ..utils.formatting import (
    format_amount,
    format_budget,
    format_percentage,
    month_label,
    parse_row_id,
    row_id,
)

LOGGER = get_logger(__name__)


def entry_row(entry: Entry) -> Dict[str, object]:
    """Describe a list row for the template or the page script."""

    row: Dict[str, object] = {
        "row_id": row_id(entry.kind, entry.entry_id),
        "kind": entry.kind.value,
        "id": entry.entry_id,
        "description": entry.description,
        "amount": entry.amount,
        "amount_label": format_amount(entry.amount, entry.kind),
    }
    if entry.is_expense:
        row["share_percent"] = entry.share_percent
        row["share_label"] = format_percentage(entry.share_percent)
    return row


@dataclass(slots=True)
class ItemUpdate:
    """Refreshed page state after an add or delete."""

    budget: Dict[str, object]
    percentages: List[Dict[str, object]]
    item: Optional[Dict[str, object]] = None
    removed: Optional[str] = None

    def as_dict(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "budget": self.budget,
            "percentages": self.percentages,
        }
        if self.item is not None:
            payload["item"] = self.item
        if self.removed is not None:
            payload["removed"] = self.removed
        return payload


class BudgetController:
    """Drive a ``Ledger`` on behalf of the page."""

    def __init__(self, ledger: Ledger) -> None:
        self._ledger = ledger

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    def _refresh(self) -> None:
        self._ledger.recompute_totals()
        self._ledger.recompute_expense_shares()

    def add_item(
        self,
        kind: Union[EntryKind, str],
        description: str,
        amount: Union[str, float, None],
    ) -> ItemUpdate:
        """Validate and record a new entry.

        ``InvalidEntryError`` propagates unchanged and the ledger is left as
        it was.
        """

        entry_input = parse_entry_input(kind, description, amount)
        entry = self._ledger.add(entry_input.kind, entry_input.description, entry_input.amount)
        self._refresh()
        LOGGER.info("Recorded %s '%s' for %.2f", entry.kind.value, entry.description, entry.amount)
        return ItemUpdate(
            budget=self.budget_view(),
            percentages=self.percentages_view(),
            item=entry_row(entry),
        )

    def delete_item(self, composite_id: str) -> ItemUpdate:
        """Remove the row named by ``composite_id`` such as ``exp-3``."""

        kind, entry_id = parse_row_id(composite_id)
        self._ledger.remove(kind, entry_id)
        self._refresh()
        LOGGER.info("Deleted row %s", composite_id)
        return ItemUpdate(
            budget=self.budget_view(),
            percentages=self.percentages_view(),
            removed=row_id(kind, entry_id),
        )

    def budget_view(self) -> Dict[str, object]:
        """Aggregate snapshot with raw figures and display labels."""

        snapshot = self._ledger.snapshot_aggregate()
        view = snapshot.as_dict()
        view["labels"] = {
            "budget": format_budget(snapshot.budget),
            "total_income": format_amount(snapshot.total_income, EntryKind.INCOME),
            "total_expense": format_amount(snapshot.total_expense, EntryKind.EXPENSE),
            "spent_percent": format_percentage(snapshot.spent_percent),
        }
        return view

    def percentages_view(self) -> List[Dict[str, object]]:
        """Per-expense shares in display order, keyed by row id."""

        expenses = self._ledger.entries(EntryKind.EXPENSE)
        shares = self._ledger.snapshot_expense_shares()
        return [
            {
                "row_id": row_id(entry.kind, entry.entry_id),
                "share_percent": share,
                "label": format_percentage(share),
            }
            for entry, share in zip(expenses, shares)
        ]

    def page_context(self, today: date) -> Dict[str, object]:
        """Everything the dashboard template renders."""

        return {
            "month_label": month_label(today),
            "budget": self.budget_view(),
            "income_rows": [entry_row(entry) for entry in self._ledger.entries(EntryKind.INCOME)],
            "expense_rows": [entry_row(entry) for entry in self._ledger.entries(EntryKind.EXPENSE)],
        }
