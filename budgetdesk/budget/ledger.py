"""Mini README: In-memory bookkeeping engine for income and expense entries.

Structure:
    * EntryKind - enum tagging an entry as income or expense.
    * IdPolicy - how the next identifier of a collection is chosen.
    * Entry - dataclass shared by both kinds; only expenses use the share.
    * BudgetSnapshot - read-only aggregate of totals, budget and percentage.
    * Ledger - owns both collections and derives the aggregates on request.

Aggregates are never kept in sync automatically. Callers mutate the ledger
with ``add``/``remove`` and then run ``recompute_totals`` followed by
``recompute_expense_shares`` before reading the snapshots. Percentages are
rounded half away from zero and fall back to ``PERCENT_SENTINEL`` whenever
total income is zero or negative.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

PERCENT_SENTINEL = -1


class EntryKind(str, Enum):
    """Enumerate the two entry collections using their wire prefixes."""

    INCOME = "inc"
    EXPENSE = "exp"

    @classmethod
    def from_str(cls, value: Union[str, "EntryKind"]) -> "EntryKind":
        """Coerce arbitrary casing (or an existing member) into a kind."""

        if isinstance(value, cls):
            return value
        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported entry kind: {value}") from error


class IdPolicy(str, Enum):
    """Identifier strategies for newly added entries.

    ``LAST_ENTRY`` derives the next id from the last element of the
    collection, so deleting the tail can hand the same id out again.
    ``MONOTONIC`` keeps a per-kind counter and never reuses an id.
    """

    LAST_ENTRY = "last_entry"
    MONOTONIC = "monotonic"


@dataclass(slots=True)
class Entry:
    """Single income or expense record."""

    kind: EntryKind
    entry_id: int
    description: str
    amount: float
    share_percent: int = PERCENT_SENTINEL

    @property
    def is_expense(self) -> bool:
        return self.kind is EntryKind.EXPENSE

    def as_dict(self) -> Dict[str, object]:
        """Export the entry with serialisable values."""

        payload: Dict[str, object] = {
            "kind": self.kind.value,
            "id": self.entry_id,
            "description": self.description,
            "amount": self.amount,
        }
        if self.is_expense:
            payload["share_percent"] = self.share_percent
        return payload


@dataclass(frozen=True, slots=True)
class BudgetSnapshot:
    """Aggregate figures as of the last ``recompute_totals`` call."""

    budget: float
    total_income: float
    total_expense: float
    spent_percent: int

    def as_dict(self) -> Dict[str, object]:
        return {
            "budget": self.budget,
            "total_income": self.total_income,
            "total_expense": self.total_expense,
            "spent_percent": self.spent_percent,
        }


def round_half_away(value: float) -> int:
    """Round to the nearest integer, sending exact halves away from zero."""

    magnitude = abs(value)
    whole = math.floor(magnitude)
    # magnitude - whole is exact, unlike magnitude + 0.5
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


def percent_of(value: float, total: float) -> int:
    """Return ``value`` as a whole percentage of ``total`` or the sentinel."""

    if not total > 0:
        return PERCENT_SENTINEL
    ratio = value / total * 100
    if not math.isfinite(ratio):
        return PERCENT_SENTINEL
    return round_half_away(ratio)


class Ledger:
    """Own income and expense entries plus their derived aggregates."""

    def __init__(self, id_policy: Union[IdPolicy, str] = IdPolicy.LAST_ENTRY) -> None:
        self._id_policy = IdPolicy(id_policy)
        self._entries: Dict[EntryKind, List[Entry]] = {kind: [] for kind in EntryKind}
        self._issued: Dict[EntryKind, Optional[int]] = {kind: None for kind in EntryKind}
        self._totals: Dict[EntryKind, float] = {kind: 0.0 for kind in EntryKind}
        self._budget = 0.0
        self._spent_percent = PERCENT_SENTINEL
        LOGGER.debug("Ledger initialised with id policy %s", self._id_policy.value)

    @property
    def id_policy(self) -> IdPolicy:
        return self._id_policy

    def _next_id(self, kind: EntryKind) -> int:
        if self._id_policy is IdPolicy.MONOTONIC:
            last_issued = self._issued[kind]
            return 0 if last_issued is None else last_issued + 1
        collection = self._entries[kind]
        return collection[-1].entry_id + 1 if collection else 0

    def add(self, kind: Union[EntryKind, str], description: str, amount: float) -> Entry:
        """Append a new entry to the collection for ``kind`` and return it.

        Input is taken as given; rejecting empty descriptions or non-positive
        amounts is up to the caller.
        """

        kind = EntryKind.from_str(kind)
        entry = Entry(
            kind=kind,
            entry_id=self._next_id(kind),
            description=description,
            amount=amount,
        )
        self._entries[kind].append(entry)
        self._issued[kind] = entry.entry_id
        LOGGER.debug("Added %s entry %s (%s)", kind.value, entry.entry_id, amount)
        return entry

    def remove(self, kind: Union[EntryKind, str], entry_id: int) -> None:
        """Drop the entry with ``entry_id``; unknown ids leave the ledger untouched."""

        kind = EntryKind.from_str(kind)
        collection = self._entries[kind]
        for index, entry in enumerate(collection):
            if entry.entry_id == entry_id:
                del collection[index]
                LOGGER.debug("Removed %s entry %s", kind.value, entry_id)
                return
        LOGGER.debug("No %s entry with id %s to remove", kind.value, entry_id)

    def recompute_totals(self) -> None:
        """Sum both collections and derive the budget and spent percentage."""

        for kind, collection in self._entries.items():
            total = 0.0
            for entry in collection:
                total += entry.amount
            self._totals[kind] = total
        total_income = self._totals[EntryKind.INCOME]
        total_expense = self._totals[EntryKind.EXPENSE]
        self._budget = total_income - total_expense
        self._spent_percent = percent_of(total_expense, total_income)

    def recompute_expense_shares(self) -> None:
        """Refresh every expense share against the current income total."""

        total_income = self._totals[EntryKind.INCOME]
        for entry in self._entries[EntryKind.EXPENSE]:
            entry.share_percent = percent_of(entry.amount, total_income)

    def snapshot_aggregate(self) -> BudgetSnapshot:
        return BudgetSnapshot(
            budget=self._budget,
            total_income=self._totals[EntryKind.INCOME],
            total_expense=self._totals[EntryKind.EXPENSE],
            spent_percent=self._spent_percent,
        )

    def snapshot_expense_shares(self) -> List[int]:
        """Return expense shares in display order."""

        return [entry.share_percent for entry in self._entries[EntryKind.EXPENSE]]

    def entries(self, kind: Union[EntryKind, str]) -> Tuple[Entry, ...]:
        """Return the entries of one collection in display order."""

        return tuple(self._entries[EntryKind.from_str(kind)])
