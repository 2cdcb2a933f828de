"""Mini README: Tests for entry validation and display formatting helpers.

These confirm that only non-empty descriptions with positive finite amounts
make it through, and that money, percentages, month labels and row keys are
rendered the way the page expects.
"""

from __future__ import annotations

from datetime import date

import pytest

from budgetdesk.budget import PERCENT_SENTINEL, EntryKind, InvalidEntryError, parse_entry_input
from budgetdesk.utils.formatting import (
    format_amount,
    format_budget,
    format_percentage,
    month_label,
    parse_row_id,
    row_id,
)


def test_parse_entry_input_coerces_form_text() -> None:
    entry_input = parse_entry_input("inc", "  Salary ", "1,250.50")

    assert entry_input.kind is EntryKind.INCOME
    assert entry_input.description == "Salary"
    assert entry_input.amount == pytest.approx(1250.5)


@pytest.mark.parametrize("amount", ["", "abc", "0", "-3", "nan", "inf", None, 0, -1.5])
def test_parse_entry_input_rejects_bad_amounts(amount: object) -> None:
    with pytest.raises(InvalidEntryError):
        parse_entry_input("exp", "Coffee", amount)


@pytest.mark.parametrize("description", ["", "   "])
def test_parse_entry_input_rejects_blank_description(description: str) -> None:
    with pytest.raises(InvalidEntryError):
        parse_entry_input("exp", description, "5")


def test_parse_entry_input_rejects_unknown_kind() -> None:
    """Unknown kinds surface as validation errors rather than plain ValueErrors."""

    with pytest.raises(InvalidEntryError, match="Unsupported entry kind"):
        parse_entry_input("transfer", "Move", "5")


@pytest.mark.parametrize(
    ("value", "kind", "expected"),
    [
        (1234.5, EntryKind.INCOME, "+ 1,234.50"),
        (400, "exp", "- 400.00"),
        (1234567.8, "inc", "+ 1,234,567.80"),
        (0, "inc", "+ 0.00"),
    ],
)
def test_format_amount(value: float, kind: object, expected: str) -> None:
    assert format_amount(value, kind) == expected


def test_format_budget_uses_value_sign() -> None:
    assert format_budget(600) == "+ 600.00"
    assert format_budget(0) == "+ 0.00"
    assert format_budget(-2500.5) == "- 2,500.50"


def test_format_percentage_hides_non_positive_values() -> None:
    assert format_percentage(40) == "40%"
    assert format_percentage(0) == "---"
    assert format_percentage(PERCENT_SENTINEL) == "---"


def test_month_label_uses_short_month_names() -> None:
    assert month_label(date(2026, 9, 3)) == "Sept 2026"
    assert month_label(date(2024, 1, 31)) == "Jan 2024"


def test_row_ids_round_trip() -> None:
    assert row_id(EntryKind.EXPENSE, 3) == "exp-3"
    assert parse_row_id("inc-12") == (EntryKind.INCOME, 12)


@pytest.mark.parametrize("value", ["inc", "inc-", "exp-x", "sav-1", "exp--1"])
def test_parse_row_id_rejects_malformed_keys(value: str) -> None:
    with pytest.raises(ValueError):
        parse_row_id(value)


@pytest.mark.parametrize("amount", ["12,50", "1,2,3", "1_000", "1,0000", "12,345,67", "- 5", "1e999"])
def test_parse_amount_rejects_misplaced_separators(amount: str) -> None:
    """Only comma-grouped thousands are accepted, never decimal commas or underscores."""

    with pytest.raises(InvalidEntryError):
        parse_entry_input("exp", "Lunch", amount)


@pytest.mark.parametrize(
    ("amount", "expected"),
    [("12.50", 12.5), ("1,000", 1000.0), ("12,345,678.9", 12345678.9), (".5", 0.5), ("2e3", 2000.0)],
)
def test_parse_amount_accepts_plain_and_grouped_numbers(amount: str, expected: float) -> None:
    assert parse_entry_input("inc", "Pay", amount).amount == pytest.approx(expected)
