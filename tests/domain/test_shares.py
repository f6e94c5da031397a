"""Tests for per-expense share computation."""

from decimal import Decimal

import pytest

from src.domain.errors import (
    ExpenseCalculationError,
    ExpenseDistributionError,
    InvalidSplitError,
)
from src.domain.models import Expense, ShareSpec, SplitType
from src.domain.services.shares import compute_expense_shares


def _expense(
    amount: str,
    values: list,
    split_type: SplitType | str = SplitType.EQUAL,
) -> Expense:
    ids = ["alice", "bob", "charlie", "dave"]
    return Expense(
        id="exp-1",
        description="Dinner",
        amount=Decimal(amount),
        paid_by="alice",
        split_type=split_type,
        participants=[
            ShareSpec(user_id=ids[i], name=ids[i].title(), value=Decimal(str(v)))
            for i, v in enumerate(values)
        ],
    )


def test_equal_split_fills_amounts_in_order() -> None:
    """EQUAL splits should give the extra cent to the first participant."""
    expense = _expense("100", [1, 1, 1])

    shares = compute_expense_shares(expense)

    assert [s.amount for s in shares] == [
        Decimal("33.34"),
        Decimal("33.33"),
        Decimal("33.33"),
    ]
    assert [s.user_id for s in shares] == ["alice", "bob", "charlie"]
    assert all(s.amount is None for s in expense.participants)


def test_percentage_split() -> None:
    """PERCENTAGE splits should use values as percentages."""
    shares = compute_expense_shares(
        _expense("100", [50, 30, 20], SplitType.PERCENTAGE)
    )

    assert [s.amount for s in shares] == [
        Decimal("50.00"),
        Decimal("30.00"),
        Decimal("20.00"),
    ]


def test_custom_split_uses_literal_amounts() -> None:
    """CUSTOM splits should keep the declared amounts."""
    shares = compute_expense_shares(
        _expense("100", [40, "35.5", "24.5"], SplitType.CUSTOM)
    )

    assert [s.amount for s in shares] == [
        Decimal("40.00"),
        Decimal("35.50"),
        Decimal("24.50"),
    ]


def test_weighted_split() -> None:
    """SHARES splits should divide by relative weight."""
    shares = compute_expense_shares(_expense("90", [2, 1], "SHARES"))

    assert [s.amount for s in shares] == [Decimal("60.00"), Decimal("30.00")]


def test_custom_split_mismatch_names_the_expense() -> None:
    """Custom amounts that miss the total should abort with context."""
    with pytest.raises(InvalidSplitError) as exc_info:
        compute_expense_shares(_expense("100", [50, 30, 25], SplitType.CUSTOM))

    assert exc_info.value.expense_id == "exp-1"
    assert exc_info.value.description == "Dinner"
    assert "105" in exc_info.value.reason
    assert str(exc_info.value).startswith("Expense exp-1 (Dinner):")


def test_custom_split_rejects_sub_cent_values_that_do_not_add_up() -> None:
    """Rounded custom amounts must still reconstruct the total."""
    with pytest.raises(InvalidSplitError):
        compute_expense_shares(
            _expense("100", ["33.333", "33.333", "33.334"], SplitType.CUSTOM)
        )


def test_invalid_percentages_raise_invalid_split() -> None:
    """Percentages not summing to 100 should be an invalid split."""
    with pytest.raises(InvalidSplitError) as exc_info:
        compute_expense_shares(
            _expense("100", [50, 30, 30], SplitType.PERCENTAGE)
        )

    assert exc_info.value.expense_id == "exp-1"


def test_zero_weights_raise_invalid_split() -> None:
    """Weights summing to zero should be an invalid split."""
    with pytest.raises(InvalidSplitError):
        compute_expense_shares(_expense("100", [0, 0], SplitType.SHARES))


def test_equal_split_without_participants_raises_distribution_error() -> None:
    """EQUAL splits need at least one participant."""
    with pytest.raises(ExpenseDistributionError) as exc_info:
        compute_expense_shares(_expense("10", []))

    assert exc_info.value.expense_id == "exp-1"
    assert isinstance(exc_info.value, ExpenseCalculationError)


def test_unknown_split_type_raises_invalid_split() -> None:
    """Unknown split types should be rejected."""
    with pytest.raises(InvalidSplitError):
        compute_expense_shares(_expense("10", [1], "ROUND_ROBIN"))


def test_zero_amount_gives_zero_shares() -> None:
    """A zero expense should produce zero shares for everyone."""
    shares = compute_expense_shares(_expense("0", [1, 1, 1]))

    assert [s.amount for s in shares] == [Decimal("0.00")] * 3
