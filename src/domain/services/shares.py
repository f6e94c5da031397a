"""Per-expense share computation."""

from collections.abc import Callable
from dataclasses import replace
from decimal import Decimal

from src.domain.errors import (
    ExpenseCalculationError,
    ExpenseDistributionError,
    InvalidAmountError,
    InvalidDistributionError,
    InvalidPercentageSumError,
    InvalidShareWeightsError,
    InvalidSplitError,
)
from src.domain.models import Expense, ShareSpec, SplitType
from src.domain.services.currency import (
    add,
    distribute,
    distribute_by_percentages,
    distribute_by_shares,
    is_equal,
    round_money,
    to_decimal,
)


def _equal_amounts(total: Decimal, shares: list[ShareSpec]) -> list[Decimal]:
    return distribute(total, len(shares))


def _percentage_amounts(
    total: Decimal,
    shares: list[ShareSpec],
) -> list[Decimal]:
    return distribute_by_percentages(total, [share.value for share in shares])


def _custom_amounts(total: Decimal, shares: list[ShareSpec]) -> list[Decimal]:
    values = [to_decimal(share.value) for share in shares]
    if any(value < 0 for value in values):
        raise InvalidSplitError("Custom amounts must be non-negative")
    declared = sum(values, Decimal("0"))
    if not is_equal(declared, total):
        raise InvalidSplitError(
            f"Custom amounts sum to {declared}, expected {total}"
        )
    return [round_money(value) for value in values]


def _weighted_amounts(
    total: Decimal,
    shares: list[ShareSpec],
) -> list[Decimal]:
    return distribute_by_shares(total, [share.value for share in shares])


_SPLITTERS: dict[
    SplitType,
    Callable[[Decimal, list[ShareSpec]], list[Decimal]],
] = {
    SplitType.EQUAL: _equal_amounts,
    SplitType.PERCENTAGE: _percentage_amounts,
    SplitType.CUSTOM: _custom_amounts,
    SplitType.SHARES: _weighted_amounts,
}


def compute_expense_shares(expense: Expense) -> list[ShareSpec]:
    """Compute each participant's share of an expense.

    The returned specs are copies of ``expense.participants`` with
    ``amount`` filled in; the expense itself is left untouched.

    Args:
        expense: Expense to split.

    Returns:
        list[ShareSpec]: Share specs in participant order.

    Raises:
        InvalidSplitError: If the split specification does not fit the
            expense (bad percentages, custom sums or weights).
        ExpenseDistributionError: If the total cannot be distributed, e.g.
            an EQUAL split without participants.
        ExpenseCalculationError: If the expense amount is not a number.
    """
    context = {"expense_id": expense.id, "description": expense.description}
    try:
        split_type = SplitType(expense.split_type)
    except ValueError as exc:
        raise InvalidSplitError(
            f"Unknown split type: {expense.split_type}",
            **context,
        ) from exc

    shares = list(expense.participants)
    try:
        total = round_money(expense.amount)
        amounts = _SPLITTERS[split_type](total, shares)
    except InvalidSplitError as exc:
        raise InvalidSplitError(exc.reason, **context) from exc
    except InvalidDistributionError as exc:
        raise ExpenseDistributionError(str(exc), **context) from exc
    except (InvalidPercentageSumError, InvalidShareWeightsError) as exc:
        raise InvalidSplitError(str(exc), **context) from exc
    except InvalidAmountError as exc:
        raise ExpenseCalculationError(str(exc), **context) from exc

    computed = add(*amounts)
    if computed != total:
        raise InvalidSplitError(
            f"Shares sum to {computed}, expected {total}",
            **context,
        )
    return [
        replace(share, amount=amount)
        for share, amount in zip(shares, amounts)
    ]


__all__ = ["compute_expense_shares"]
