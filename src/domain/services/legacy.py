"""Conversion of legacy expense records into split-aware expenses.

Legacy records only know who paid and who shared, so they always become
EQUAL splits. Every participant must resolve to a display name; records
that cannot be converted produce a failed result instead of raising.
"""

from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models import (
    Expense,
    LegacyConversionResult,
    ShareSpec,
    SplitType,
)
from src.domain.services.currency import is_valid_amount, round_money


def convert_legacy_expense(
    record: Mapping[str, Any],
    names: Mapping[str, str] | None = None,
) -> LegacyConversionResult:
    """Convert a legacy expense record into an EQUAL-split expense.

    Args:
        record: Legacy record with ``_id``/``id``, ``amount``, ``paidBy``,
            ``sharedBy`` and optional ``paidByName``, ``description``,
            ``tripId``, ``category`` and ``date`` keys.
        names: Known display names keyed by participant id.

    Returns:
        LegacyConversionResult: The converted expense, or the reason the
        record could not be converted.
    """
    expense_id = record.get("_id") or record.get("id")
    if not expense_id:
        return LegacyConversionResult.failure("Legacy expense has no id")
    expense_id = str(expense_id)

    paid_by = record.get("paidBy")
    if not paid_by:
        return LegacyConversionResult.failure(
            f"Legacy expense {expense_id} has no payer"
        )

    shared_by = record.get("sharedBy")
    if (
        not isinstance(shared_by, (list, tuple))
        or not shared_by
        or not all(isinstance(user_id, str) and user_id for user_id in shared_by)
    ):
        return LegacyConversionResult.failure(
            f"Legacy expense {expense_id} has no valid sharedBy list"
        )

    raw_amount = record.get("amount")
    if raw_amount is None or not is_valid_amount(raw_amount):
        return LegacyConversionResult.failure(
            f"Legacy expense {expense_id} has an invalid amount: {raw_amount!r}"
        )
    amount = round_money(raw_amount)

    try:
        expense_date = _parse_date(record.get("date"))
    except (TypeError, ValueError):
        return LegacyConversionResult.failure(
            f"Legacy expense {expense_id} has an invalid date: "
            f"{record.get('date')!r}"
        )

    lookup = dict(names or {})
    if record.get("paidByName"):
        lookup.setdefault(paid_by, record["paidByName"])
    unresolved = [
        user_id
        for user_id in dict.fromkeys([paid_by, *shared_by])
        if not lookup.get(user_id)
    ]
    if unresolved:
        return LegacyConversionResult.failure(
            f"Legacy expense {expense_id} references participants without "
            f"names: {', '.join(unresolved)}"
        )

    expense = Expense(
        id=expense_id,
        description=record.get("description") or "",
        amount=amount,
        paid_by=paid_by,
        paid_by_name=lookup[paid_by],
        split_type=SplitType.EQUAL,
        participants=[
            ShareSpec(user_id=user_id, name=lookup[user_id], value=Decimal("1"))
            for user_id in shared_by
        ],
        currency=DEFAULT_CURRENCY,
        trip_id=record.get("tripId"),
        date=expense_date,
        category=record.get("category"),
    )
    return LegacyConversionResult.success(expense)


def _parse_date(value) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    raise TypeError(f"Unsupported date value: {value!r}")


__all__ = ["convert_legacy_expense"]
