"""Cent-exact money arithmetic and distribution helpers.

Every value leaving this module is a ``Decimal`` quantized to two places
with half-up rounding. The distribution helpers always return parts whose
sum equals the (rounded) total exactly.
"""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from src.domain.constants import (
    CENT,
    CURRENCY_SYMBOLS,
    DEFAULT_CURRENCY,
    HUNDRED,
    MONEY_TOLERANCE,
    ZERO,
)
from src.domain.errors import (
    CurrencyDivisionByZeroError,
    InvalidAmountError,
    InvalidDistributionError,
    InvalidPercentageSumError,
    InvalidShareWeightsError,
)
from src.utils.decimal_utils import coerce_decimal


def to_decimal(value) -> Decimal:
    """Convert a raw numeric value into a finite Decimal.

    Args:
        value: Decimal, int, float or numeric string.

    Returns:
        Decimal: The unrounded value.

    Raises:
        InvalidAmountError: If the value is not a finite number.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"Invalid monetary value: {value!r}")
    try:
        result = coerce_decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidAmountError(f"Invalid monetary value: {value!r}") from exc
    if not result.is_finite():
        raise InvalidAmountError(f"Monetary value must be finite: {value!r}")
    return result


def round_money(value) -> Decimal:
    """Round a value to cents using half-up rounding."""
    try:
        return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise InvalidAmountError(
            f"Monetary value out of range: {value!r}"
        ) from exc


def add(*amounts) -> Decimal:
    """Return the rounded sum of ``amounts`` (``0.00`` when empty)."""
    return round_money(sum((to_decimal(amount) for amount in amounts), ZERO))


def subtract(a, b) -> Decimal:
    """Return ``a - b`` rounded to cents."""
    return round_money(to_decimal(a) - to_decimal(b))


def multiply(a, b) -> Decimal:
    """Return ``a * b`` rounded to cents."""
    return round_money(to_decimal(a) * to_decimal(b))


def divide(a, b) -> Decimal:
    """Return ``a / b`` rounded to cents.

    Raises:
        CurrencyDivisionByZeroError: If ``b`` is zero.
    """
    divisor = to_decimal(b)
    if divisor == 0:
        raise CurrencyDivisionByZeroError(f"Cannot divide {a} by zero")
    return round_money(to_decimal(a) / divisor)


def is_equal(a, b) -> bool:
    """Return True when two amounts differ by less than one cent."""
    return abs(to_decimal(a) - to_decimal(b)) < MONEY_TOLERANCE


def is_zero(amount) -> bool:
    """Return True when an amount is within one cent of zero."""
    return abs(to_decimal(amount)) < MONEY_TOLERANCE


def is_valid_amount(value) -> bool:
    """Return True for finite, non-negative values representable in cents."""
    try:
        amount = round_money(value)
    except InvalidAmountError:
        return False
    return amount >= 0


def distribute(total, count: int) -> list[Decimal]:
    """Split ``total`` into ``count`` parts that sum back to ``total``.

    Every part receives the floored per-person amount; the leftover cents go
    one by one to the first parts in input order.

    Args:
        total: Non-negative amount to split.
        count: Number of parts.

    Returns:
        list[Decimal]: Parts in input order.

    Raises:
        InvalidDistributionError: If ``count`` is not positive or ``total``
            is negative.
    """
    if count <= 0:
        raise InvalidDistributionError(
            f"Cannot distribute among {count} participants"
        )
    amount = round_money(total)
    if amount < 0:
        raise InvalidDistributionError(
            f"Cannot distribute a negative total: {amount}"
        )
    total_cents = int(amount.scaleb(2))
    base_cents, remainder_cents = divmod(total_cents, count)
    return [
        Decimal(base_cents + (1 if index < remainder_cents else 0)).scaleb(-2)
        for index in range(count)
    ]


def distribute_by_percentages(total, percentages: Sequence) -> list[Decimal]:
    """Split ``total`` according to percentages summing to 100.

    Args:
        total: Amount to split.
        percentages: One percentage per part.

    Returns:
        list[Decimal]: Parts in input order, summing exactly to ``total``.

    Raises:
        InvalidPercentageSumError: If the percentages are empty, negative or
            do not sum to 100 within one cent.
    """
    values = [to_decimal(pct) for pct in percentages]
    if not values:
        raise InvalidPercentageSumError("No percentages supplied")
    if any(value < 0 for value in values):
        raise InvalidPercentageSumError("Percentages must be non-negative")
    pct_sum = sum(values, Decimal("0"))
    if abs(pct_sum - HUNDRED) > MONEY_TOLERANCE:
        raise InvalidPercentageSumError(
            f"Percentages must sum to 100, got {pct_sum}"
        )
    amount = round_money(total)
    parts = [multiply(amount, value / HUNDRED) for value in values]
    return _assign_residual(amount, parts)


def distribute_by_shares(total, weights: Sequence) -> list[Decimal]:
    """Split ``total`` proportionally to relative weights.

    Args:
        total: Amount to split.
        weights: One non-negative weight per part.

    Returns:
        list[Decimal]: Parts in input order, summing exactly to ``total``.

    Raises:
        InvalidShareWeightsError: If a weight is negative or the weights do
            not sum to a positive number.
    """
    values = [to_decimal(weight) for weight in weights]
    if any(value < 0 for value in values):
        raise InvalidShareWeightsError("Share weights must be non-negative")
    weight_sum = sum(values, Decimal("0"))
    if weight_sum <= 0:
        raise InvalidShareWeightsError("Total shares must be positive")
    amount = round_money(total)
    parts = [multiply(amount, value / weight_sum) for value in values]
    return _assign_residual(amount, parts)


def _assign_residual(total: Decimal, parts: list[Decimal]) -> list[Decimal]:
    # The whole residual goes to the largest part (first one on ties).
    residual = subtract(total, add(*parts))
    if residual != 0:
        largest = max(range(len(parts)), key=lambda index: parts[index])
        parts[largest] = add(parts[largest], residual)
    return parts


def format_money(amount, currency: str = DEFAULT_CURRENCY) -> str:
    """Format an amount for display, e.g. ``$1,234.50`` or ``CHF 10.00``.

    Args:
        amount: Amount to format.
        currency: ISO currency code used to pick the symbol.

    Returns:
        str: Display string with thousands separators and two decimals.

    Raises:
        InvalidAmountError: If the amount is not a finite number.
    """
    value = round_money(amount)
    code = (currency or DEFAULT_CURRENCY).strip().upper()
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,.2f}"
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol:
        return f"{sign}{symbol}{digits}"
    return f"{sign}{code} {digits}"


__all__ = [
    "to_decimal",
    "round_money",
    "add",
    "subtract",
    "multiply",
    "divide",
    "is_equal",
    "is_zero",
    "is_valid_amount",
    "distribute",
    "distribute_by_percentages",
    "distribute_by_shares",
    "format_money",
]
