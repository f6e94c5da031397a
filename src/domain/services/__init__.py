"""Domain services package."""

from .balances import (
    build_debt_relationships,
    calculate_balances,
    fold_debt_graph,
)
from .currency import (
    add,
    distribute,
    distribute_by_percentages,
    distribute_by_shares,
    divide,
    format_money,
    is_equal,
    is_valid_amount,
    is_zero,
    multiply,
    round_money,
    subtract,
    to_decimal,
)
from .legacy import convert_legacy_expense
from .settlement import apply_settlements, optimize_settlements
from .shares import compute_expense_shares

__all__ = [
    "add",
    "apply_settlements",
    "build_debt_relationships",
    "calculate_balances",
    "compute_expense_shares",
    "convert_legacy_expense",
    "distribute",
    "distribute_by_percentages",
    "distribute_by_shares",
    "divide",
    "fold_debt_graph",
    "format_money",
    "is_equal",
    "is_valid_amount",
    "is_zero",
    "multiply",
    "optimize_settlements",
    "round_money",
    "subtract",
    "to_decimal",
]
